"""Errors raised while reading or writing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NeedSize:
    """Number of bits needed to retry parsing."""

    bits: int

    def bit_size(self) -> int:
        return self.bits

    def byte_size(self) -> int:
        return -(-self.bits // 8)


class DekuError(Exception):
    """Base of all errors from this package."""


class IncompleteError(DekuError):
    """Not enough data was available."""

    def __init__(self, need: NeedSize) -> None:
        self.need = need
        super().__init__(
            f"Not enough data, need {need.bit_size()} bits (or {need.byte_size()} bytes)"
        )


class ParseError(DekuError):
    """Data could not be parsed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Parse error: {message}")


class InvalidParamError(DekuError):
    """A parameter was invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid param error: {message}")


class DekuAssertionError(DekuError):
    """An assertion on a field failed."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__("Assertion error" if message is None else f"Assertion error: {message}")


class IdVariantNotFoundError(DekuError):
    """No variant matched the id."""

    def __init__(self) -> None:
        super().__init__("Could not resolve `id` for variant")


class DekuIOError(DekuError):
    """The underlying stream failed."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"io error: {kind}")


def to_os_error(error: DekuError) -> Exception:
    """Convert to the matching built-in exception, chained to ``error``."""
    if isinstance(error, IncompleteError):
        result: Exception = EOFError(str(error))
    elif isinstance(error, (ParseError, DekuAssertionError, InvalidParamError)):
        result = ValueError(str(error))
    elif isinstance(error, IdVariantNotFoundError):
        result = LookupError(str(error))
    else:
        result = OSError(str(error))
    result.__cause__ = error
    return result