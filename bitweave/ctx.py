"""Context values that steer how fields are read and written."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Any, Callable


class Endian(enum.Enum):
    """Byte order of a multi-byte value."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def native(cls) -> Endian:
        """Return the byte order of the running machine."""
        return cls.LITTLE if sys.byteorder == "little" else cls.BIG

    @classmethod
    def from_str(cls, s: str) -> Endian:
        """Parse ``"little"`` or ``"big"``; raise ValueError otherwise."""
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"not an endian: {s!r}") from None

    def is_le(self) -> bool:
        return self is Endian.LITTLE

    def is_be(self) -> bool:
        return self is Endian.BIG


class Order(enum.Enum):
    """Bit numbering used when reading or writing partial bytes."""

    MSB0 = "msb0"
    LSB0 = "lsb0"


@dataclass(frozen=True, order=True)
class ByteSize:
    """Size of a field in bytes."""

    value: int


@dataclass(frozen=True, order=True)
class BitSize:
    """Size of a field in bits."""

    value: int

    @classmethod
    def of_bytes(cls, byte_size: int) -> BitSize:
        """Bit size equal to ``byte_size`` bytes."""
        return cls(byte_size * 8)


@dataclass(frozen=True)
class ReadExact:
    """Number of bytes to read exactly."""

    value: int


class LimitKind(enum.Enum):
    COUNT = "count"
    UNTIL = "until"
    BYTE_SIZE = "byte_size"
    BIT_SIZE = "bit_size"
    END = "end"


@dataclass(frozen=True)
class Limit:
    """A limit on how many elements a container reads."""

    kind: LimitKind
    value: Any = None

    @classmethod
    def new_count(cls, count: int) -> Limit:
        """Read exactly ``count`` elements."""
        return cls(LimitKind.COUNT, count)

    @classmethod
    def new_until(cls, predicate: Callable[[Any], bool]) -> Limit:
        """Read until ``predicate`` returns true for the latest element (inclusive)."""
        return cls(LimitKind.UNTIL, predicate)

    @classmethod
    def new_bit_size(cls, size: BitSize | int) -> Limit:
        """Read until the given number of bits has been consumed."""
        return cls(LimitKind.BIT_SIZE, size if isinstance(size, BitSize) else BitSize(size))

    @classmethod
    def new_byte_size(cls, size: ByteSize | int) -> Limit:
        """Read until the given number of bytes has been consumed."""
        return cls(LimitKind.BYTE_SIZE, size if isinstance(size, ByteSize) else ByteSize(size))

    @classmethod
    def end(cls) -> Limit:
        """Read until the reader is exhausted."""
        return cls(LimitKind.END)