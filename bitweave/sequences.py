"""Codecs for lists, optional values and nul-terminated byte strings."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator

from .ctx import BitSize, ByteSize, Limit, LimitKind
from .errors import ParseError
from .primitives import Reader, Writer, read_int, write_int

ReadItem = Callable[[Reader], Any]
WriteItem = Callable[[Writer, Any], None]


def _as_limit(limit: Any) -> Limit:
    if isinstance(limit, Limit):
        return limit
    if isinstance(limit, BitSize):
        return Limit.new_bit_size(limit)
    if isinstance(limit, ByteSize):
        return Limit.new_byte_size(limit)
    if isinstance(limit, int):
        return Limit.new_count(limit)
    if callable(limit):
        return Limit.new_until(limit)
    raise TypeError(f"cannot use {limit!r} as a limit")


def _read_while(
    reader: Reader, read_item: ReadItem, done: Callable[[int, Any], bool]
) -> Iterator[Any]:
    start = reader.bits_read
    while True:
        value = read_item(reader)
        yield value
        if done(reader.bits_read - start, value):
            return


def read_list(reader: Reader, limit: Any, read_item: ReadItem) -> list:
    """Read items with ``read_item`` until ``limit`` is reached.

    ``limit`` is a :class:`Limit`, or an int (count), a :class:`BitSize`,
    a :class:`ByteSize` or a predicate, converted as the matching ``Limit``.
    """
    limit = _as_limit(limit)
    kind = limit.kind
    if kind is LimitKind.COUNT:
        count = limit.value
        if count == 0:
            return []
        return [read_item(reader) for _ in range(count)]
    if kind is LimitKind.UNTIL:
        predicate = limit.value
        return list(_read_while(reader, read_item, lambda _bits, value: predicate(value)))
    if kind in (LimitKind.BIT_SIZE, LimitKind.BYTE_SIZE):
        bit_size = limit.value.value * (8 if kind is LimitKind.BYTE_SIZE else 1)
        if bit_size == 0:
            return []
        return list(_read_while(reader, read_item, lambda bits, _value: bits == bit_size))
    items = []
    while not reader.end():
        items.append(read_item(reader))
    return items


def write_list(writer: Writer, items: Iterable[Any], write_item: WriteItem) -> None:
    """Write every item in order with ``write_item``."""
    for item in items:
        write_item(writer, item)


def read_optional(reader: Reader, read_item: ReadItem) -> Any:
    """Read a value that is present; reading always yields a value."""
    return read_item(reader)


def write_optional(writer: Writer, value: Any, write_item: WriteItem) -> None:
    """Write ``value`` unless it is None."""
    if value is not None:
        write_item(writer, value)


def _strip_nul(data: bytes) -> bytes:
    pos = data.find(b"\0")
    if pos == -1:
        raise ParseError(
            "Failed to convert Vec to CString: data provided is not nul terminated"
        )
    if pos + 1 != len(data):
        raise ParseError(
            "Failed to convert Vec to CString: data provided contains an interior "
            f"nul byte at pos {pos}"
        )
    return data[:pos]


def _read_byte(reader: Reader) -> int:
    return read_int(reader, 1)


def read_cstring(reader: Reader, byte_size: ByteSize | int | None = None) -> bytes:
    """Read a nul-terminated string and return it without the terminator.

    With ``byte_size`` exactly that many bytes are read and must end with
    the only nul; without it bytes are read up to and including the first nul.
    """
    if byte_size is None:
        raw = read_list(reader, Limit.new_until(lambda b: b == 0), _read_byte)
    else:
        size = byte_size.value if isinstance(byte_size, ByteSize) else int(byte_size)
        raw = read_list(reader, Limit.new_count(size), _read_byte)
    return _strip_nul(bytes(raw))


def write_cstring(writer: Writer, value: bytes | str) -> None:
    """Write ``value`` followed by a nul byte."""
    data = value.encode() if isinstance(value, str) else bytes(value)
    pos = data.find(b"\0")
    if pos != -1:
        raise ParseError(f"data provided contains an interior nul byte at pos {pos}")
    for byte in data + b"\0":
        write_int(writer, byte, 1)