"""Codecs for mappings of keys to values."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .primitives import Reader, Writer
from .sequences import read_list

ReadItem = Callable[[Reader], Any]
WriteItem = Callable[[Writer, Any], None]


def read_map(reader: Reader, limit: Any, read_key: ReadItem, read_value: ReadItem) -> dict:
    """Read key/value pairs into a dict until ``limit`` is reached.

    Each pair is a key read with ``read_key`` followed by a value read with
    ``read_value``.  ``limit`` is a :class:`~bitweave.ctx.Limit`, or an int
    (count of pairs), a :class:`~bitweave.ctx.BitSize`, a
    :class:`~bitweave.ctx.ByteSize` or a predicate on the latest
    ``(key, value)`` tuple.  A later pair with the same key replaces an
    earlier one.
    """

    def read_pair(source: Reader) -> tuple[Any, Any]:
        key = read_key(source)
        return key, read_value(source)

    return dict(read_list(reader, limit, read_pair))


def write_map(
    writer: Writer, mapping: Mapping[Any, Any], write_key: WriteItem, write_value: WriteItem
) -> None:
    """Write every key followed by its value, in the mapping's iteration order."""
    for key, value in mapping.items():
        write_key(writer, key)
        write_value(writer, value)