"""Codecs for sets of values."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .primitives import Reader, Writer
from .sequences import read_list, write_list

ReadItem = Callable[[Reader], Any]
WriteItem = Callable[[Writer, Any], None]


def read_set(reader: Reader, limit: Any, read_item: ReadItem) -> set:
    """Read items with ``read_item`` into a set until ``limit`` is reached.

    ``limit`` is a :class:`~bitweave.ctx.Limit`, or an int (count), a
    :class:`~bitweave.ctx.BitSize`, a :class:`~bitweave.ctx.ByteSize` or a
    predicate on the latest item.  A count limit counts items read, not
    distinct items.
    """
    return set(read_list(reader, limit, read_item))


def write_set(writer: Writer, items: Iterable[Any], write_item: WriteItem) -> None:
    """Write every item with ``write_item``, in the set's iteration order."""
    write_list(writer, items, write_item)