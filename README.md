# bitweave

Read and write binary data down to the single bit. bitweave has codecs for
integers of any width and byte order, booleans, non-zero integers, IPv4 and
IPv6 addresses, and nul-terminated byte strings. It also reads lists, sets
and dictionaries whose length is set by a count, a predicate, a bit or byte
size, or the end of the input.

It has no dependencies outside the standard library.

## Installing

```
pip install bitweave
```

## Reading

`bitweave.primitives.Reader` wraps a binary stream, or `bytes` and
`bytearray` directly. It keeps track of the position down to the bit. The
`bits_read` attribute holds the number of bits read so far.

```python
import io
from bitweave.ctx import Endian
from bitweave.primitives import Reader, read_bool, read_int, read_ipv4

reader = Reader(io.BytesIO(bytes([0b01_000000, 1, 2, 3, 4])))
read_bool(reader, bit_size=2)            # True
read_int(reader, width=1, bit_size=6)    # 0, the remaining six bits of the first byte
read_ipv4(reader, Endian.BIG)            # IPv4Address('1.2.3.4')
reader.end()                             # True
```

`read_int(reader, width, signed, endian, bit_size, byte_size, order)` reads
an integer held in a container of `width` bytes:

- By default it reads the whole container. `bit_size` or `byte_size` narrows
  the read, and giving both raises `InvalidParamError`.
- A size larger than the container raises `ParseError`.
- When `endian` is `None` it uses `Endian.native()`, the byte order of the
  running machine.
- Bits are numbered most significant first by default. `Order.LSB0` reverses
  this.

Other readers:

- `Reader.read_bits(count, order)` returns a list of `bool`.
- `Reader.read_bytes(count)` returns `bytes`.
- `Reader.rest()` returns the bits still left from a partly consumed byte.
- `read_bool` accepts only 0 or 1.
- `read_nonzero` rejects 0.
- `read_ipv6` reads an `IPv6Address`.

## Writing

```python
import io
from bitweave.primitives import Writer, write_bool, write_int

stream = io.BytesIO()
writer = Writer(stream)
write_bool(writer, True, bit_size=1)
write_int(writer, 0x7F, width=1, bit_size=7)
writer.finalize()
stream.getvalue()                        # b'\xff'
```

With no stream, `Writer()` writes to an in-memory buffer, and `getvalue()`
returns what it holds.

Bits that do not yet make a whole byte stay in the writer. `rest()` shows
them, and `finalize()` pads them with zeros and writes them out.

`write_int` raises `ParseError` for a value that does not fit in the chosen
number of bits.

The matching writers are:

- `write_bool`
- `write_nonzero`
- `write_ipv4`
- `write_ipv6`
- `write_ip`, which takes either kind of address

## Limits

`bitweave.ctx.Limit` says when a container stops reading:

- `Limit.new_count(n)` reads exactly `n` items.
- `Limit.new_until(predicate)` stops after the first item the predicate
  accepts. That item is included.
- `Limit.new_bit_size(BitSize(n))` and `Limit.new_byte_size(ByteSize(n))`
  stop once that much input has been consumed.
- `Limit.end()` reads until the input runs out.

In place of a `Limit` you may pass a plain `int` (a count), a `BitSize`, a
`ByteSize` or a callable (a predicate).

## Containers

Each item is read or written by a callable that you pass in:

```python
from bitweave.ctx import Endian, Limit
from bitweave.primitives import Reader, Writer, read_int, write_int
from bitweave.sequences import read_list, read_cstring, write_list
from bitweave.maps import read_map

reader = Reader(bytes([0xAA, 0xBB, 0xCC, 0xDD, ord("h"), ord("i"), 0, 1, 0xAA]))
read_list(reader, Limit.new_count(2), lambda r: read_int(r, 2, endian=Endian.LITTLE))
# [0xBBAA, 0xDDCC]
read_cstring(reader)                     # b'hi'
read_map(reader, Limit.end(), lambda r: read_int(r, 1), lambda r: read_int(r, 1))
# {1: 0xAA}

writer = Writer()
write_list(writer, [1, 2], lambda w, v: write_int(w, v, 1))
writer.getvalue()                        # b'\x01\x02'
```

`bitweave.sequences` has these codecs:

- `read_list` and `write_list`.
- `read_optional` and `write_optional`. The writer writes nothing for
  `None`.
- `read_cstring` and `write_cstring`. With a `byte_size`, `read_cstring`
  reads exactly that many bytes, and they must end in the only nul byte.
  `write_cstring` appends the nul byte and rejects interior nul bytes.

The other container modules:

- `bitweave.sets` has `read_set` and `write_set`. A count limit counts the
  items read, not the distinct ones.
- `bitweave.maps` has `read_map` and `write_map`. Each entry is a key
  followed by its value. A predicate receives the latest `(key, value)`
  tuple.

## Errors

Every failure raises a subclass of `bitweave.errors.DekuError`:

- `IncompleteError` means there was not enough data. Its `need` is a
  `NeedSize` with `bit_size()` and `byte_size()`.
- `ParseError`
- `InvalidParamError`
- `DekuAssertionError`
- `IdVariantNotFoundError`
- `DekuIOError`

`to_os_error(error)` turns one into a built-in exception chained to it:

| bitweave error | built-in exception |
|---|---|
| `IncompleteError` | `EOFError` |
| `ParseError`, `InvalidParamError` and `DekuAssertionError` | `ValueError` |
| `IdVariantNotFoundError` | `LookupError` |
| anything else | `OSError` |

## What it does not do

bitweave gives you the codecs, not a way to declare a whole record. There is
no decorator or schema that turns a class description into a reader and a
writer. You compose a record by calling the codecs field by field.

There is also no command-line tool.