"""Bit-level reader and writer, and codecs for integers, booleans and IP addresses."""

from __future__ import annotations

import io
import ipaddress
from typing import BinaryIO

from .ctx import BitSize, ByteSize, Endian, Order
from .errors import IncompleteError, InvalidParamError, NeedSize, ParseError


def _byte_bits(byte: int) -> list[bool]:
    return [bool(byte >> (7 - i) & 1) for i in range(8)]


def _bits_to_int(bits: list[bool]) -> int:
    value = 0
    for bit in bits:
        value = value << 1 | bit
    return value


def _int_to_bits(value: int, count: int) -> list[bool]:
    return [bool(value >> (count - 1 - i) & 1) for i in range(count)]


class Reader:
    """Reads bits and bytes from a binary stream."""

    def __init__(self, stream: BinaryIO | bytes | bytearray) -> None:
        if isinstance(stream, (bytes, bytearray)):
            stream = io.BytesIO(bytes(stream))
        self.stream = stream
        self.leftover: list[bool] = []
        self.bits_read = 0
        self._lookahead = b""

    def _read_raw(self, count: int) -> bytes:
        data = self._lookahead[:count]
        self._lookahead = self._lookahead[count:]
        if len(data) < count:
            data += self.stream.read(count - len(data)) or b""
        return data

    def read_bits(self, count: int, order: Order = Order.MSB0) -> list[bool]:
        """Read ``count`` bits, returned most significant first."""
        if count <= 0:
            return []
        lsb = order is Order.LSB0
        take = min(count, len(self.leftover))
        chunks: list[list[bool]] = []
        if take:
            if lsb:
                chunks.append(self.leftover[len(self.leftover) - take:])
                self.leftover = self.leftover[: len(self.leftover) - take]
            else:
                chunks.append(self.leftover[:take])
                self.leftover = self.leftover[take:]
        missing = count - take
        if missing:
            nbytes = -(-missing // 8)
            data = self._read_raw(nbytes)
            if len(data) < nbytes:
                raise IncompleteError(NeedSize(count))
            for byte in data:
                bits = _byte_bits(byte)
                k = min(8, missing)
                if lsb:
                    chunks.append(bits[8 - k:])
                    self.leftover = bits[: 8 - k]
                else:
                    chunks.append(bits[:k])
                    self.leftover = bits[k:]
                missing -= k
        if lsb:
            chunks.reverse()
        self.bits_read += count
        return [bit for chunk in chunks for bit in chunk]

    def read_bytes(self, count: int) -> bytes:
        """Read ``count`` whole bytes."""
        if not self.leftover:
            data = self._read_raw(count)
            if len(data) < count:
                raise IncompleteError(NeedSize(count * 8))
            self.bits_read += count * 8
            return data
        bits = self.read_bits(count * 8)
        return bytes(_bits_to_int(bits[i:i + 8]) for i in range(0, len(bits), 8))

    def end(self) -> bool:
        """True when no bits remain."""
        if self.leftover:
            return False
        if not self._lookahead:
            self._lookahead = self.stream.read(1) or b""
        return not self._lookahead

    def rest(self) -> list[bool]:
        """Bits left over from a partially consumed byte."""
        return list(self.leftover)


class Writer:
    """Writes bits and bytes to a binary stream."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self.stream = stream if stream is not None else io.BytesIO()
        self.pending: list[bool] = []
        self.bits_written = 0

    def _flush_full(self) -> None:
        if len(self.pending) == 8:
            self.stream.write(bytes([_bits_to_int(self.pending)]))
            self.pending = []

    def write_bits(self, bits: list[bool], order: Order = Order.MSB0) -> None:
        """Write bits given most significant first."""
        remaining = list(bits)
        self.bits_written += len(remaining)
        while remaining:
            space = 8 - len(self.pending)
            if order is Order.LSB0:
                chunk = remaining[-space:]
                remaining = remaining[: len(remaining) - len(chunk)]
                self.pending = chunk + self.pending
            else:
                chunk = remaining[:space]
                remaining = remaining[space:]
                self.pending += chunk
            self._flush_full()

    def write_bytes(self, data: bytes) -> None:
        if self.pending:
            self.write_bits([b for byte in data for b in _byte_bits(byte)])
        else:
            self.stream.write(bytes(data))
            self.bits_written += len(data) * 8

    def finalize(self) -> None:
        """Pad any partial byte with zeros and write it."""
        if self.pending:
            self.pending += [False] * (8 - len(self.pending))
            self._flush_full()

    def rest(self) -> list[bool]:
        """Bits not yet written as a full byte."""
        return list(self.pending)

    def getvalue(self) -> bytes:
        return self.stream.getvalue()


def _field_bits(width: int, bit_size, byte_size) -> int:
    if bit_size is not None and byte_size is not None:
        raise InvalidParamError("bit size and byte size both given")
    if bit_size is not None:
        nbits = bit_size.value if isinstance(bit_size, BitSize) else int(bit_size)
    elif byte_size is not None:
        nbits = (byte_size.value if isinstance(byte_size, ByteSize) else int(byte_size)) * 8
    else:
        nbits = width * 8
    if nbits > width * 8:
        raise ParseError(
            f"too much data: container of {width * 8} bits cannot hold {nbits} bits"
        )
    return nbits


def read_int(reader, width, signed=False, endian=None, bit_size=None, byte_size=None,
             order=Order.MSB0) -> int:
    """Read an integer of ``width`` bytes, optionally narrowed to a bit or byte size."""
    endian = endian or Endian.native()
    nbits = _field_bits(width, bit_size, byte_size)
    bits = reader.read_bits(nbits, order)
    if endian is Endian.LITTLE and nbits > 8:
        pad = -nbits % 8
        padded = [False] * pad + bits
        value = int.from_bytes(
            bytes(_bits_to_int(padded[i:i + 8]) for i in range(0, len(padded), 8)), "little"
        )
    else:
        value = _bits_to_int(bits)
    if signed and nbits and value >> (nbits - 1) & 1:
        value -= 1 << nbits
    return value


def write_int(writer, value, width, signed=False, endian=None, bit_size=None, byte_size=None,
              order=Order.MSB0) -> None:
    """Write an integer of ``width`` bytes, optionally narrowed to a bit or byte size."""
    endian = endian or Endian.native()
    nbits = _field_bits(width, bit_size, byte_size)
    if signed:
        low, high = -(1 << (nbits - 1)) if nbits else 0, (1 << (nbits - 1)) - 1 if nbits else 0
    else:
        low, high = 0, (1 << nbits) - 1
    if not low <= value <= high:
        raise ParseError(f"value {value} does not fit in {nbits} bits")
    value &= (1 << nbits) - 1
    if endian is Endian.LITTLE and nbits > 8:
        nbytes = -(-nbits // 8)
        raw = value.to_bytes(nbytes, "little")
        bits = [b for byte in raw for b in _byte_bits(byte)][nbytes * 8 - nbits:]
    else:
        bits = _int_to_bits(value, nbits)
    writer.write_bits(bits, order)


def read_bool(reader, endian=None, bit_size=None, order=Order.MSB0) -> bool:
    value = read_int(reader, 1, endian=endian, bit_size=bit_size, order=order)
    if value == 1:
        return True
    if value == 0:
        return False
    raise ParseError(f"cannot parse bool value: {value}")


def write_bool(writer, value, endian=None, bit_size=None, order=Order.MSB0) -> None:
    write_int(writer, 1 if value else 0, 1, endian=endian, bit_size=bit_size, order=order)


def read_nonzero(reader, width, signed=False, endian=None, bit_size=None, byte_size=None,
                 order=Order.MSB0) -> int:
    value = read_int(reader, width, signed, endian, bit_size, byte_size, order)
    if value == 0:
        raise ParseError("NonZero assertion")
    return value


def write_nonzero(writer, value, width, signed=False, endian=None, bit_size=None,
                  byte_size=None, order=Order.MSB0) -> None:
    if value == 0:
        raise ParseError("NonZero assertion")
    write_int(writer, value, width, signed, endian, bit_size, byte_size, order)


def read_ipv4(reader, endian=None) -> ipaddress.IPv4Address:
    return ipaddress.IPv4Address(read_int(reader, 4, endian=endian))


def write_ipv4(writer, address, endian=None) -> None:
    write_int(writer, int(address), 4, endian=endian)


def read_ipv6(reader, endian=None) -> ipaddress.IPv6Address:
    return ipaddress.IPv6Address(read_int(reader, 16, endian=endian))


def write_ipv6(writer, address, endian=None) -> None:
    write_int(writer, int(address), 16, endian=endian)


def write_ip(writer, address, endian=None) -> None:
    if isinstance(address, ipaddress.IPv4Address):
        write_ipv4(writer, address, endian)
    else:
        write_ipv6(writer, address, endian)