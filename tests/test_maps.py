import io

import pytest

from bitweave.ctx import BitSize, ByteSize, Endian, Limit
from bitweave.errors import IncompleteError, ParseError
from bitweave.maps import read_map, write_map
from bitweave.primitives import Reader, Writer, read_int, write_int


def _u8_reader(endian, bit_size):
    def read(reader):
        return read_int(reader, 1, endian=endian, bit_size=bit_size)

    return read


def _run_read(data, endian, bit_size, limit):
    stream = io.BytesIO(bytes(data))
    reader = Reader(stream)
    item = _u8_reader(endian, None if bit_size is None else BitSize(bit_size))
    result = read_map(reader, limit, item, item)
    return result, reader.rest(), stream.read()


@pytest.mark.parametrize(
    "data, bit_size, limit, expected, rest_bits, rest_bytes",
    [
        pytest.param([0xAA], 8, 0, {}, [], b"\xaa", id="count_0"),
        pytest.param([0x01, 0xAA, 0x02, 0xBB], 8, 1, {0x01: 0xAA}, [], b"\x02\xbb", id="count_1"),
        pytest.param(
            [0x01, 0xAA, 0x02, 0xBB, 0xBB], 8, 2, {0x01: 0xAA, 0x02: 0xBB}, [], b"\xbb",
            id="count_2",
        ),
        pytest.param(
            [0x01, 0xAA, 0, 0, 0xBB], None,
            Limit.new_until(lambda kv: kv[0] == 0 and kv[1] == 0),
            {0x01: 0xAA, 0: 0}, [], b"\xbb", id="until_null",
        ),
        pytest.param([0x01, 0xAA, 0xBB], None, BitSize(0), {}, [], b"\x01\xaa\xbb",
                     id="until_empty_bits"),
        pytest.param([0x01, 0xAA, 0xBB], None, ByteSize(0), {}, [], b"\x01\xaa\xbb",
                     id="until_empty_bytes"),
        pytest.param([0x01, 0xAA, 0xBB], None, BitSize(16), {0x01: 0xAA}, [], b"\xbb",
                     id="until_bits"),
        pytest.param([0x01, 0xAA], None, Limit.end(), {0x01: 0xAA}, [], b"", id="read_all"),
        pytest.param([0x01, 0xAA, 0xBB], None, ByteSize(2), {0x01: 0xAA}, [], b"\xbb",
                     id="until_bytes"),
        pytest.param([0x01, 0xAA, 0xBB], None, Limit.new_count(1), {0x01: 0xAA}, [], b"\xbb",
                     id="until_count"),
        pytest.param(
            [0b0000_0100, 0b1111_0000, 0b1000_0000], 6, 2, {0x01: 0x0F, 0x02: 0}, [], b"",
            id="bits_6",
        ),
    ],
)
def test_map_read(data, bit_size, limit, expected, rest_bits, rest_bytes):
    result, bits, remaining = _run_read(data, Endian.LITTLE, bit_size, limit)
    assert result == expected
    assert bits == rest_bits
    assert remaining == rest_bytes


@pytest.mark.parametrize(
    "data, bit_size, limit",
    [
        pytest.param([], 9, 1, id="not_enough_data_empty"),
        pytest.param([0xAA], 9, 1, id="not_enough_data"),
        pytest.param([0xAA, 0xBB], 9, 1, id="too_much_data"),
    ],
)
def test_map_read_too_wide(data, bit_size, limit):
    with pytest.raises(ParseError) as info:
        _run_read(data, Endian.LITTLE, bit_size, limit)
    assert info.value.message == "too much data: container of 8 bits cannot hold 9 bits"


@pytest.mark.parametrize(
    "limit",
    [
        pytest.param(2, id="count"),
        pytest.param(Limit.new_until(lambda kv: False), id="until"),
        pytest.param(BitSize(16), id="bits"),
    ],
)
def test_map_read_incomplete(limit):
    with pytest.raises(IncompleteError) as info:
        _run_read([0xAA], Endian.LITTLE, 8, limit)
    assert info.value.need.bit_size() == 8


def test_map_read_u32_values():
    reader = Reader(io.BytesIO(bytes([100, 1, 2, 3, 4])))
    result = read_map(
        reader,
        1,
        lambda r: read_int(r, 1, endian=Endian.LITTLE),
        lambda r: read_int(r, 4, endian=Endian.LITTLE),
    )
    assert result == {100: 0x04030201}


def test_map_read_duplicate_key_keeps_last():
    reader = Reader(io.BytesIO(bytes([0x01, 0xAA, 0x01, 0xBB])))
    item = _u8_reader(Endian.LITTLE, None)
    assert read_map(reader, 2, item, item) == {0x01: 0xBB}


def test_map_write():
    writer = Writer(io.BytesIO())
    mapping = {0x23: 0xCCDD, 0x11: 0xAABB}
    write_map(
        writer,
        mapping,
        lambda w, k: write_int(w, k, 1, endian=Endian.LITTLE),
        lambda w, v: write_int(w, v, 2, endian=Endian.LITTLE),
    )
    writer.finalize()
    assert writer.getvalue() == bytes([0x23, 0xDD, 0xCC, 0x11, 0xBB, 0xAA])


def test_map_write_big_endian():
    writer = Writer(io.BytesIO())
    write_map(
        writer,
        {100: 0x04030201},
        lambda w, k: write_int(w, k, 1, endian=Endian.BIG),
        lambda w, v: write_int(w, v, 4, endian=Endian.BIG),
    )
    writer.finalize()
    assert writer.getvalue() == bytes([100, 4, 3, 2, 1])


def test_map_round_trip_bits():
    original = {0x01: 0x0F, 0x02: 0x00, 0x3F: 0x2A}
    writer = Writer(io.BytesIO())

    def write_item(w, value):
        write_int(w, value, 1, bit_size=BitSize(6))

    write_map(writer, original, write_item, write_item)
    writer.finalize()
    reader = Reader(io.BytesIO(writer.getvalue()))
    item = _u8_reader(Endian.LITTLE, BitSize(6))
    assert read_map(reader, len(original), item, item) == original