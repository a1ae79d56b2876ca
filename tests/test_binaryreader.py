import struct
import sys

import pytest

from assetbundle.binaryreader import BinaryReader, EndianReader, endian_swap
from assetbundle.sources import MemoryReadSource, SourceType
from assetbundle.types import EndianType


def test_from_bytes_is_valid_memory():
    reader = BinaryReader.from_bytes(b"")
    assert reader.is_valid() is True
    assert reader.read_source().interface_type() is SourceType.MEMORY


def test_from_path(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(struct.pack("=i", -5) + b"name\0")
    reader = BinaryReader.from_path(path)
    assert reader.is_valid() is True
    assert reader.read_int32() == -5
    assert reader.read_string() == "name"
    reader.read_source().close()


def test_from_missing_path_invalid(tmp_path):
    assert BinaryReader.from_path(tmp_path / "nope").is_valid() is False


def test_single_byte_reads():
    reader = BinaryReader.from_bytes(b"A\x00\x02" + struct.pack("b", -1) + b"\xfe")
    assert reader.read_char() == "A"
    assert reader.read_bool() is False
    assert reader.read_bool() is True
    assert reader.read_int8() == -1
    assert reader.read_uint8() == 0xFE


@pytest.mark.parametrize(
    "method, code, value",
    [
        ("read_int16", "h", -1234),
        ("read_uint16", "H", 54321),
        ("read_int32", "i", -123456789),
        ("read_uint32", "I", 4000000000),
        ("read_int64", "q", -(2**40)),
        ("read_uint64", "Q", 2**63 + 7),
        ("read_float", "f", 1.5),
        ("read_double", "d", -2.25),
    ],
)
def test_native_round_trip(method, code, value):
    reader = BinaryReader.from_bytes(struct.pack("=" + code, value))
    assert getattr(reader, method)() == value
    assert reader.position() == struct.calcsize("=" + code)


@pytest.mark.parametrize("endianness, order", [
    (EndianType.BIG_ENDIAN, ">"),
    (EndianType.LITTLE_ENDIAN, "<"),
])
@pytest.mark.parametrize(
    "method, code, value",
    [
        ("read_int16", "h", -300),
        ("read_uint32", "I", 0xDEADBEEF),
        ("read_int64", "q", -99999999999),
        ("read_double", "d", 3.75),
    ],
)
def test_endian_round_trip(endianness, order, method, code, value):
    base = BinaryReader.from_bytes(struct.pack(order + code, value))
    reader = EndianReader(base, endianness)
    assert reader.endianness() is endianness
    assert getattr(reader, method)() == value


def test_big_endian_wire_order():
    reader = EndianReader(BinaryReader.from_bytes(b"\x01\x02"), EndianType.BIG_ENDIAN)
    assert reader.read_uint16() == 0x0102


def test_endian_reader_shares_source():
    base = BinaryReader.from_bytes(struct.pack(">I", 9) + b"x")
    reader = EndianReader(base, EndianType.BIG_ENDIAN)
    assert reader.read_uint32() == 9
    assert base.position() == reader.position()
    assert base.read_char() == "x"


def test_computer_endianness():
    expected = EndianType.BIG_ENDIAN if sys.byteorder == "big" else EndianType.LITTLE_ENDIAN
    assert EndianReader.computer_endianness() is expected


def test_native_vectors():
    values = [1, -2, 3]
    data = struct.pack("=i", len(values)) + struct.pack("=3h", *values)
    assert BinaryReader.from_bytes(data).read_int16_vector() == values


@pytest.mark.parametrize(
    "method, code, values",
    [
        ("read_int8_vector", "b", [-1, 2]),
        ("read_uint8_vector", "B", [200, 3, 4]),
        ("read_uint16_vector", "H", [65535, 0]),
        ("read_int32_vector", "i", [-7, 8]),
        ("read_uint32_vector", "I", [1, 2, 3]),
        ("read_int64_vector", "q", [-(2**50)]),
        ("read_uint64_vector", "Q", [2**64 - 1]),
        ("read_float_vector", "f", [0.5, -4.0]),
        ("read_double_vector", "d", [1.25]),
        ("read_int16_vector", "h", []),
    ],
)
def test_big_endian_vectors(method, code, values):
    data = struct.pack(">i", len(values)) + struct.pack(f">{len(values)}{code}", *values)
    reader = EndianReader(BinaryReader.from_bytes(data), EndianType.BIG_ENDIAN)
    assert getattr(reader, method)() == values
    assert reader.position() == len(data)


def test_negative_vector_length():
    reader = BinaryReader.from_bytes(struct.pack("=i", -1))
    with pytest.raises(ValueError):
        reader.read_uint8_vector()


def test_short_read_raises():
    reader = BinaryReader.from_bytes(b"\x00\x01")
    with pytest.raises(EOFError):
        reader.read_int32()


def test_read_bytes_and_seek():
    reader = BinaryReader.from_bytes(b"0123456789")
    reader.seek_beg(2)
    assert reader.read_bytes(3) == b"234"
    reader.seek_rel(-1)
    assert reader.read_bytes(1) == b"4"


def test_align_stream():
    reader = BinaryReader.from_bytes(bytes(16))
    reader.align_stream()
    assert reader.position() == 0
    reader.seek_beg(1)
    reader.align_stream()
    assert reader.position() == 4
    reader.align_stream()
    assert reader.position() == 4
    reader.seek_beg(7)
    reader.align_stream()
    assert reader.position() % 4 == 0
    assert 7 < reader.position() < 7 + 4


def test_reader_over_existing_source():
    source = MemoryReadSource(b"ab")
    first = BinaryReader(source)
    second = BinaryReader(first.read_source())
    assert first.read_char() == "a"
    assert second.read_char() == "b"


def test_endian_swap():
    data = b"\x01\x02\x03\x04"
    assert endian_swap(data) == data[::-1]
    assert endian_swap(endian_swap(data)) == data