import lzma
import random

import lz4.block
import pytest

from assetbundle.binaryreader import BinaryReader
from assetbundle.compression import (
    DecompressionError,
    decompress_lz4,
    decompress_lzma,
    decompress_lzma_stream,
)

SAMPLE = b"The quick brown fox jumps over the lazy dog. " * 40


def _noise(size):
    return random.Random(7).randbytes(size)


def test_lzma_round_trip():
    assert decompress_lzma(lzma.compress(SAMPLE), len(SAMPLE)) == SAMPLE


def test_lzma_concatenated_streams():
    data = lzma.compress(b"first-") + lzma.compress(b"second")
    assert decompress_lzma(data, len(b"first-second")) == b"first-second"


def test_lzma_stops_at_requested_size():
    assert decompress_lzma(lzma.compress(SAMPLE), 10) == SAMPLE[:10]


def test_lzma_zero_size_is_empty():
    assert decompress_lzma(lzma.compress(SAMPLE), 0) == b""


def test_lzma_too_short_raises():
    with pytest.raises(DecompressionError):
        decompress_lzma(lzma.compress(b"abc"), 10)


def test_lzma_garbage_raises():
    with pytest.raises(DecompressionError):
        decompress_lzma(b"definitely not xz data", 5)


def test_lzma_negative_size_raises():
    with pytest.raises(ValueError):
        decompress_lzma(lzma.compress(b"abc"), -1)


def test_lzma_stream_reads_from_reader_and_consumes_region():
    payload = _noise(30000)
    compressed = lzma.compress(payload)
    assert len(compressed) > 8192
    prefix = b"JUNK"
    reader = BinaryReader.from_bytes(prefix + compressed + b"TAIL")
    reader.seek_beg(len(prefix))

    result = decompress_lzma_stream(reader, len(compressed), len(payload))

    assert result == payload
    assert reader.position() == len(prefix) + len(compressed)
    assert reader.read_bytes(4) == b"TAIL"


def test_lzma_stream_garbage_raises():
    reader = BinaryReader.from_bytes(b"x" * 64)
    with pytest.raises(DecompressionError):
        decompress_lzma_stream(reader, 64, 10)


def test_lzma_stream_short_reader_raises_eof():
    compressed = lzma.compress(SAMPLE)
    reader = BinaryReader.from_bytes(compressed)
    with pytest.raises(EOFError):
        decompress_lzma_stream(reader, len(compressed) + 100, len(SAMPLE))


def test_lz4_round_trip():
    compressed = lz4.block.compress(SAMPLE, store_size=False)
    assert decompress_lz4(compressed, len(SAMPLE)) == SAMPLE


def test_lz4_high_compression_round_trip():
    compressed = lz4.block.compress(SAMPLE, mode="high_compression", store_size=False)
    assert decompress_lz4(compressed, len(SAMPLE)) == SAMPLE


def test_lz4_wrong_size_raises():
    compressed = lz4.block.compress(SAMPLE, store_size=False)
    with pytest.raises(DecompressionError):
        decompress_lz4(compressed, len(SAMPLE) - 5)


def test_lz4_negative_size_raises():
    with pytest.raises(ValueError):
        decompress_lz4(b"", -3)