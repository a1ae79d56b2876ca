"""Decompression of LZMA (xz stream) and LZ4 block data found in bundles."""

from __future__ import annotations

import lzma
from typing import Iterable, Iterator

import lz4.block

from .binaryreader import BinaryReader

_BUFFER_SIZE = 8192


class DecompressionError(ValueError):
    """Compressed data could not be decoded to the expected size."""


def _decode_lzma(chunks: Iterable[bytes], size: int, concatenated: bool) -> bytes:
    if size < 0:
        raise ValueError(f"Negative decompressed size: {size}")

    out = bytearray()
    decoder = lzma.LZMADecompressor(format=lzma.FORMAT_XZ)
    try:
        for chunk in chunks:
            while chunk and len(out) < size:
                if decoder.eof:
                    if not concatenated:
                        break
                    decoder = lzma.LZMADecompressor(format=lzma.FORMAT_XZ)
                out += decoder.decompress(chunk, max_length=size - len(out))
                chunk = decoder.unused_data if decoder.eof else b""
    except lzma.LZMAError as exc:
        raise DecompressionError(f"Failed to decompress LZMA stream: {exc}") from exc

    if len(out) < size:
        raise DecompressionError(
            f"LZMA stream yielded {len(out)} bytes but {size} were expected"
        )
    return bytes(out)


def decompress_lzma(data: bytes, size: int) -> bytes:
    """Decode ``size`` bytes from one or more concatenated xz streams."""
    return _decode_lzma([bytes(data)], size, concatenated=True)


def _read_chunks(reader: BinaryReader, compressed_size: int) -> Iterator[bytes]:
    remaining = compressed_size
    while remaining > 0:
        count = min(_BUFFER_SIZE, remaining)
        yield reader.read_bytes(count)
        remaining -= count


def decompress_lzma_stream(reader: BinaryReader, compressed_size: int, size: int) -> bytes:
    """Decode ``size`` bytes from the next ``compressed_size`` bytes of ``reader``.

    The whole compressed region is consumed from the reader.
    """
    if compressed_size < 0:
        raise ValueError(f"Negative compressed size: {compressed_size}")
    return _decode_lzma(_read_chunks(reader, compressed_size), size, concatenated=False)


def decompress_lz4(data: bytes, size: int) -> bytes:
    """Decode an LZ4 block (without a size prefix) that expands to ``size`` bytes."""
    if size < 0:
        raise ValueError(f"Negative decompressed size: {size}")
    try:
        out = lz4.block.decompress(bytes(data), uncompressed_size=size)
    except lz4.block.LZ4BlockError as exc:
        raise DecompressionError(f"Failed to decompress LZ4 block: {exc}") from exc
    if len(out) != size:
        raise DecompressionError(
            f"LZ4 block yielded {len(out)} bytes but {size} were expected"
        )
    return out