"""Extraction of directory entries from the storage blocks of a bundle."""

from __future__ import annotations

from typing import List

from .binaryreader import BinaryReader
from .compression import decompress_lz4, decompress_lzma_stream
from .structures import BlocksInfo, Node, StorageBlock
from .types import CompressionType


class BundleFileBlockReader:
    """Reads entries from block data that starts at the reader's current position.

    The most recently decompressed block is kept so that consecutive entries
    inside one compressed block decode it only once.
    """

    def __init__(self, reader: BinaryReader, blocks_info: BlocksInfo) -> None:
        self._reader = reader
        self._blocks: List[StorageBlock] = list(blocks_info.storage_blocks)
        self._data_offset = reader.position()
        self._cached_index = -1
        self._cached_block = b""

    def _decompress(self, block: StorageBlock, compression: CompressionType) -> bytes:
        if compression is CompressionType.LZMA:
            return decompress_lzma_stream(
                self._reader, block.compressed_size, block.uncompressed_size
            )
        if compression in (CompressionType.LZ4, CompressionType.LZ4HC):
            data = self._reader.read_bytes(block.compressed_size)
            return decompress_lz4(data, block.uncompressed_size)
        raise NotImplementedError(
            f"Bundle compression '{compression.name}' isn't supported"
        )

    def read_entry(self, entry: Node) -> BinaryReader:
        """A reader over the whole decompressed contents of ``entry``."""
        if entry.offset < 0 or entry.size < 0:
            raise ValueError(f"Invalid entry range: offset {entry.offset}, size {entry.size}")
        if entry.size == 0:
            return BinaryReader.from_bytes(b"")

        index = 0
        compressed_offset = 0
        decompressed_offset = 0
        while True:
            if index >= len(self._blocks):
                raise ValueError(f"Entry offset {entry.offset} lies beyond the bundle data")
            block = self._blocks[index]
            if decompressed_offset + block.uncompressed_size > entry.offset:
                break
            compressed_offset += block.compressed_size
            decompressed_offset += block.uncompressed_size
            index += 1

        offset_in_block = entry.offset - decompressed_offset
        remaining = entry.size
        parts = []

        while remaining > 0:
            if index >= len(self._blocks):
                raise ValueError(f"Entry '{entry.path}' runs past the end of the bundle data")
            block = self._blocks[index]
            block_start = self._data_offset + compressed_offset
            count = min(block.uncompressed_size - offset_in_block, remaining)

            if index == self._cached_index:
                parts.append(self._cached_block[offset_in_block:offset_in_block + count])
            else:
                compression = block.flags.compression()
                if compression is CompressionType.NONE:
                    self._reader.seek_beg(block_start + offset_in_block)
                    parts.append(self._reader.read_bytes(count))
                else:
                    self._reader.seek_beg(block_start)
                    self._cached_block = self._decompress(block, compression)
                    self._cached_index = index
                    parts.append(self._cached_block[offset_in_block:offset_in_block + count])

            offset_in_block = 0
            compressed_offset += block.compressed_size
            remaining -= count
            index += 1

        return BinaryReader.from_bytes(b"".join(parts))