"""Reading a bundle file into its header, metadata and entries."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .binaryreader import BinaryReader
from .blockreader import BundleFileBlockReader
from .bundlereader import BundleReader
from .compression import decompress_lz4, decompress_lzma
from .header import BundleHeader
from .sources import FileReadSource
from .structures import BundleMetaData
from .types import CompressionType, EndianType, FileEntryType


class BundleError(ValueError):
    """A bundle file is malformed or uses an unsupported feature."""


@dataclass
class FileIdentifier:
    """Reference from one serialized file to another."""


@dataclass
class FileScheme:
    """A file and the kind of content it holds."""

    file_path: Path
    scheme_type: Optional[FileEntryType] = None
    dependencies: List[FileIdentifier] = field(default_factory=list)


@dataclass
class FileSchemeList(FileScheme):
    """A file scheme that contains other files."""


@dataclass
class BundleFileScheme(FileSchemeList):
    """A bundle file together with its header, metadata and entry readers."""

    scheme_type: Optional[FileEntryType] = FileEntryType.BUNDLE
    header: BundleHeader = field(default_factory=BundleHeader)
    metadata: BundleMetaData = field(default_factory=BundleMetaData)
    entries: Dict[str, BinaryReader] = field(default_factory=dict)

    @classmethod
    def read_scheme(cls, file_path: Union[str, os.PathLike]) -> "BundleFileScheme":
        """Read the bundle stored at ``file_path``."""
        scheme = cls(Path(file_path))
        source = FileReadSource(file_path)
        if not source.is_valid():
            raise BundleError(f"Cannot open bundle file {os.fspath(file_path)}")
        with source:
            scheme.read_from(BinaryReader(source))
        return scheme

    def read_from(self, reader: BinaryReader) -> None:
        """Read a bundle starting at the reader's current position."""
        base_position = reader.position()
        self._read_header(reader)

        if self.header.signature.is_raw_web():
            # Raw and web bundles carry no readable metadata here.
            return

        header_size = reader.position() - base_position
        self._read_file_stream_metadata(reader, base_position)
        self._read_file_stream_data(reader, base_position, header_size)

    def _read_header(self, reader: BinaryReader) -> None:
        header_position = reader.position()
        self.header.read(BundleReader(reader, EndianType.BIG_ENDIAN))

        raw_web = self.header.raw_web
        if self.header.signature.is_raw_web() and raw_web is not None:
            consumed = reader.position() - header_position
            if consumed != raw_web.header_size:
                raise BundleError(f"Read {consumed} but expected {raw_web.header_size}")

    def _read_file_stream_metadata(self, reader: BinaryReader, base_position: int) -> None:
        header = self.header.file_stream
        if header is None:
            raise BundleError("File stream header is missing")

        if header.flags.is_blocks_info_at_the_end():
            reader.seek_beg(base_position + header.size - header.compressed_blocks_info_size)

        try:
            compression = header.flags.compression()
        except ValueError:
            raise BundleError(
                f"Bundle compression {header.flags.value & 0x3F} isn't supported"
            ) from None

        if compression is CompressionType.NONE:
            self._read_metadata(reader, header.uncompressed_blocks_info_size)
            return

        compressed = reader.read_bytes(header.compressed_blocks_info_size)
        if compression is CompressionType.LZMA:
            data = decompress_lzma(compressed, header.uncompressed_blocks_info_size)
        elif compression in (CompressionType.LZ4, CompressionType.LZ4HC):
            data = decompress_lz4(compressed, header.uncompressed_blocks_info_size)
        else:
            raise BundleError(f"Bundle compression '{compression.name}' isn't supported")
        self._read_metadata(BinaryReader.from_bytes(data), header.uncompressed_blocks_info_size)

    def _read_metadata(self, reader: BinaryReader, metadata_size: int) -> None:
        metadata_position = reader.position()
        bundle_reader = BundleReader(
            reader,
            EndianType.BIG_ENDIAN,
            self.header.signature,
            self.header.version,
            self.header.flags(),
        )
        self.metadata.read(bundle_reader)

        if metadata_size > 0:
            consumed = reader.position() - metadata_position
            if consumed != metadata_size:
                raise BundleError(f"Read {consumed} but expected {metadata_size}")

    def _read_file_stream_data(
        self, reader: BinaryReader, base_position: int, header_size: int
    ) -> None:
        header = self.header.file_stream
        if header is not None and header.flags.is_blocks_info_at_the_end():
            reader.seek_beg(base_position + header_size)

        block_reader = BundleFileBlockReader(reader, self.metadata.blocks_info)
        for node in self.metadata.directory_info.nodes:
            self.entries[node.path] = block_reader.read_entry(node)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a bundle file, reporting any failure on standard output."""
    parser = argparse.ArgumentParser(description="Read an asset bundle file.")
    parser.add_argument("path", nargs="?", default="avatar.vrca", help="bundle file to read")
    args = parser.parse_args(argv)

    try:
        BundleFileScheme.read_scheme(args.path)
    except (BundleError, ValueError, OSError, EOFError, NotImplementedError) as exc:
        print(f"Exception:{exc}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())