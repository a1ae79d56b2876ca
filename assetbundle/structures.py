"""Structures stored in a bundle's metadata: hashes, scenes, blocks and nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .bundlereader import BundleReadable, BundleReader
from .filenameutils import fix_file_identifier
from .types import BundleType, StorageBlockFlags
from .version import Version


@dataclass
class Hash128(BundleReadable):
    """A 128-bit hash stored as four 32-bit words."""

    data0: int = 0
    data1: int = 0
    data2: int = 0
    data3: int = 0

    BYTE_NAMES = tuple(f"bytes[{index}]" for index in range(16))
    HASH_NAME = "Hash"

    @staticmethod
    def to_serialized_version(version: Version) -> int:
        """Serialized layout version used for this hash by an engine version."""
        return 2 if version >= Version(5) else 1

    def read(self, reader: BundleReader) -> None:
        self.data0 = reader.read_uint32()
        self.data1 = reader.read_uint32()
        self.data2 = reader.read_uint32()
        self.data3 = reader.read_uint32()


@dataclass
class BundleScene(BundleReadable):
    """Compressed and decompressed sizes of one scene of a raw or web bundle."""

    compressed_size: int = 0
    decompressed_size: int = 0

    def read(self, reader: BundleReader) -> None:
        self.compressed_size = reader.read_uint32()
        self.decompressed_size = reader.read_uint32()

    def __str__(self) -> str:
        return f"C:{self.compressed_size} D:{self.decompressed_size}"


@dataclass
class StorageBlock(BundleReadable):
    """One stored block of bundle data and how it is compressed."""

    uncompressed_size: int = 0
    compressed_size: int = 0
    flags: StorageBlockFlags = field(default_factory=StorageBlockFlags)

    def read(self, reader: BundleReader) -> None:
        self.uncompressed_size = reader.read_uint32()
        self.compressed_size = reader.read_uint32()
        self.flags = StorageBlockFlags(reader.read_uint16())


@dataclass
class Node(BundleReadable):
    """An entry of the bundle directory: a file and where its data lies."""

    path: str = ""
    path_origin: str = ""
    offset: int = 0
    size: int = 0
    blob_index: int = 0

    def read(self, reader: BundleReader) -> None:
        if reader.signature() == BundleType.UNITY_FS:
            self.offset = reader.read_int64()
            self.size = reader.read_int64()
            self.blob_index = reader.read_int32()
            self.path_origin = reader.read_string()
        else:
            self.path_origin = reader.read_string()
            self.offset = reader.read_int32()
            self.size = reader.read_int32()
        self.path = fix_file_identifier(self.path_origin)


@dataclass
class BlocksInfo(BundleReadable):
    """The hash of the data and the list of its storage blocks."""

    hash: Hash128 = field(default_factory=Hash128)
    storage_blocks: List[StorageBlock] = field(default_factory=list)

    def read(self, reader: BundleReader) -> None:
        self.hash.read(reader)
        self.storage_blocks = reader.read_object_vector(StorageBlock)


@dataclass
class DirectoryInfo(BundleReadable):
    """The list of files held in a bundle."""

    nodes: List[Node] = field(default_factory=list)

    def read(self, reader: BundleReader) -> None:
        self.nodes = reader.read_object_vector(Node)


@dataclass
class BundleMetaData(BundleReadable):
    """Blocks info and directory info of a bundle."""

    blocks_info: BlocksInfo = field(default_factory=BlocksInfo)
    directory_info: DirectoryInfo = field(default_factory=DirectoryInfo)

    def read(self, reader: BundleReader) -> None:
        if reader.signature() == BundleType.UNITY_FS:
            self.blocks_info.read(reader)
            if reader.flags().is_blocks_and_directory_info_combined():
                self.directory_info.read(reader)
        else:
            reader.align_stream()