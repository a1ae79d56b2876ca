"""Enumerations and flag words used by the asset bundle format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class BundleType(IntEnum):
    """Bundle container kind, identified by the header signature."""

    UNITY_RAW = 0
    UNITY_WEB = 1
    UNITY_FS = 2

    def is_raw_web(self) -> bool:
        """True for the older raw and web bundle layouts."""
        return self in (BundleType.UNITY_RAW, BundleType.UNITY_WEB)


class BundleVersion(IntEnum):
    """Bundle format generation."""

    UNKNOWN = 0
    BF_100_250 = 1
    BF_260_340 = 2
    BF_350_4X = 3
    BF_520A1 = 4
    BF_520AUNK = 5
    BF_520_X = 6


class CompressionType(IntEnum):
    """Compression applied to a block or to the blocks info."""

    NONE = 0
    LZMA = 1
    LZ4 = 2
    LZ4HC = 3
    LZHAM = 4


class EndianType(Enum):
    """Byte order of multi-byte values."""

    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"


class FileEntryType(Enum):
    """Kind of file held in a scheme."""

    SERIALIZED = 0
    BUNDLE = 1
    ARCHIVE = 2
    WEB = 3
    RESOURCE = 4


@dataclass(frozen=True)
class BundleFlags:
    """Flag word of a file stream bundle header."""

    value: int = 0

    COMPRESSION_TYPE_MASK = 0x3F
    BLOCKS_AND_DIRECTORY_INFO_COMBINED = 0x40
    BLOCKS_INFO_AT_THE_END = 0x80
    OLD_WEB_PLUGIN_COMPATIBILITY = 0x100

    def __int__(self) -> int:
        return self.value

    def compression(self) -> CompressionType:
        """Compression of the blocks info; ValueError for an unknown kind."""
        return CompressionType(self.value & self.COMPRESSION_TYPE_MASK)

    def is_blocks_and_directory_info_combined(self) -> bool:
        return bool(self.value & self.BLOCKS_AND_DIRECTORY_INFO_COMBINED)

    def is_blocks_info_at_the_end(self) -> bool:
        return bool(self.value & self.BLOCKS_INFO_AT_THE_END)


@dataclass(frozen=True)
class StorageBlockFlags:
    """Flag word of a storage block."""

    value: int = 0

    COMPRESSION_TYPE_MASK = 0x3F
    STREAMED = 0x40

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & 0xFFFF)

    def __int__(self) -> int:
        return self.value

    def compression(self) -> CompressionType:
        """Compression of the block; ValueError for an unknown kind."""
        return CompressionType(self.value & self.COMPRESSION_TYPE_MASK)

    def is_streamed(self) -> bool:
        return bool(self.value & self.STREAMED)