"""Bundle headers: the common prefix and the raw/web and file stream variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .binaryreader import BinaryReader
from .bundlereader import BundleReader
from .structures import BundleScene, Hash128
from .types import BundleFlags, BundleType, BundleVersion
from .version import Version

_SIGNATURES = {
    "UnityRaw": BundleType.UNITY_RAW,
    "UnityWeb": BundleType.UNITY_WEB,
    "UnityFS": BundleType.UNITY_FS,
}


@dataclass
class BundleFileStreamHeader:
    """Header part specific to file stream bundles."""

    size: int = 0
    compressed_blocks_info_size: int = 0
    uncompressed_blocks_info_size: int = 0
    flags: BundleFlags = field(default_factory=BundleFlags)

    def read(self, reader: BinaryReader) -> None:
        self.size = reader.read_int64()
        self.compressed_blocks_info_size = reader.read_int32()
        self.uncompressed_blocks_info_size = reader.read_int32()
        self.flags = BundleFlags(reader.read_int32())


@dataclass
class BundleRawWebHeader:
    """Header part specific to raw and web bundles."""

    crc: int = 0
    minimum_streamed_bytes: int = 0
    header_size: int = 0
    number_of_scenes_to_download_before_streaming: int = 0
    scenes: List[BundleScene] = field(default_factory=list)
    complete_file_size: int = 0
    uncompressed_blocks_info_size: int = 0
    hash: Hash128 = field(default_factory=Hash128)

    @staticmethod
    def has_hash(generation: BundleVersion) -> bool:
        return generation >= BundleVersion.BF_520A1

    @staticmethod
    def has_complete_file_size(generation: BundleVersion) -> bool:
        return generation >= BundleVersion.BF_260_340

    @staticmethod
    def has_uncompressed_blocks_info_size(generation: BundleVersion) -> bool:
        return generation >= BundleVersion.BF_350_4X

    def read(self, reader: BundleReader, generation: BundleVersion) -> None:
        if self.has_hash(generation):
            self.hash.read(reader)
            self.crc = reader.read_uint32()

        self.minimum_streamed_bytes = reader.read_uint32()
        self.header_size = reader.read_int32()
        self.number_of_scenes_to_download_before_streaming = reader.read_int32()
        self.scenes = reader.read_object_vector(BundleScene)

        if self.has_complete_file_size(generation):
            self.complete_file_size = reader.read_uint32()
        if self.has_uncompressed_blocks_info_size(generation):
            self.uncompressed_blocks_info_size = reader.read_int32()

        reader.align_stream()


@dataclass
class BundleHeader:
    """The header found at the start of every bundle."""

    signature: BundleType = BundleType.UNITY_RAW
    version: BundleVersion = BundleVersion.UNKNOWN
    unity_web_bundle_version: str = ""
    unity_web_minimum_revision: Version = field(default_factory=Version)
    raw_web: Optional[BundleRawWebHeader] = None
    file_stream: Optional[BundleFileStreamHeader] = None

    @staticmethod
    def parse_signature(signature: str) -> BundleType:
        """The bundle type named by a signature; ValueError if unknown."""
        try:
            return _SIGNATURES[signature]
        except KeyError:
            raise ValueError(f"Unsupported signature {signature}") from None

    @staticmethod
    def try_parse_signature(signature: str) -> Optional[BundleType]:
        """The bundle type named by a signature, or None if unknown."""
        return _SIGNATURES.get(signature)

    @staticmethod
    def is_bundle_header(reader: BinaryReader) -> bool:
        """True if a known signature starts at the reader's position.

        The reader's position is left where it was.
        """
        position = reader.position()
        try:
            signature = reader.read_string()
        except EOFError:
            return False
        finally:
            reader.seek_beg(position)
        return BundleHeader.try_parse_signature(signature) is not None

    def read(self, reader: BundleReader) -> None:
        self.signature = self.parse_signature(reader.read_string())
        self.version = BundleVersion(reader.read_int32())
        self.unity_web_bundle_version = reader.read_string()
        self.unity_web_minimum_revision = Version.parse(reader.read_string())

        if self.signature.is_raw_web():
            self.raw_web = BundleRawWebHeader()
            self.raw_web.read(reader, self.version)
        else:
            self.file_stream = BundleFileStreamHeader()
            self.file_stream.read(reader)

    def flags(self) -> BundleFlags:
        """Flags of a file stream bundle; empty flags for other kinds."""
        if self.signature == BundleType.UNITY_FS and self.file_stream is not None:
            return self.file_stream.flags
        return BundleFlags(0)