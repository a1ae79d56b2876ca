"""Reader for bundle structures, carrying the bundle's signature, generation and flags."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Type, TypeVar

from .binaryreader import BinaryReader, EndianReader
from .types import BundleFlags, BundleType, BundleVersion, EndianType


class BundleReadable(ABC):
    """A structure that can fill itself from a bundle reader."""

    @abstractmethod
    def read(self, reader: "BundleReader") -> None:
        """Read this structure's fields from ``reader``."""


T = TypeVar("T", bound=BundleReadable)


class BundleReader(EndianReader):
    """An endian reader that knows which kind of bundle it is reading."""

    def __init__(
        self,
        reader: BinaryReader,
        endianness: EndianType,
        signature: BundleType = BundleType.UNITY_RAW,
        generation: BundleVersion = BundleVersion.UNKNOWN,
        flags: BundleFlags = BundleFlags(),
    ) -> None:
        super().__init__(reader, endianness)
        self._signature = BundleType(signature)
        self._generation = BundleVersion(generation)
        self._flags = flags if isinstance(flags, BundleFlags) else BundleFlags(int(flags))

    def read_object(self, cls: Type[T]) -> T:
        """Create an instance of ``cls`` and read it."""
        obj = cls()
        obj.read(self)
        return obj

    def read_object_vector(self, cls: Type[T]) -> List[T]:
        """Read a 32-bit count followed by that many instances of ``cls``."""
        count = self.read_int32()
        if count < 0:
            raise ValueError(f"Negative object count: {count}")
        return [self.read_object(cls) for _ in range(count)]

    def signature(self) -> BundleType:
        return self._signature

    def generation(self) -> BundleVersion:
        return self._generation

    def flags(self) -> BundleFlags:
        return self._flags