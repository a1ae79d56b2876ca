"""Readers of typed values from a byte source, in native or chosen byte order."""

from __future__ import annotations

import os
import struct
import sys
from typing import List, Union

from .sources import FileReadSource, MemoryReadSource, ReadSource
from .types import EndianType


def endian_swap(data: bytes) -> bytes:
    """Reverse the byte order of a value's bytes."""
    return bytes(data)[::-1]


class BinaryReader:
    """Reads typed values from a read source in the machine's byte order.

    Copies made with ``BinaryReader(other.read_source())`` share the same
    source and therefore the same position.
    """

    _byte_order = "="

    def __init__(self, source: ReadSource) -> None:
        self._source = source

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> "BinaryReader":
        """A reader over the contents of a file."""
        return BinaryReader(FileReadSource(path))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "BinaryReader":
        """A reader over an in-memory buffer."""
        return BinaryReader(MemoryReadSource(data))

    def read_source(self) -> ReadSource:
        return self._source

    def is_valid(self) -> bool:
        return self._source is not None and self._source.is_valid()

    def position(self) -> int:
        return self._source.position()

    def seek_beg(self, offset: int) -> None:
        self._source.seek_beg(offset)

    def seek_rel(self, offset: int) -> None:
        self._source.seek_rel(offset)

    def _unpack(self, code: str):
        fmt = self._byte_order + code
        return struct.unpack(fmt, self._source.read(struct.calcsize(fmt)))[0]

    def _read_vector(self, code: str) -> list:
        count = self.read_int32()
        if count < 0:
            raise ValueError(f"Negative vector length: {count}")
        fmt = f"{self._byte_order}{count}{code}"
        return list(struct.unpack(fmt, self._source.read(struct.calcsize(fmt))))

    def read_char(self) -> str:
        return chr(self._source.get())

    def read_bool(self) -> bool:
        return self._source.get() != 0

    def read_int8(self) -> int:
        value = self._source.get()
        return value - 0x100 if value >= 0x80 else value

    def read_uint8(self) -> int:
        return self._source.get()

    def read_int16(self) -> int:
        return self._unpack("h")

    def read_uint16(self) -> int:
        return self._unpack("H")

    def read_int32(self) -> int:
        return self._unpack("i")

    def read_uint32(self) -> int:
        return self._unpack("I")

    def read_int64(self) -> int:
        return self._unpack("q")

    def read_uint64(self) -> int:
        return self._unpack("Q")

    def read_float(self) -> float:
        return self._unpack("f")

    def read_double(self) -> float:
        return self._unpack("d")

    def read_string(self) -> str:
        return self._source.read_string()

    def read_int8_vector(self) -> List[int]:
        return self._read_vector("b")

    def read_uint8_vector(self) -> List[int]:
        return self._read_vector("B")

    def read_int16_vector(self) -> List[int]:
        return self._read_vector("h")

    def read_uint16_vector(self) -> List[int]:
        return self._read_vector("H")

    def read_int32_vector(self) -> List[int]:
        return self._read_vector("i")

    def read_uint32_vector(self) -> List[int]:
        return self._read_vector("I")

    def read_int64_vector(self) -> List[int]:
        return self._read_vector("q")

    def read_uint64_vector(self) -> List[int]:
        return self._read_vector("Q")

    def read_float_vector(self) -> List[float]:
        return self._read_vector("f")

    def read_double_vector(self) -> List[float]:
        return self._read_vector("d")

    def read_bytes(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        return self._source.read(size)

    def align_stream(self) -> None:
        """Advance to the next multiple of four bytes."""
        self._source.seek_beg((self._source.position() + 3) & ~3)


class EndianReader(BinaryReader):
    """A reader sharing another reader's source, with an explicit byte order."""

    def __init__(self, reader: BinaryReader, endianness: EndianType) -> None:
        super().__init__(reader.read_source())
        self._endianness = EndianType(endianness)
        self._byte_order = ">" if self._endianness is EndianType.BIG_ENDIAN else "<"

    @staticmethod
    def computer_endianness() -> EndianType:
        """Byte order of the running machine."""
        if sys.byteorder == "big":
            return EndianType.BIG_ENDIAN
        return EndianType.LITTLE_ENDIAN

    def endianness(self) -> EndianType:
        return self._endianness