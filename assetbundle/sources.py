"""Byte sources that readers pull data from: files on disk and in-memory buffers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import BinaryIO, Optional, Union

_STRING_CHUNK = 256


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


class SourceType(Enum):
    """Kind of storage behind a read source."""

    FILE = "file"
    MEMORY = "memory"


class ReadSource(ABC):
    """A seekable stream of bytes."""

    @abstractmethod
    def interface_type(self) -> SourceType:
        """The kind of storage behind this source."""

    def is_valid(self) -> bool:
        """True when the source can be read from."""
        return False

    @abstractmethod
    def get(self) -> int:
        """Read one byte as an unsigned value."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes; EOFError if fewer remain."""

    @abstractmethod
    def read_string(self) -> str:
        """Read a NUL-terminated string, consuming the terminator."""

    @abstractmethod
    def seek_beg(self, offset: int) -> None:
        """Move to an absolute offset."""

    @abstractmethod
    def seek_rel(self, offset: int) -> None:
        """Move relative to the current offset."""

    @abstractmethod
    def position(self) -> int:
        """The current offset."""


class FileReadSource(ReadSource):
    """Reads bytes from a file; invalid when the file cannot be opened."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._path = os.fspath(path)
        self._stream: Optional[BinaryIO]
        try:
            self._stream = open(self._path, "rb")
        except OSError:
            self._stream = None

    def __enter__(self) -> "FileReadSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _require_stream(self) -> BinaryIO:
        if self._stream is None or self._stream.closed:
            raise OSError(f"File is not open: {self._path}")
        return self._stream

    def interface_type(self) -> SourceType:
        return SourceType.FILE

    def is_valid(self) -> bool:
        return self._stream is not None and not self._stream.closed

    def close(self) -> None:
        """Close the underlying file."""
        if self._stream is not None:
            self._stream.close()

    def get(self) -> int:
        byte = self._require_stream().read(1)
        if not byte:
            raise EOFError("End of file reached")
        return byte[0]

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Negative read size: {size}")
        data = self._require_stream().read(size)
        if len(data) != size:
            raise EOFError(f"Wanted {size} bytes but only {len(data)} remain")
        return data

    def read_string(self) -> str:
        stream = self._require_stream()
        parts = []
        while True:
            chunk = stream.read(_STRING_CHUNK)
            if not chunk:
                break
            end = chunk.find(b"\0")
            if end >= 0:
                parts.append(chunk[:end])
                stream.seek(end + 1 - len(chunk), os.SEEK_CUR)
                break
            parts.append(chunk)
        return _decode(b"".join(parts))

    def seek_beg(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"Negative offset: {offset}")
        self._require_stream().seek(offset, os.SEEK_SET)

    def seek_rel(self, offset: int) -> None:
        stream = self._require_stream()
        target = stream.tell() + offset
        if target < 0:
            raise ValueError(f"Seek before start of file: {target}")
        stream.seek(target, os.SEEK_SET)

    def position(self) -> int:
        return self._require_stream().tell()


class MemoryReadSource(ReadSource):
    """Reads bytes from an in-memory buffer, shared rather than copied."""

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        self._data = data if isinstance(data, (bytes, bytearray)) else bytes(data)
        self._pos = 0

    def interface_type(self) -> SourceType:
        return SourceType.MEMORY

    def is_valid(self) -> bool:
        return True

    def get(self) -> int:
        if self._pos >= len(self._data):
            raise EOFError("End of buffer reached")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Negative read size: {size}")
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(
                f"Wanted {size} bytes but only {max(len(self._data) - self._pos, 0)} remain"
            )
        data = bytes(self._data[self._pos:end])
        self._pos = end
        return data

    def read_string(self) -> str:
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raise EOFError("Unterminated string in buffer")
        raw = bytes(self._data[self._pos:end])
        self._pos = end + 1
        return _decode(raw)

    def seek_beg(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"Negative offset: {offset}")
        self._pos = offset

    def seek_rel(self, offset: int) -> None:
        self.seek_beg(self._pos + offset)

    def position(self) -> int:
        return self._pos