"""Engine version numbers such as 2019.4.31f1."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class VersionType(IntEnum):
    """Release channel of an engine version."""

    ALPHA = 0
    BETA = 1
    FINAL = 2
    PATCH = 3

    MAX_VALUE = 3

    def to_literal(self) -> str:
        """Single letter used for this channel in version strings."""
        return _LITERALS[self]


_LITERALS = {
    VersionType.ALPHA: "a",
    VersionType.BETA: "b",
    VersionType.FINAL: "f",
    VersionType.PATCH: "p",
}
_TYPES_BY_LITERAL = {letter: kind for kind, letter in _LITERALS.items()}


def _digit(char: str, text: str) -> int:
    if not "0" <= char <= "9":
        raise ValueError(f"Invalid character {char!r} in version {text!r}")
    return ord(char) - ord("0")


@dataclass(frozen=True, order=True)
class Version:
    """An engine version; ordering follows its packed 64-bit form."""

    major: int = 0
    minor: int = 0
    build: int = 0
    type: VersionType = VersionType.ALPHA
    type_number: int = 0

    def __post_init__(self) -> None:
        limits = (("major", 0xFFFF), ("minor", 0xFF), ("build", 0xFF), ("type_number", 0xFF))
        for name, limit in limits:
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} out of range: {value}")
        object.__setattr__(self, "type", VersionType(self.type))

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a string such as '2019.4.31f1'."""
        if not text:
            raise ValueError(f"Invalid version number {text!r}")

        chars = iter(text)
        major = minor = build = type_number = 0
        version_type = VersionType.FINAL

        for char in chars:
            if char == ".":
                break
            major = major * 10 + _digit(char, text)
        else:
            raise ValueError(f"Invalid version format {text!r}")

        for char in chars:
            if char == ".":
                break
            minor = minor * 10 + _digit(char, text)

        for char in chars:
            if "0" <= char <= "9":
                build = build * 10 + _digit(char, text)
                continue
            try:
                version_type = _TYPES_BY_LITERAL[char]
            except KeyError:
                raise ValueError(
                    f"Unsupported version type {char} for version {text}"
                ) from None
            break

        for char in chars:
            type_number = type_number * 10 + _digit(char, text)

        return cls(
            major & 0xFFFF, minor & 0xFF, build & 0xFF, version_type, type_number & 0xFF
        )

    def packed(self) -> int:
        """The version as one 64-bit integer."""
        return (
            (self.major << 48)
            | (self.minor << 40)
            | (self.build << 32)
            | (int(self.type) << 24)
            | (self.type_number << 16)
        )

    def __str__(self) -> str:
        return (
            f"{self.major}.{self.minor}.{self.build}"
            f"{self.type.to_literal()}{self.type_number}"
        )