"""
Token List Versions.

Responsibilities:
- Represent a list version as an immutable major.minor.patch value.
- Provide the total order over versions and the update predicate.
- Enumerate the kinds of version upgrade.

Non-Responsibilities:
- No diffing of token records.
- No validation of raw documents (see schema.py).

Invariant:
A version is never mutated; every "next" version is a new value.
"""
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Any, Dict, Mapping


class VersionUpgrade(IntEnum):
    """Magnitude of a version change, ordered by severity."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3


@total_ordering
@dataclass(frozen=True)
class Version:
    """A token list version."""

    major: int
    minor: int
    patch: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Version":
        return cls(major=data["major"], minor=data["minor"], patch=data["patch"])

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a dotted string such as ``1.2.3``."""
        parts = text.strip().split(".")
        if len(parts) != 3:
            raise ValueError(f"Version must look like MAJOR.MINOR.PATCH, got {text!r}")
        major, minor, patch = (int(p) for p in parts)
        return cls(major=major, minor=minor, patch=patch)

    def to_dict(self) -> Dict[str, int]:
        return {"major": self.major, "minor": self.minor, "patch": self.patch}

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compare_versions(a: Version, b: Version) -> int:
    """
    Compare two versions, usable as a sort comparator.

    Returns:
        -1 if a comes before b, 0 if they are equal, 1 if a comes after b
    """
    for left, right in (
        (a.major, b.major),
        (a.minor, b.minor),
        (a.patch, b.patch),
    ):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def is_version_update(base: Version, candidate: Version) -> bool:
    """True if candidate strictly follows base."""
    return compare_versions(base, candidate) < 0
