"""
Version Planning.

Responsibilities:
- Derive the minimum version bump a token list update requires.
- Compute the next version from a base version and a bump.
- Classify the upgrade between two concrete versions.

Non-Responsibilities:
- No publishing or writing of lists.

Invariant:
Removals outrank additions, additions outrank changes. The cascade picks
the single most severe kind; it never sums them.
"""
from typing import Any, Sequence

from .diff import TokenInfo, diff_token_lists
from .logger import get_logger
from .version import Version, VersionUpgrade

logger = get_logger()


def minimum_version_bump(base: Sequence[TokenInfo], update: Sequence[TokenInfo]) -> VersionUpgrade:
    """Return the minimum version bump for going from base to update."""
    diff = diff_token_lists(base, update)
    if diff.removed:
        return VersionUpgrade.MAJOR
    if diff.added:
        return VersionUpgrade.MINOR
    if diff.changed:
        return VersionUpgrade.PATCH
    return VersionUpgrade.NONE


def next_version(base: Version, bump: Any) -> Version:
    """
    Return the next version of a list given its current version and a bump.

    Unrecognised bump values are treated as MAJOR so that a list is never
    published under a smaller version than it needs.
    """
    if bump == VersionUpgrade.NONE:
        return base
    if bump == VersionUpgrade.PATCH:
        return Version(major=base.major, minor=base.minor, patch=base.patch + 1)
    if bump == VersionUpgrade.MINOR:
        return Version(major=base.major, minor=base.minor + 1, patch=0)
    if bump != VersionUpgrade.MAJOR:
        logger.warning("Unknown version bump, falling back to MAJOR", bump=repr(bump))
    return Version(major=base.major + 1, minor=0, patch=0)


def get_version_upgrade(base: Version, update: Version) -> VersionUpgrade:
    """
    Return the upgrade type from the base version to the update version.
    Downgrades and equal versions are both treated as NONE.
    """
    if update.major > base.major:
        return VersionUpgrade.MAJOR
    if update.major < base.major:
        return VersionUpgrade.NONE

    if update.minor > base.minor:
        return VersionUpgrade.MINOR
    if update.minor < base.minor:
        return VersionUpgrade.NONE

    return VersionUpgrade.PATCH if update.patch > base.patch else VersionUpgrade.NONE


version_upgrade_between = get_version_upgrade
