"""Token list diffing and semantic version planning."""

__version__ = "0.1.0"

from .diff import TokenListDiff, diff_token_lists, token_info_property_equal
from .planner import (
    get_version_upgrade,
    minimum_version_bump,
    next_version,
    version_upgrade_between,
)
from .version import Version, VersionUpgrade, compare_versions, is_version_update

__all__ = [
    "TokenListDiff",
    "Version",
    "VersionUpgrade",
    "compare_versions",
    "diff_token_lists",
    "get_version_upgrade",
    "is_version_update",
    "minimum_version_bump",
    "next_version",
    "token_info_property_equal",
    "version_upgrade_between",
]
