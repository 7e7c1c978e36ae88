"""
Token List Diffing.

Responsibilities:
- Compare a base list of token records to an updated list.
- Report added, removed and changed records keyed by (chainId, address).

Non-Responsibilities:
- No version decisions (see planner.py).
- No schema validation; records are assumed well formed.

Invariant:
Diffing a list against itself yields no additions, removals or changes.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .logger import get_logger

logger = get_logger()

IDENTITY_FIELDS = ("chainId", "address")

TokenInfo = Mapping[str, Any]
ChangedIndex = Dict[int, Dict[str, List[str]]]

_MISSING = object()


@dataclass
class TokenListDiff:
    """Result of diffing a base token list against an update."""
    added: List[TokenInfo] = field(default_factory=list)
    removed: List[TokenInfo] = field(default_factory=list)
    changed: ChangedIndex = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)

    @property
    def changed_count(self) -> int:
        return sum(len(by_address) for by_address in self.changed.values())

    def to_dict(self) -> dict:
        return {
            "added": [dict(t) for t in self.added],
            "changed": {
                chain_id: {address: list(fields) for address, fields in by_address.items()}
                for chain_id, by_address in self.changed.items()
            },
            "removed": [dict(t) for t in self.removed],
        }


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_sequence(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def _scalar_equal(a: Any, b: Any) -> bool:
    if a is None or b is None or isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False


def token_info_property_equal(a: Any, b: Any) -> bool:
    """
    Compare two values of a token record field.

    Only scalars and sequences of scalars (tags) are compared by value.
    Any other value, such as an extensions object, is equal only to itself.
    """
    if a is b:
        return True
    if a is _MISSING or b is _MISSING:
        return False
    if _is_sequence(a) and _is_sequence(b):
        return len(a) == len(b) and all(_scalar_equal(x, y) for x, y in zip(a, b))
    return _scalar_equal(a, b)


def _index_by_identity(tokens: Iterable[TokenInfo]) -> Dict[Any, Dict[str, TokenInfo]]:
    index: Dict[Any, Dict[str, TokenInfo]] = {}
    for token in tokens:
        index.setdefault(token["chainId"], {})[token["address"]] = token
    return index


def changed_fields(base_token: TokenInfo, update_token: TokenInfo) -> List[str]:
    """Names of non-identity fields whose values differ between two records."""
    names = [k for k in update_token if k not in IDENTITY_FIELDS]
    return [
        name
        for name in names
        if not token_info_property_equal(
            update_token.get(name, _MISSING), base_token.get(name, _MISSING)
        )
    ]


def diff_token_lists(base: Sequence[TokenInfo], update: Sequence[TokenInfo]) -> TokenListDiff:
    """
    Compute the diff of a token list where the first argument is the base
    and the second argument is the updated list.
    """
    indexed_base = _index_by_identity(base)
    seen: Dict[Any, set] = {}
    result = TokenListDiff()

    for token in update:
        chain_id = token["chainId"]
        address = token["address"]
        base_token = indexed_base.get(chain_id, {}).get(address)

        if base_token is None:
            result.added.append(token)
        else:
            changes = changed_fields(base_token, token)
            if changes:
                result.changed.setdefault(chain_id, {})[address] = changes

        seen.setdefault(chain_id, set()).add(address)

    for token in base:
        if token["address"] not in seen.get(token["chainId"], ()):
            result.removed.append(token)

    logger.debug(
        "Token lists diffed",
        added=len(result.added),
        removed=len(result.removed),
        changed=result.changed_count,
    )
    return result
