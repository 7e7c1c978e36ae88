"""
Pytest configuration and shared fixtures.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


@pytest.fixture
def usdc() -> Dict[str, Any]:
    return {
        "chainId": 1,
        "address": USDC,
        "decimals": 6,
        "name": "USD Coin",
        "symbol": "USDC",
        "logoURI": "ipfs://QmXfzKRvjZz3u5JRgC4v5mGVbm9ahrUiB4DgzHBsnWbTMM",
        "tags": ["stablecoin"],
    }


@pytest.fixture
def dai() -> Dict[str, Any]:
    return {
        "chainId": 1,
        "address": DAI,
        "decimals": 18,
        "name": "Dai Stablecoin",
        "symbol": "DAI",
        "tags": ["stablecoin", "compound"],
        "extensions": {"color": "#F5AC37", "is_verified": True},
    }


@pytest.fixture
def weth() -> Dict[str, Any]:
    return {
        "chainId": 1,
        "address": WETH,
        "decimals": 18,
        "name": "Wrapped Ether",
        "symbol": "WETH",
    }


@pytest.fixture
def base_tokens(usdc, dai) -> List[Dict[str, Any]]:
    return [usdc, dai]


@pytest.fixture
def base_document(base_tokens) -> Dict[str, Any]:
    """A full token list document at version 1.2.3."""
    return {
        "name": "My Token List",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "version": {"major": 1, "minor": 2, "patch": 3},
        "tokens": copy.deepcopy(base_tokens),
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document into tmp_path and return its path."""
    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path
    return _write
