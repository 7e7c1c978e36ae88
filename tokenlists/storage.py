import json
from pathlib import Path
from typing import Any, Dict, List, Union


class TokenListFileError(Exception):
    """Raised when a token list file cannot be read or parsed."""
    pass


def load_token_list(path: Path) -> Union[Dict[str, Any], List[Any]]:
    if not path.exists():
        raise TokenListFileError(f"Token list file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise TokenListFileError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise TokenListFileError(f"Cannot read {path}: {e}") from e


def save_token_list(path: Path, document: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")


def tokens_of(document: Union[Dict[str, Any], List[Any]]) -> List[Dict[str, Any]]:
    """Token records of a full list document, or the document itself if it is a bare list."""
    if isinstance(document, list):
        return document
    return document.get("tokens", [])
