from typing import Any, Dict, List, Tuple

VERSION_FIELDS = ["major", "minor", "patch"]
REQUIRED_TOKEN_FIELDS = ["chainId", "address", "decimals", "name", "symbol"]
OPTIONAL_TOKEN_STR_FIELDS = ["logoURI"]
MAX_DECIMALS = 255


class ValidationError(ValueError):
    """Raised when a document fails the boundary checks."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _is_scalar(v: Any) -> bool:
    return v is None or isinstance(v, (str, bool, int, float))


def validate_version(data: Any, where: str = "version") -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    if not isinstance(data, dict):
        return [f"Field '{where}' must be an object"]

    errors: List[str] = []
    for f in VERSION_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {where}.{f}")
        elif not _is_int(data[f]) or data[f] < 0:
            errors.append(f"Field '{where}.{f}' must be a non-negative integer")
    return errors


def validate_token(data: Any, where: str = "token") -> List[str]:
    """
    Returns a list of validation error messages for one token record.
    Only shape is checked; address and name patterns are left to the
    upstream schema.
    """
    if not isinstance(data, dict):
        return [f"{where} must be an object"]

    errors: List[str] = []

    for f in REQUIRED_TOKEN_FIELDS:
        if f not in data:
            errors.append(f"{where}: missing required field: {f}")

    chain_id = data.get("chainId")
    if "chainId" in data and (not _is_int(chain_id) or chain_id < 1):
        errors.append(f"{where}: field 'chainId' must be a positive integer")

    for f in ("address", "name", "symbol"):
        if f in data and not _is_non_empty_str(data[f]):
            errors.append(f"{where}: field '{f}' must be a non-empty string")

    decimals = data.get("decimals")
    if "decimals" in data and (not _is_int(decimals) or not 0 <= decimals <= MAX_DECIMALS):
        errors.append(f"{where}: field 'decimals' must be an integer between 0 and {MAX_DECIMALS}")

    for f in OPTIONAL_TOKEN_STR_FIELDS:
        if f in data and not isinstance(data[f], str):
            errors.append(f"{where}: field '{f}' must be a string if provided")

    if "tags" in data:
        tags = data["tags"]
        if not isinstance(tags, list) or not all(_is_non_empty_str(t) for t in tags):
            errors.append(f"{where}: field 'tags' must be a list of identifiers")

    if "extensions" in data:
        extensions = data["extensions"]
        if not isinstance(extensions, dict):
            errors.append(f"{where}: field 'extensions' must be an object")
        else:
            for key, value in extensions.items():
                if not _is_scalar(value):
                    errors.append(f"{where}: extension '{key}' must be a string, number, boolean or null")

    return errors


def validate_tokens(tokens: Any) -> List[str]:
    """Validate every record of a token sequence and the uniqueness of identity keys."""
    if not isinstance(tokens, list):
        return ["Field 'tokens' must be a list"]

    errors: List[str] = []
    seen = set()
    for i, token in enumerate(tokens):
        token_errors = validate_token(token, where=f"tokens[{i}]")
        errors.extend(token_errors)
        if token_errors:
            continue
        key = (token["chainId"], token["address"])
        if key in seen:
            errors.append(f"tokens[{i}]: duplicate token {key[1]} on chain {key[0]}")
        seen.add(key)
    return errors


def validate_token_list(data: Any) -> List[str]:
    """
    Returns a list of validation error messages for a token list document.
    """
    if not isinstance(data, dict):
        return ["Token list must be an object"]

    errors: List[str] = []
    if not _is_non_empty_str(data.get("name")):
        errors.append("Field 'name' must be a non-empty string")
    if "version" not in data:
        errors.append("Missing required field: version")
    else:
        errors.extend(validate_version(data["version"]))
    if "tokens" not in data:
        errors.append("Missing required field: tokens")
    else:
        errors.extend(validate_tokens(data["tokens"]))
    return errors


def validate_token_list_strict(data: Any) -> Tuple[bool, List[str]]:
    """
    Strict validation: also requires a timestamp and at least one token.
    """
    errors = validate_token_list(data)
    if isinstance(data, dict):
        if not _is_non_empty_str(data.get("timestamp")):
            errors.append("Field 'timestamp' must be a non-empty string")
        if isinstance(data.get("tokens"), list) and not data["tokens"]:
            errors.append("Field 'tokens' must contain at least one token")
    return (len(errors) == 0, errors)


def ensure_token_list(data: Any, strict: bool = False) -> Dict[str, Any]:
    """Return data unchanged if it passes validation, else raise ValidationError."""
    if strict:
        _, errors = validate_token_list_strict(data)
    else:
        errors = validate_token_list(data)
    if errors:
        raise ValidationError(errors)
    return data
