import argparse
import json
from pathlib import Path
from typing import Any, List, Optional

from . import __version__
from .diff import diff_token_lists
from .env import get_settings, load_env
from .logger import configure_logger, get_logger
from .planner import get_version_upgrade, minimum_version_bump, next_version
from .schema import validate_token_list, validate_token_list_strict, validate_tokens, validate_version
from .storage import TokenListFileError, load_token_list, save_token_list, tokens_of
from .version import Version, VersionUpgrade

logger = get_logger()


def _fail(errors: List[str], path: Path) -> None:
    logger.record_validation_failure()
    logger.error("Token list failed validation", path=str(path), errors=len(errors))
    print(f"Invalid: {path}")
    for e in errors:
        print(f" - {e}")
    raise SystemExit(2)


def load_tokens(path: Path) -> Any:
    """Load a list document and check its token records before diffing."""
    try:
        document = load_token_list(path)
    except TokenListFileError as e:
        raise SystemExit(str(e))
    errors = validate_tokens(tokens_of(document) if isinstance(document, (dict, list)) else None)
    if errors:
        _fail(errors, path)
    return document


def _parse_version(text: str) -> Version:
    try:
        return Version.parse(text)
    except ValueError as e:
        raise SystemExit(str(e))


def _document_version(document: Any, path: Path) -> Version:
    if not isinstance(document, dict) or "version" not in document:
        raise SystemExit(f"{path} has no version; a full token list document is required")
    errors = validate_version(document["version"])
    if errors:
        _fail(errors, path)
    return Version.from_dict(document["version"])


def cmd_diff(args: argparse.Namespace) -> None:
    base_path = Path(args.base)
    update_path = Path(args.update)
    base = load_tokens(base_path)
    update = load_tokens(update_path)

    diff = diff_token_lists(tokens_of(base), tokens_of(update))
    logger.record_diff(len(diff.added), len(diff.removed), diff.changed_count)

    if args.json:
        print(json.dumps(diff.to_dict(), indent=2, ensure_ascii=False))
        return

    if diff.is_empty:
        print("No changes")
        return
    for token in diff.added:
        print(f"+ {token['chainId']}:{token['address']} {token.get('symbol', '')}")
    for token in diff.removed:
        print(f"- {token['chainId']}:{token['address']} {token.get('symbol', '')}")
    for chain_id, by_address in diff.changed.items():
        for address, fields in by_address.items():
            print(f"~ {chain_id}:{address} {', '.join(fields)}")


def cmd_bump(args: argparse.Namespace) -> None:
    base_path = Path(args.base)
    update_path = Path(args.update)
    base = load_tokens(base_path)
    update = load_tokens(update_path)
    base_version = _document_version(base, base_path)

    bump = minimum_version_bump(tokens_of(base), tokens_of(update))
    logger.record_bump(bump.name)
    new_version = next_version(base_version, bump)

    print(f"Bump: {bump.name}")
    print(f"Version: {base_version} -> {new_version}")

    if args.write:
        if not isinstance(update, dict):
            raise SystemExit(f"{update_path} is a bare token array; cannot write a version into it")
        update["version"] = new_version.to_dict()
        save_token_list(update_path, update)
        logger.info("Wrote bumped version", path=str(update_path), version=str(new_version))


def cmd_compare(args: argparse.Namespace) -> None:
    base = _parse_version(args.base)
    update = _parse_version(args.update)
    print(get_version_upgrade(base, update).name)


def cmd_next(args: argparse.Namespace) -> None:
    base = _parse_version(args.version)
    print(next_version(base, VersionUpgrade[args.kind.upper()]))


def cmd_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    try:
        document = load_token_list(input_path)
    except TokenListFileError as e:
        raise SystemExit(str(e))
    if args.strict:
        _, errors = validate_token_list_strict(document)
    else:
        errors = validate_token_list(document)
    if errors:
        _fail(errors, input_path)
    print("Valid")


def main(argv: Optional[List[str]] = None):
    # Load .env if present (TOKENLISTS_LOG_LEVEL, TOKENLISTS_LOG_DIR, TOKENLISTS_STRICT)
    load_env()
    settings = get_settings()
    configure_logger(level=settings.log_level, log_dir=settings.log_dir)

    parser = argparse.ArgumentParser(prog="tokenlists", description="Diff token lists and plan their versions")
    parser.add_argument("--version", action="store_true", dest="show_version", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    dif = subparsers.add_parser("diff", help="Show tokens added, removed and changed between two lists")
    dif.add_argument("base", help="Path to the base token list JSON")
    dif.add_argument("update", help="Path to the updated token list JSON")
    dif.add_argument("--json", action="store_true", help="Print the diff as JSON")
    dif.set_defaults(func=cmd_diff)

    bmp = subparsers.add_parser("bump", help="Compute the minimum version bump and the next version")
    bmp.add_argument("base", help="Path to the base token list JSON (must carry a version)")
    bmp.add_argument("update", help="Path to the updated token list JSON")
    bmp.add_argument("--write", action="store_true", help="Store the next version into the updated list")
    bmp.set_defaults(func=cmd_bump)

    cmp_ = subparsers.add_parser("compare", help="Classify the upgrade between two versions (e.g. 1.2.3 2.0.0)")
    cmp_.add_argument("base", help="Base version MAJOR.MINOR.PATCH")
    cmp_.add_argument("update", help="Updated version MAJOR.MINOR.PATCH")
    cmp_.set_defaults(func=cmd_compare)

    nxt = subparsers.add_parser("next", help="Compute the next version for a bump kind")
    nxt.add_argument("version", help="Current version MAJOR.MINOR.PATCH")
    nxt.add_argument("kind", choices=[k.name.lower() for k in VersionUpgrade], help="Bump kind")
    nxt.set_defaults(func=cmd_next)

    val = subparsers.add_parser("validate", help="Check a token list document's shape")
    val.add_argument("input", help="Path to token list JSON")
    val.add_argument("--strict", action="store_true", default=settings.strict,
                     help="Also require timestamp and a non-empty token array (or set TOKENLISTS_STRICT)")
    val.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)

    if args.show_version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        if settings.log_level == "DEBUG":
            logger.log_metrics_summary()
        return

    parser.print_help()


if __name__ == "__main__":
    main()
