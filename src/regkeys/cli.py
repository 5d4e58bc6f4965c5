"""
Command-line interface for inspecting key sets.

A key set is a JSON/YAML file declaring keys and the textual values stored for
them. The CLI builds the keys, loads the values into an in-memory registry
and prints them, hiding sensitive values unless asked not to.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from regkeys.core.logger import configure_root_logger, get_logger, push_source, reset_source
from regkeys.core.registry import InMemoryRegistry
from regkeys.inspection import describe_key, describe_keys
from regkeys.keys.builtin import REGEDIT_ALLOW_SENSITIVE
from regkeys.models.key_definition import KeySetConfig, load_key_set

logger = get_logger(__name__)


def _load_registry(config: KeySetConfig, allow_sensitive: bool) -> InMemoryRegistry:
    registry = config.to_registry()
    if allow_sensitive:
        registry.set(REGEDIT_ALLOW_SENSITIVE, True)
    return registry


def show(config_path: str, *, allow_sensitive: bool = False) -> List[Dict[str, Any]]:
    """
    Describe every key of a key set with its current value.

    Args:
        config_path: Path to a JSON/YAML key set
        allow_sensitive: Reveal the values of sensitive keys

    Returns:
        One dict per key, in key order

    Example:
        >>> from regkeys.cli import show
        >>> for row in show("keys.yaml"):
        ...     print(row["name"], row["value"])
    """
    token = push_source(config_path)
    try:
        config = load_key_set(config_path)
        registry = _load_registry(config, allow_sensitive)
        return [view.to_dict() for view in describe_keys(registry, config.build_keys())]
    finally:
        reset_source(token)


def get_value(config_path: str, name: str, *, allow_sensitive: bool = False) -> Dict[str, Any]:
    """Describe a single key, looked up case-insensitively by name."""
    token = push_source(config_path)
    try:
        config = load_key_set(config_path)
        key = config.find_key(name)
        if key is None:
            raise KeyError(f"No key named {name!r} in {config_path}")
        registry = _load_registry(config, allow_sensitive)
        return describe_key(registry, key).to_dict()
    finally:
        reset_source(token)


def validate_config(config_path: str) -> bool:
    """
    Validate a key set without printing it.

    Checks the schema, every fallback and every stored value against its
    key's type.

    Raises:
        Exception: If the key set is invalid
    """
    token = push_source(config_path)
    try:
        logger.info(f"Validating key set: {config_path}")
        config = load_key_set(config_path)
        config.to_registry()
        logger.info("Key set is valid")
        return True
    except Exception as e:
        logger.error(f"Key set validation failed: {e}")
        raise
    finally:
        reset_source(token)


def _print_rows(rows: List[Dict[str, Any]], as_json: bool) -> None:
    if as_json:
        print(json.dumps(rows, indent=2))
        return
    for row in rows:
        flags = "".join(
            flag
            for flag, enabled in (("I", row["user_immutable"]), ("S", row["sensitive"]))
            if enabled
        )
        print(f"{row['name']} [{row['type']}] {flags:<2} = {row['value']}")


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """
    Command-line interface for regkeys.

    Usage:
        regkeys show keys.yaml [--allow-sensitive] [--json]
        regkeys get keys.yaml server.port [--allow-sensitive]
        regkeys validate keys.yaml
    """
    parser = argparse.ArgumentParser(
        prog="regkeys",
        description="Inspect typed configuration key sets",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    show_parser = subparsers.add_parser("show", help="List keys and their values")
    show_parser.add_argument("config", help="Path to key set (JSON or YAML)")
    show_parser.add_argument(
        "--allow-sensitive", action="store_true", help="Reveal values of sensitive keys"
    )
    show_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    get_parser = subparsers.add_parser("get", help="Show a single key")
    get_parser.add_argument("config", help="Path to key set (JSON or YAML)")
    get_parser.add_argument("name", help="Key name (case-insensitive)")
    get_parser.add_argument(
        "--allow-sensitive", action="store_true", help="Reveal the value if the key is sensitive"
    )
    get_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    validate_parser = subparsers.add_parser("validate", help="Validate a key set")
    validate_parser.add_argument("config", help="Path to key set (JSON or YAML)")

    args = parser.parse_args(argv)
    configure_root_logger("DEBUG" if args.verbose else "WARNING")

    if args.command == "show":
        try:
            _print_rows(show(args.config, allow_sensitive=args.allow_sensitive), args.json)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Show failed: {e}")
            sys.exit(1)

    elif args.command == "get":
        try:
            row = get_value(args.config, args.name, allow_sensitive=args.allow_sensitive)
            _print_rows([row], args.json)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Get failed: {e}")
            sys.exit(1)

    elif args.command == "validate":
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception:
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
