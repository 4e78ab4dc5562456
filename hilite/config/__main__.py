"""
Module: hilite.config.__main__
"""

import argparse
import os
import sys
from typing import Any, Iterator, List, Optional

import yaml

from hilite.config import (
    default_config,
    default_path,
    dump,
    expand_path,
    load,
)
from hilite.config.models import StatusKind
from hilite.text.syntax import compile_rules


def get_value(data: Any, key: str) -> Any:
    """Look up a dotted key; list items are addressed by index."""
    for part in key.split("."):
        if isinstance(data, dict):
            if part not in data:
                raise KeyError(key)
            data = data[part]
        elif isinstance(data, list):
            try:
                data = data[int(part)]
            except (ValueError, IndexError) as e:
                raise KeyError(key) from e
        else:
            raise KeyError(key)
    return data


def walk(data: Any, prefix: str = "") -> Iterator[str]:
    if isinstance(data, dict):
        items = data.items()
    elif isinstance(data, list) and any(isinstance(v, (dict, list)) for v in data):
        items = enumerate(data)
    else:
        yield prefix
        return
    for k, v in items:
        yield from walk(v, f"{prefix}.{k}" if prefix else str(k))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Editor Configuration Utility")
    parser.add_argument(
        "--path",
        default=None,
        help="Config file path (default: $HILITE_CONFIG or ~/.config/hilite/config.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # View value(s)
    view = subparsers.add_parser(
        "view", help="View a config value or the entire config"
    )
    view.add_argument("key", nargs="?", default=None, help="Config key (dot notation)")

    # List keys
    subparsers.add_parser("list", help="List all config keys")

    # Check status
    subparsers.add_parser("check", help="Report whether the config file loads")

    # Show compiled rules
    rules = subparsers.add_parser("rules", help="Show compiled rules for an extension")
    rules.add_argument("extension", help="File extension without the leading dot")

    # Reset config
    reset = subparsers.add_parser("reset", help="Write the default config to disk")
    reset.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    path = args.path or default_path()

    if args.command == "reset":
        target = expand_path(path)
        if os.path.exists(target) and not args.force:
            print(f"{target} already exists; pass --force to overwrite.", file=sys.stderr)
            return 1
        directory = os.path.dirname(target)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(target, "w", encoding="utf-8") as file:
            file.write(dump(default_config()))
        print(f"Wrote default config to {target}")
        return 0

    config, status = load(path)

    if args.command == "view":
        data = config.to_dict()
        if args.key:
            try:
                data = get_value(data, args.key)
            except KeyError:
                print(f"Unknown key: {args.key}", file=sys.stderr)
                return 1
        if isinstance(data, (dict, list)):
            print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="")
        else:
            print(data)
    elif args.command == "list":
        for key in walk(config.to_dict()):
            print(key)
    elif args.command == "check":
        print(status)
        return 1 if status.kind is StatusKind.PARSE_ERROR else 0
    elif args.command == "rules":
        compiled = compile_rules(config, args.extension)
        if not compiled:
            print(f"No language handles .{args.extension}", file=sys.stderr)
            return 1
        for category, patterns in compiled.items():
            print(f"{category}: {len(patterns)}")
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
