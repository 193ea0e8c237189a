import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from tomledit.document import TomlDocument
from tomledit.errors import TomlEditError
from tomledit.utils import (
    LoggerConfig,
    add_logger_arguments,
    get_logger_config_from_args,
    setup_root_logger,
)

logger = logging.getLogger(__name__)

CLI_LOGGER_DEFAULTS = LoggerConfig(
    level=logging.getLevelName(logging.WARNING),
    output=["stderr"],
    format_string="%(levelname)s: %(message)s",
)


def parse_literal(text: str) -> Any:
    """Read a command line value as a TOML literal, falling back to a bare string."""
    try:
        parsed = tomllib.loads(f"value = {text}")
    except tomllib.TOMLDecodeError:
        return text

    # Text spilling over into further keys is not a single literal.
    if list(parsed) != ["value"]:
        return text
    return parsed["value"]


def format_value(value: Any) -> str:
    if isinstance(value, dict):
        return tomli_w.dumps(value).rstrip("\n")
    if isinstance(value, str):
        return value
    if isinstance(value, list) and value and all(isinstance(item, dict) for item in value):
        return "\n\n".join(format_value(item) for item in value)

    dumped = tomli_w.dumps({"value": value}).rstrip("\n")
    return dumped.removeprefix("value = ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tomledit", description="Read and edit TOML files using dotted keys"
    )
    parser.add_argument("file", help="TOML file to operate on")

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", help="Print the value at KEY")
    get_parser.add_argument("key")

    set_parser = commands.add_parser("set", help="Overwrite KEY; parent tables must exist")
    set_parser.add_argument("key")
    set_parser.add_argument("value", type=parse_literal)

    create_parser = commands.add_parser("create", help="Write KEY, creating parent tables")
    create_parser.add_argument("key")
    create_parser.add_argument("value", type=parse_literal)

    delete_parser = commands.add_parser("delete", help="Remove KEY")
    delete_parser.add_argument("key")

    return add_logger_arguments(parser)


def run(args: argparse.Namespace) -> int:
    path = Path(args.file)
    if args.command == "create" and not path.exists():
        document = TomlDocument.new(path)
    else:
        document = TomlDocument.load(path)

    if args.command == "get":
        value = document.get(args.key)
        if value is None:
            logger.error(f"Key '{args.key}' not found in {args.file}")
            return 1
        print(format_value(value))
        return 0

    if args.command == "set":
        document.set(args.key, args.value)
    elif args.command == "create":
        document.create(args.key, args.value)
    elif args.command == "delete":
        document.delete(args.key)

    document.save()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_root_logger(get_logger_config_from_args(args, CLI_LOGGER_DEFAULTS))

    try:
        return run(args)
    except TomlEditError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
