"""CLI dispatcher for zz commands."""

from __future__ import annotations

import importlib
import logging
import os
import sys

from zz.errors import ZzError
from zz_cli.envelope import error, system_error

__version__ = "0.1.0"

LOG_LEVEL_ENV = "ZZ_LOG_LEVEL"

COMMANDS = {
    "bucket add": "zz_cli.bucket_add",
    "bucket default": "zz_cli.bucket_default",
    "bucket forget": "zz_cli.bucket_forget",
    "bucket ls": "zz_cli.bucket_list",
    "ls": "zz_cli.dir_list",
    "mkdir": "zz_cli.dir_make",
}

USAGE = "Usage: zz <command> [args]\nCommands: " + ", ".join(COMMANDS)


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def resolve_command(argv: list[str]) -> tuple[str, list[str]] | None:
    """Map argv to (command key, remaining args); None if nothing matches."""
    if not argv:
        return None
    if argv[0] == "bucket":
        if len(argv) < 2:
            return None
        key, rest = f"bucket {argv[1]}", argv[2:]
    else:
        key, rest = argv[0], argv[1:]
    if key not in COMMANDS:
        return None
    return key, rest


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    configure_logging()

    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)
    if args and args[0] in ("-V", "--version"):
        print(f"zz {__version__}")
        sys.exit(0)
    if not args:
        system_error(USAGE)

    resolved = resolve_command(args)
    if resolved is None:
        system_error(f"Unknown command: {' '.join(args[:2])}\n{USAGE}")
    key, rest = resolved

    module = importlib.import_module(COMMANDS[key])
    try:
        module.run(rest)
    except ZzError as exc:
        error(exc, as_json="--json" in rest)


if __name__ == "__main__":
    main()
