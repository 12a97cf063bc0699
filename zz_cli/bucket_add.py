"""bucket.add — Register a directory as a bucket.

Usage: zz bucket add <NAME> <DIR>
The new bucket becomes the default when no default is set.
"""

from __future__ import annotations

import argparse

from zz.errors import ZzError
from zz_cli import envelope, paths


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz bucket add")
    parser.add_argument("name", metavar="NAME", help="Name of the bucket")
    parser.add_argument("dir", metavar="DIR", help="Path to the bucket")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
        bucket = store.add_bucket(parsed.name, parsed.dir)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    default = store.default_bucket()
    envelope.ok(
        {
            "bucket": bucket.to_dict(),
            "is_default": default is not None and default.name == bucket.name,
        },
        as_json=parsed.json,
    )
