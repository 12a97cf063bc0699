"""bucket.forget — Stop tracking a bucket.

Usage: zz bucket forget <NAME>
The bucket's directory and its contents are left alone. Forgetting the
default bucket leaves no default until one is set again.
"""

from __future__ import annotations

import argparse

from zz.errors import BucketNotFound, ZzError
from zz_cli import envelope, paths


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz bucket forget")
    parser.add_argument("name", metavar="NAME", help="Name of the bucket")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
        removed = store.forget_bucket(parsed.name)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    if removed == 0:
        envelope.error(
            BucketNotFound(f"Bucket '{parsed.name}' does not exist", details={"name": parsed.name}),
            as_json=parsed.json,
        )
    envelope.ok({"name": parsed.name, "removed": removed}, as_json=parsed.json)
