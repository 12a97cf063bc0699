"""bucket.default — Get or set the default bucket.

Usage: zz bucket default [NAME]
Without NAME prints the current default.
"""

from __future__ import annotations

import argparse

from zz.errors import ZzError
from zz_cli import envelope, paths

NOT_SET_MESSAGE = "Default bucket is not set"


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz bucket default")
    parser.add_argument("name", metavar="NAME", nargs="?", default=None,
                        help="Set the default bucket to this bucket")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
        if parsed.name is not None:
            store.set_default_bucket(parsed.name)
            envelope.ok({"default_bucket": parsed.name}, as_json=parsed.json)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    bucket = store.default_bucket()
    if bucket is None:
        envelope.ok({"default_bucket": None}, lines=[NOT_SET_MESSAGE], as_json=parsed.json)
    envelope.ok({"default_bucket": bucket.name, "path": bucket.path},
                lines=[bucket.name], as_json=parsed.json)
