"""bucket.ls — List tracked buckets with their paths, in registry order.

Usage: zz bucket ls
"""

from __future__ import annotations

import argparse

from zz.errors import ZzError
from zz_cli import envelope, paths


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz bucket ls")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    buckets = store.buckets()
    default = store.default_bucket()
    envelope.ok(
        {
            "buckets": [bucket.to_dict() for bucket in buckets],
            "default_bucket": default.name if default else None,
        },
        lines=envelope.table([(bucket.name, bucket.path) for bucket in buckets]),
        as_json=parsed.json,
    )
