"""ls — List dated entries across buckets.

Usage: zz ls [-b/--bucket NAME]
Unreadable buckets and entries without a date prefix are reported after
the listing; they do not stop it.
"""

from __future__ import annotations

import argparse

from zz.errors import ZzError
from zz.listing import list_buckets
from zz_cli import envelope, paths


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz ls")
    parser.add_argument("-b", "--bucket", metavar="BUCKET_NAME", default=None,
                        help="List directories in this bucket")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
        listing = list_buckets(store.buckets(), only=parsed.bucket)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    rows = [(e.bucket, e.date, e.rest, e.display_path) for e in listing.entries]
    data = {
        "entries": [
            {"bucket": bucket, "date": date, "name": rest, "path": path}
            for bucket, date, rest, path in rows
        ],
    }
    envelope.partial(data, listing.errors, lines=envelope.table(rows), as_json=parsed.json)
