"""mkdir — Create a date-prefixed directory in a bucket.

Usage: zz mkdir <NAME> [-b/--bucket BUCKET_NAME]
Uses the default bucket unless -b is given. Prints the created path.
"""

from __future__ import annotations

import argparse

from zz.errors import BucketNotFound, NoBucketSelected, ZzError
from zz_cli import envelope, paths


def run(args: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="zz mkdir")
    parser.add_argument("name", metavar="NAME", help="Name of the dir")
    parser.add_argument("-b", "--bucket", metavar="BUCKET_NAME", default=None,
                        help="Select bucket to create the directory in")
    paths.add_common_args(parser)
    parsed = parser.parse_args(args)

    try:
        store = paths.open_store(parsed)
        if parsed.bucket is not None:
            bucket = store.find_bucket(parsed.bucket)
            if bucket is None:
                raise BucketNotFound(f"Bucket '{parsed.bucket}' does not exist",
                                     details={"name": parsed.bucket})
        else:
            bucket = store.default_bucket()
            if bucket is None:
                raise NoBucketSelected("No bucket to choose from")
        created = bucket.make_dir(parsed.name)
    except ZzError as exc:
        envelope.error(exc, as_json=parsed.json)

    envelope.ok({"bucket": bucket.name, "path": str(created)},
                lines=[str(created)], as_json=parsed.json)
