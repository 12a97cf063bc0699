"""Enumerate dated entries inside buckets.

Problems with a single bucket or entry are collected on the returned
``Listing`` and the remaining buckets and entries are still listed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .errors import BucketNotFound, DirectoryReadError, MalformedEntryName, ZzError
from .store import Bucket
from .utils import printable

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntry:
    bucket: str
    date: str
    rest: str
    path: Path

    @property
    def display_path(self) -> str:
        return printable(str(self.path))


@dataclass
class Listing:
    entries: List[DirEntry] = field(default_factory=list)
    errors: List[ZzError] = field(default_factory=list)

    def extend(self, other: "Listing") -> None:
        self.entries.extend(other.entries)
        self.errors.extend(other.errors)


def split_entry_name(name: str) -> Tuple[str, str]:
    """Split ``20240305_task`` into ``("20240305", "task")`` at the first underscore."""
    if "_" not in name:
        raise MalformedEntryName(
            f"Entry name has no date prefix: {name}",
            details={"name": name},
        )
    date_part, rest = name.split("_", 1)
    return date_part, rest


def list_bucket(bucket: Bucket) -> Listing:
    listing = Listing()
    try:
        children = sorted(bucket.base_dir.iterdir())
    except OSError as exc:
        _log.warning("skipping bucket %s: %s", bucket.name, exc)
        listing.errors.append(
            DirectoryReadError(
                f"Unable to read dir: {bucket.path}: {exc.strerror or exc}",
                details={"bucket": bucket.name, "path": bucket.path},
            )
        )
        return listing

    for child in children:
        shown = printable(str(child))
        try:
            date_part, rest = split_entry_name(printable(child.name))
        except MalformedEntryName:
            _log.warning("skipping %s in bucket %s", shown, bucket.name)
            listing.errors.append(
                MalformedEntryName(
                    f"Entry name has no date prefix: {shown}",
                    details={"bucket": bucket.name, "path": shown},
                )
            )
            continue
        listing.entries.append(DirEntry(bucket=bucket.name, date=date_part, rest=rest, path=child))
    return listing


def list_buckets(buckets: Iterable[Bucket], only: Optional[str] = None) -> Listing:
    """List every bucket in order, or just the buckets named ``only``."""
    selected = [bucket for bucket in buckets if only is None or bucket.name == only]
    if only is not None and not selected:
        raise BucketNotFound(f"Bucket '{only}' does not exist", details={"name": only})
    listing = Listing()
    for bucket in selected:
        listing.extend(list_bucket(bucket))
    return listing
