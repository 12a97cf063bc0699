"""Store location lookup and the options every command shares."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Mapping

from zz.errors import StoreUnavailable
from zz.store import STORE_FILENAME, BucketStore

STORE_ENV = "ZZ_STORE"


def default_store_path() -> Path:
    """Return ~/.zz.json."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise StoreUnavailable("Could not get home directory") from exc
    # Path.home() gives back an unexpanded "~" before 3.12 when no home is known.
    if home == Path("~"):
        raise StoreUnavailable("Could not get home directory")
    return home / STORE_FILENAME


def store_path(explicit: str | None = None, environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the store file: --store, then $ZZ_STORE, then the home default."""
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ if environ is None else environ
    from_env = env.get(STORE_ENV)
    if from_env:
        return Path(from_env).expanduser()
    return default_store_path()


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--store", help=f"Registry file (default: ${STORE_ENV} or ~/{STORE_FILENAME})",
                        default=None)
    parser.add_argument("--json", action="store_true", help="Print a JSON envelope instead of text")


def open_store(parsed: argparse.Namespace) -> BucketStore:
    return BucketStore.open(store_path(parsed.store))
