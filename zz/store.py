from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import (
    BucketNotFound,
    DirectoryCreateError,
    DuplicateBucket,
    PathExists,
    PathNotFound,
    PersistenceError,
)
from .utils import atomic_write

STORE_FILENAME = ".zz.json"

_log = logging.getLogger(__name__)


def dated_dir_name(name: str, today: Optional[date] = None) -> str:
    day = today or date.today()
    return f"{day.year:04d}{day.month:02d}{day.day:02d}_{name}"


@dataclass(frozen=True)
class Bucket:
    name: str
    path: str

    @property
    def base_dir(self) -> Path:
        return Path(self.path)

    def make_dir(self, name: str, today: Optional[date] = None) -> Path:
        """Create <base>/<YYYYMMDD>_<name> and return its path.

        The base directory must already exist; it is never created here.
        """
        target = self.base_dir / dated_dir_name(name, today)
        if target.exists():
            raise PathExists(f"Path already exists: {target}", details={"path": str(target)})
        try:
            target.mkdir()
        except FileExistsError:
            raise PathExists(f"Path already exists: {target}", details={"path": str(target)})
        except OSError as exc:
            raise DirectoryCreateError(
                f"Unable to create {target}: {exc.strerror or exc}",
                details={"path": str(target)},
            ) from exc
        _log.info("created %s in bucket %s", target, self.name)
        return target

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": self.path}


@dataclass
class Registry:
    default_bucket: Optional[str] = None
    buckets: List[Bucket] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_bucket": self.default_bucket,
            "buckets": [bucket.to_dict() for bucket in self.buckets],
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "Registry":
        if not isinstance(payload, dict):
            raise PersistenceError("store document must be a JSON object")
        default_bucket = payload.get("default_bucket")
        if default_bucket is not None and not isinstance(default_bucket, str):
            raise PersistenceError("default_bucket must be a string or null")
        raw_buckets = payload.get("buckets")
        if not isinstance(raw_buckets, list):
            raise PersistenceError("buckets must be a list")
        buckets: List[Bucket] = []
        for index, item in enumerate(raw_buckets):
            if not isinstance(item, dict):
                raise PersistenceError(f"buckets[{index}] must be an object")
            name = item.get("name")
            path = item.get("path")
            if not isinstance(name, str) or not isinstance(path, str):
                raise PersistenceError(f"buckets[{index}] needs string name and path")
            buckets.append(Bucket(name=name, path=path))
        return cls(default_bucket=default_bucket, buckets=buckets)


def dumps_registry(registry: Registry) -> str:
    return json.dumps(registry.to_dict(), ensure_ascii=False, indent=2) + "\n"


def loads_registry(text: str) -> Registry:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"store file is not valid JSON: {exc}") from exc
    return Registry.from_dict(payload)


class BucketStore:
    """Registry of buckets persisted as a single JSON document.

    Every mutating call rewrites the whole file. There is no locking, so two
    concurrent invocations can lose each other's updates.
    """

    def __init__(self, location: Path) -> None:
        self.location = Path(location)
        self.data = Registry()

    @classmethod
    def open(cls, location: Path) -> "BucketStore":
        store = cls(location)
        store.load()
        return store

    def load(self) -> None:
        if not self.location.exists():
            _log.info("store %s does not exist yet, initializing", self.location)
            self.data = Registry()
            self.persist()
        try:
            text = self.location.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(
                f"Unable to read store {self.location}: {exc}",
                details={"path": str(self.location)},
            ) from exc
        self.data = loads_registry(text)
        _log.debug("loaded %d bucket(s) from %s", len(self.data.buckets), self.location)

    def persist(self) -> None:
        try:
            atomic_write(self.location, dumps_registry(self.data))
        except OSError as exc:
            raise PersistenceError(
                f"Unable to write store {self.location}: {exc}",
                details={"path": str(self.location)},
            ) from exc
        _log.debug("persisted %d bucket(s) to %s", len(self.data.buckets), self.location)

    def buckets(self) -> List[Bucket]:
        return list(self.data.buckets)

    def find_bucket(self, name: str) -> Optional[Bucket]:
        for bucket in self.data.buckets:
            if bucket.name == name:
                return bucket
        return None

    def default_bucket(self) -> Optional[Bucket]:
        if self.data.default_bucket is None:
            return None
        return self.find_bucket(self.data.default_bucket)

    def add_bucket(self, name: str, path: str) -> Bucket:
        if not Path(path).exists():
            raise PathNotFound(f"Path does not exist: {path}", details={"path": path})
        if self.find_bucket(name) is not None:
            raise DuplicateBucket(f"Bucket '{name}' already exists", details={"name": name})
        bucket = Bucket(name=name, path=path)
        self.data.buckets.append(bucket)
        if self.default_bucket() is None:
            self.data.default_bucket = name
        self.persist()
        return bucket

    def set_default_bucket(self, name: str) -> None:
        if self.find_bucket(name) is None:
            raise BucketNotFound(f"Bucket '{name}' does not exist", details={"name": name})
        self.data.default_bucket = name
        self.persist()

    def unset_default_bucket(self) -> None:
        self.data.default_bucket = None
        self.persist()

    def forget_bucket(self, name: str) -> int:
        """Drop every bucket called ``name``; returns how many were removed."""
        current = self.default_bucket()
        if current is not None and current.name == name:
            self.unset_default_bucket()
        before = len(self.data.buckets)
        self.data.buckets = [bucket for bucket in self.data.buckets if bucket.name != name]
        self.persist()
        return before - len(self.data.buckets)
