from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional


@dataclass
class ZzError(Exception):
    message: str
    details: Optional[Dict[str, Any]] = None

    error_code: ClassVar[str] = "ZZ_ERROR"
    exit_code: ClassVar[int] = 1

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class StoreUnavailable(ZzError):
    """The store location could not be determined."""

    error_code = "STORE_UNAVAILABLE"
    exit_code = 3


class PersistenceError(ZzError):
    """Reading, writing or parsing the store file failed."""

    error_code = "PERSISTENCE_ERROR"
    exit_code = 4


class BucketNotFound(ZzError):
    error_code = "BUCKET_NOT_FOUND"
    exit_code = 5


class PathExists(ZzError):
    error_code = "PATH_EXISTS"
    exit_code = 6


class DirectoryCreateError(ZzError):
    error_code = "DIRECTORY_CREATE_ERROR"
    exit_code = 7


class DirectoryReadError(ZzError):
    error_code = "DIRECTORY_READ_ERROR"
    exit_code = 8


class MalformedEntryName(ZzError):
    """A directory entry is not named <date>_<rest>."""

    error_code = "MALFORMED_ENTRY_NAME"
    exit_code = 9


class PathNotFound(ZzError):
    error_code = "PATH_NOT_FOUND"
    exit_code = 10


class DuplicateBucket(ZzError):
    error_code = "DUPLICATE_BUCKET"
    exit_code = 11


class NoBucketSelected(ZzError):
    error_code = "NO_BUCKET_SELECTED"
    exit_code = 12
