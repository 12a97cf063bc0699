"""Shared utility functions for zz."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path


def atomic_write(filepath: Path, content: str) -> None:
    """Write content atomically: write to .tmp then rename over the target."""
    tmp_path = filepath.with_name(filepath.name + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(filepath)
    except OSError:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise


def printable(text: str) -> str:
    """Replace undecodable filename bytes so the text can be printed or JSON-encoded."""
    return os.fsencode(text).decode("utf-8", "replace")
