"""Unified output envelope for all zz commands.

Plain text is the default: one line per result row or message.
With --json every command prints a single JSON document instead:
  ok=True:  {"ok": true, "code": "SUCCESS", "data": {...}}
  ok=False: {"ok": false, "code": "<ERROR_CODE>", "message": "...", "details": {...}}

Exit codes: 0=success, 2=usage/system error, 3-12 one per error kind (zz.errors).
"""

from __future__ import annotations

import json
import sys
from typing import Any, Sequence

from zz.errors import ZzError

SYSTEM_ERROR_EXIT = 2


def _emit_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _emit_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def table(rows: Sequence[Sequence[Any]]) -> list[str]:
    """Render rows as left-aligned columns separated by one space, no header."""
    cells = [[str(cell) for cell in row] for row in rows]
    if not cells:
        return []
    widths = [0] * max(len(row) for row in cells)
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return [
        " ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
        for row in cells
    ]


def ok(data: dict[str, Any] | None = None, *,
       lines: Sequence[str] = (), as_json: bool = False) -> None:
    """Print success output and exit 0."""
    if as_json:
        _emit_json({"ok": True, "code": "SUCCESS", "data": data or {}})
    else:
        _emit_lines(lines)
    sys.exit(0)


def fail(code: str, message: str, *, details: dict[str, Any] | None = None,
         exit_code: int = 1, as_json: bool = False) -> None:
    """Print an error and exit with ``exit_code``."""
    if as_json:
        _emit_json({"ok": False, "code": code, "message": message, "details": details or {}})
    else:
        print(message)
    sys.exit(exit_code)


def error(exc: ZzError, *, as_json: bool = False) -> None:
    fail(exc.error_code, exc.message, details=exc.details,
         exit_code=exc.exit_code, as_json=as_json)


def partial(data: dict[str, Any], errors: Sequence[ZzError], *,
            lines: Sequence[str] = (), as_json: bool = False) -> None:
    """Print results followed by any non-fatal errors.

    Exits 0 when ``errors`` is empty, otherwise with the first error's code.
    """
    if not errors:
        ok(data, lines=lines, as_json=as_json)
    first = errors[0]
    if as_json:
        _emit_json({
            "ok": False,
            "code": first.error_code,
            "message": first.message,
            "data": data,
            "errors": [exc.to_payload() for exc in errors],
        })
    else:
        _emit_lines(lines)
        _emit_lines([f"Error: {exc.message}" for exc in errors])
    sys.exit(first.exit_code)


def system_error(message: str, *, as_json: bool = False) -> None:
    """Print system error and exit 2."""
    fail("SYSTEM_ERROR", message, exit_code=SYSTEM_ERROR_EXIT, as_json=as_json)
