from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any


SUPPORTED_EXTS = {".json", ".csv"}


def _coerce_number(value: Any) -> Any:
    # CSV cells arrive as text; keep anything that is not a clean number as-is.
    if not isinstance(value, str):
        return value
    s = value.strip()
    if not s:
        return None
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        return value


def read_records(path: str | Path, *, numeric_keys: tuple[str, ...] = ()) -> list[dict[str, Any]]:
    """Read a list of flat records from .json (array of objects) or .csv (header row).

    Fields named in ``numeric_keys`` are converted to int/float when they look
    numeric; everything else is left as read.
    """
    p = Path(path)
    ext = p.suffix.lower()
    if ext not in SUPPORTED_EXTS:
        raise ValueError(f"Unsupported file type {ext!r} for {p.name}; use .json or .csv")

    if ext == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise ValueError(f"{p.name} must contain a JSON array of objects")
        rows = [dict(r) for r in data]
    else:
        with p.open("r", encoding="utf-8", newline="") as f:
            rows = [dict(r) for r in csv.DictReader(f)]

    for r in rows:
        for k in numeric_keys:
            if k in r:
                r[k] = _coerce_number(r[k])
    return rows
