"""Permissive value coercion for locomotive fields.

Input is never rejected: numeric fields accept ints, floats and numeric
strings; anything else becomes 0. String fields accept any value.
"""
from __future__ import annotations

import math
from typing import Any


def to_int(value: Any) -> int:
    """Coerce `value` to int. Non-numeric or non-finite input yields 0; fractions are truncated."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return int(number) if math.isfinite(number) else 0
    return 0


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_record_id(value: Any) -> int | None:
    """Coerce a lookup id. "1.0" and 1.0 name id 1; returns None when `value` cannot name an integer id (e.g. "abc", 1.5)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None
