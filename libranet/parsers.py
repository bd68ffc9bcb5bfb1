"""
Input parsers for identifiers and loan durations.

Both are pure functions: they either return an int or raise an
``InvalidFormatError`` subclass.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import (
    InvalidDurationFormatError,
    InvalidIdFormatError,
    UnsupportedDurationUnitError,
)

MAX_ID = 2**31 - 1

_ID_PATTERN = re.compile(r"^\s*([0-9]+)\s*$")
_DURATION_PATTERN = re.compile(r"^\s*([0-9]+)\s*([a-z]+)?\s*$", re.IGNORECASE)

_DAY_UNITS = frozenset({"d", "day", "days"})
_WEEK_UNITS = frozenset({"w", "week", "weeks"})


def parse_id(raw: Optional[str]) -> int:
    if raw is None:
        raise InvalidIdFormatError("ID string is null")
    m = _ID_PATTERN.match(raw)
    if not m:
        raise InvalidIdFormatError(
            f"Invalid ID format: '{raw}'. Expect digits only."
        )
    value = int(m.group(1))
    if value > MAX_ID:
        raise InvalidIdFormatError(f"ID out of range: {raw}")
    return value


def parse_duration_days(raw: Optional[str]) -> int:
    """
    Convert strings like ``"14 days"``, ``"2w"`` or ``"7"`` to a day count.
    Week forms are multiplied by 7; a bare number means days.
    """
    if raw is None:
        raise InvalidDurationFormatError("Duration string is null")
    m = _DURATION_PATTERN.match(raw)
    if not m:
        raise InvalidDurationFormatError(f"Unrecognized duration format: '{raw}'")

    value = int(m.group(1))
    unit = (m.group(2) or "").lower()
    if not unit or unit in _DAY_UNITS:
        return value
    if unit in _WEEK_UNITS:
        return value * 7
    raise UnsupportedDurationUnitError(f"Unsupported duration unit in: '{raw}'")
