from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional, Tuple

_YEAR_WEEK_RE = re.compile(r"^(\d{4})[-/](\d+)$")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def parse_week_year(value: Any, *, today: Optional[date] = None) -> Optional[Tuple[int, int]]:
    """
    Parse a week input into ``(year, week)``.

    Accepts ``"2025-7"``, ``"2025/07"`` or a bare number (``"7"``, ``7``) which is
    taken as a week of the current year. A bare string only needs a leading integer,
    so ``"7b"`` is week 7. Week numbers are not range-checked.
    """
    if value is None or isinstance(value, bool):
        return None

    s = str(value).strip()
    if not s:
        return None

    m = _YEAR_WEEK_RE.match(s)
    if m:
        return int(m.group(1)), int(m.group(2))

    m = _LEADING_INT_RE.match(s)
    if m:
        year = (today or date.today()).year
        return year, int(m.group(0))

    return None


def canonicalize_week(value: Any, *, today: Optional[date] = None) -> Optional[str]:
    """Normalise a week input to ``YYYY-WW``; None when it cannot be parsed."""
    parsed = parse_week_year(value, today=today)
    if parsed is None:
        return None
    year, week = parsed
    return f"{year}-{week:02d}"
