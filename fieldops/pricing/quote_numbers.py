from __future__ import annotations

from typing import Any, Mapping, Optional

from fieldops.pricing.weeks import parse_week_year


def resolve_quote_prefix(
    client_name: Optional[str], prefixes: Mapping[str, str]
) -> Optional[str]:
    """Return the prefix whose key occurs (case-insensitive) in the client's name."""
    name = (client_name or "").strip().lower()
    if not name:
        return None
    for needle, prefix in prefixes.items():
        if needle and needle.lower() in name:
            return prefix
    return None


def generate_quote_no(prefix: Optional[str], week: Any, *, offset: int) -> Optional[str]:
    """
    Build ``{PREFIX}-Q{00000}`` from the week number plus a fixed offset.

    Pure: every order of the same client prefix and week gets the same number.
    """
    if not prefix:
        return None
    parsed = parse_week_year(week)
    if parsed is None:
        return None
    _, number = parsed
    return f"{prefix}-Q{number + offset:05d}"
