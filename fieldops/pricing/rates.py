from __future__ import annotations

import math
from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

D = Decimal

CENT = D("0.01")


def to_number(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """
    Coerce a raw column/JSON value to a finite float.

    None, booleans, unparseable strings, NaN and +/-inf all become ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def round2(value: float) -> float:
    """Half-up rounding to cents."""
    return float(D(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PriceSheet:
    """
    Unit rates for one (client, order_type) pair.

    Every field is a finite float; use ``from_row`` to build one from a stored row.
    """

    # drop cable
    survey_planning_cost: float = 0.0
    callout_cost: float = 0.0
    installation_cost: float = 0.0
    per_meter_rate: float = 0.0
    discount: float = 0.0
    spon_budi_opti_cost: float = 0.0
    splitter_install_cost: float = 0.0
    mousepad_install_cost: float = 0.0

    # link build
    full_splice_cost: float = 0.0
    full_splice_float_cost: float = 0.0
    full_splice_broadband_cost: float = 0.0
    access_float_cost: float = 0.0
    link_build_discount_15_cost: float = 0.0
    link_build_broadband_discount_15_cost: float = 0.0
    link_build_float_discount_15_cost: float = 0.0
    splice_per_km_after_15_cost: float = 0.0

    @classmethod
    def zero(cls) -> "PriceSheet":
        return cls()

    @classmethod
    def from_row(
        cls,
        row: Optional[Mapping[str, Any]],
        defaults: Optional[Mapping[str, float]] = None,
    ) -> "PriceSheet":
        # no row at all -> everything zero, defaults only fill gaps in a real row
        if row is None:
            return cls.zero()

        defaults = defaults or {}
        values = {}
        for f in fields(cls):
            fallback = to_number(defaults.get(f.name), 0.0)
            values[f.name] = to_number(row.get(f.name), fallback)
        return cls(**values)

    def rate(self, column: Optional[str]) -> float:
        if not column:
            return 0.0
        return float(getattr(self, column, 0.0))
