from __future__ import annotations

from typing import List, Optional, Tuple

from fieldops.pricing.models import (
    AdditionalCostLine,
    CostResult,
    DropCableBreakdown,
    DropCableOrder,
    InstallationLine,
    ServiceLine,
)
from fieldops.pricing.rates import PriceSheet, round2

# below this distance the flat installation rate applies
PER_METER_THRESHOLD_M = 101

# (flag / line name, price-sheet column, multiplier attribute on the order)
SERVICE_RATES: Tuple[Tuple[str, str, Optional[str]], ...] = (
    ("survey_planning", "survey_planning_cost", "survey_multiplier"),
    ("callout", "callout_cost", "callout_multiplier"),
    ("spon_budi_opti", "spon_budi_opti_cost", None),
    ("splitter_install", "splitter_install_cost", None),
    ("mousepad_install", "mousepad_install_cost", None),
)


def _echo(value: Optional[float]) -> Optional[float]:
    return None if value is None else round2(value)


def service_lines(order: DropCableOrder, sheet: PriceSheet) -> List[ServiceLine]:
    """One line per service whose flag is set; unset flags cost nothing and are left out."""
    lines: List[ServiceLine] = []
    for name, column, multiplier_attr in SERVICE_RATES:
        if not getattr(order, name):
            continue
        rate = sheet.rate(column)
        multiplier = getattr(order, multiplier_attr) if multiplier_attr else 1.0
        lines.append(
            ServiceLine(
                name=name,
                rate=round2(rate),
                multiplier=round2(multiplier),
                cost=round2(rate * multiplier),
            )
        )
    return lines


def installation_line(order: DropCableOrder, sheet: PriceSheet) -> InstallationLine:
    distance = order.distance_meters
    percent = order.install_completion_percent

    if not order.installation:
        return InstallationLine(
            included=False,
            distance_meters=round2(distance),
            method=None,
            rate=0.0,
            base_cost=0.0,
            discount=round2(sheet.discount),
            discounted_cost=0.0,
            completion_percent=_echo(percent),
            cost=0.0,
        )

    if distance < PER_METER_THRESHOLD_M:
        method = "flat"
        rate = sheet.installation_cost
        base = rate
    else:
        method = "per_meter"
        rate = sheet.per_meter_rate
        base = rate * distance

    discounted = base * sheet.discount

    # 0 of ontbrekend betekent: geen override, volledige installatie
    if percent is not None and 0 < percent <= 100:
        cost = discounted * (percent / 100)
    else:
        cost = discounted

    return InstallationLine(
        included=True,
        distance_meters=round2(distance),
        method=method,
        rate=round2(rate),
        base_cost=round2(base),
        discount=round2(sheet.discount),
        discounted_cost=round2(discounted),
        completion_percent=_echo(percent),
        cost=round2(cost),
    )


def calculate_drop_cable_cost(order: DropCableOrder, sheet: PriceSheet) -> CostResult:
    """
    Cost a drop-cable order against its client's price sheet.

    Every line is rounded to cents where it is computed; the subtotal and the
    total are rounded again over the already-rounded lines. Inputs echoed in the
    breakdown (rates, multipliers, distance) are shown to cents as well, the
    costs themselves are computed from the unrounded values.
    """
    services = service_lines(order, sheet)
    installation = installation_line(order, sheet)
    additional = AdditionalCostLine(
        cost=round2(order.additional_cost),
        reason=order.additional_cost_reason,
    )

    line_sum = sum(line.cost for line in services) + installation.cost

    return CostResult(
        order_id=order.order_id,
        circuit_number=order.circuit_number,
        quote_no=order.quote_no,
        breakdown=DropCableBreakdown(
            services=services,
            installation=installation,
            additional=additional,
        ),
        subtotal=round2(line_sum),
        additional_cost=additional.cost,
        total=round2(line_sum + additional.cost),
    )
