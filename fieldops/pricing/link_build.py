from __future__ import annotations

from enum import Enum
from typing import Optional

from fieldops.pricing.models import CostResult, LinkBuildBreakdown, LinkBuildOrder
from fieldops.pricing.rates import PriceSheet, round2


class LinkBuildServiceType(str, Enum):
    FULL_SPLICE = "full_splice"
    FULL_SPLICE_FLOAT = "full_splice_float"
    FULL_SPLICE_BROADBAND = "full_splice_broadband"
    ACCESS_FLOAT = "access_float"
    LINK_BUILD_DISCOUNT_15 = "link_build_discount_15"
    LINK_BUILD_BROADBAND_DISCOUNT_15 = "link_build_broadband_discount_15"
    LINK_BUILD_FLOAT_DISCOUNT_15 = "link_build_float_discount_15"

    @property
    def rate_column(self) -> str:
        return f"{self.value}_cost"


def parse_service_type(value: Optional[str]) -> Optional[LinkBuildServiceType]:
    """Case-insensitive lookup; ``-`` and spaces count as ``_``. Unknown -> None."""
    if value is None:
        return None
    key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return LinkBuildServiceType(key)
    except ValueError:
        return None


def calculate_link_build_cost(order: LinkBuildOrder, sheet: PriceSheet) -> CostResult:
    """
    Cost a link-build order: tier rate, doubled for exactly two fiber pairs,
    plus the per-splice surcharge beyond 15 km.

    There is no discount or completion proration for link builds.
    """
    service_type = parse_service_type(order.service_type)
    rate = sheet.rate(service_type.rate_column) if service_type else 0.0

    # alleen exact 2 paren verdubbelt; 1 of 3+ niet
    multiplier = 2.0 if order.fiber_pairs == 2 else 1.0
    base_cost = round2(rate * multiplier)

    splice_rate = sheet.splice_per_km_after_15_cost
    splices_cost = round2(order.splices_after_15km * splice_rate)

    total = round2(base_cost + splices_cost)

    return CostResult(
        order_id=order.order_id,
        circuit_number=order.circuit_number,
        quote_no=order.quote_no,
        breakdown=LinkBuildBreakdown(
            service_type=service_type.value if service_type else None,
            rate=round2(rate),
            fiber_pairs=round2(order.fiber_pairs),
            multiplier=multiplier,
            base_cost=base_cost,
            splices_after_15km=round2(order.splices_after_15km),
            splice_rate=round2(splice_rate),
            splices_cost=splices_cost,
        ),
        subtotal=total,
        additional_cost=0.0,
        total=total,
    )
