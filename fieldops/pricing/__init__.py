# Order cost engine: pure functions over (order, price sheet)

from .drop_cable import calculate_drop_cable_cost
from .link_build import LinkBuildServiceType, calculate_link_build_cost
from .models import CostResult, DropCableOrder, LinkBuildOrder
from .quote_numbers import generate_quote_no, resolve_quote_prefix
from .rates import PriceSheet, round2, to_number
from .weeks import canonicalize_week, parse_week_year

__all__ = [
    "calculate_drop_cable_cost",
    "calculate_link_build_cost",
    "LinkBuildServiceType",
    "CostResult",
    "DropCableOrder",
    "LinkBuildOrder",
    "generate_quote_no",
    "resolve_quote_prefix",
    "PriceSheet",
    "round2",
    "to_number",
    "canonicalize_week",
    "parse_week_year",
]
