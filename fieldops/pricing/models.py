from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional

from fieldops.pricing.rates import to_number


def _flag(value: Any) -> bool:
    return value is True


# -----------------------------
# Engine inputs
# -----------------------------


@dataclass(frozen=True)
class DropCableOrder:
    order_id: Optional[str] = None
    circuit_number: Optional[str] = None
    quote_no: Optional[str] = None

    distance_meters: float = 0.0

    survey_planning: bool = False
    callout: bool = False
    installation: bool = False
    spon_budi_opti: bool = False
    splitter_install: bool = False
    mousepad_install: bool = False

    survey_multiplier: float = 1.0
    callout_multiplier: float = 1.0

    install_completion_percent: Optional[float] = None

    additional_cost: float = 0.0
    additional_cost_reason: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "DropCableOrder":
        return cls(
            order_id=row.get("id"),
            circuit_number=row.get("circuit_number"),
            quote_no=row.get("quote_no"),
            distance_meters=to_number(row.get("dpc_distance_meters")),
            survey_planning=_flag(row.get("survey_planning")),
            callout=_flag(row.get("callout")),
            installation=_flag(row.get("installation")),
            spon_budi_opti=_flag(row.get("spon_budi_opti")),
            splitter_install=_flag(row.get("splitter_install")),
            mousepad_install=_flag(row.get("mousepad_install")),
            survey_multiplier=to_number(row.get("survey_multiplier"), 1.0),
            callout_multiplier=to_number(row.get("callout_multiplier"), 1.0),
            install_completion_percent=to_number(row.get("install_completion_percent"), None),
            # kolomnaam is historisch zo gespeld
            additional_cost=to_number(row.get("additonal_cost")),
            additional_cost_reason=row.get("additonal_cost_reason"),
        )


@dataclass(frozen=True)
class LinkBuildOrder:
    order_id: Optional[str] = None
    circuit_number: Optional[str] = None
    quote_no: Optional[str] = None

    service_type: Optional[str] = None
    fiber_pairs: float = 0.0
    link_distance: float = 0.0
    splices_after_15km: float = 0.0

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "LinkBuildOrder":
        return cls(
            order_id=row.get("id"),
            circuit_number=row.get("circuit_number"),
            quote_no=row.get("quote_no"),
            service_type=row.get("service_type"),
            fiber_pairs=to_number(row.get("no_of_fiber_pairs")),
            link_distance=to_number(row.get("link_distance")),
            splices_after_15km=to_number(row.get("no_of_splices_after_15km")),
        )


# -----------------------------
# Engine outputs
# -----------------------------


@dataclass(frozen=True)
class ServiceLine:
    name: str
    rate: float
    multiplier: float
    cost: float


@dataclass(frozen=True)
class InstallationLine:
    included: bool
    distance_meters: float
    method: Optional[str]  # "flat" | "per_meter" | None
    rate: float
    base_cost: float
    discount: float
    discounted_cost: float
    completion_percent: Optional[float]
    cost: float


@dataclass(frozen=True)
class AdditionalCostLine:
    cost: float
    reason: Optional[str] = None


@dataclass(frozen=True)
class DropCableBreakdown:
    services: List[ServiceLine]
    installation: InstallationLine
    additional: AdditionalCostLine


@dataclass(frozen=True)
class LinkBuildBreakdown:
    service_type: Optional[str]
    rate: float
    fiber_pairs: float
    multiplier: float
    base_cost: float
    splices_after_15km: float
    splice_rate: float
    splices_cost: float


@dataclass(frozen=True)
class CostResult:
    """Per-order result. Recomputed on every request, never stored."""

    order_id: Optional[str]
    circuit_number: Optional[str]
    quote_no: Optional[str]
    breakdown: Any
    subtotal: float
    additional_cost: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
