import pytest

from fieldops.pricing.link_build import (
    LinkBuildServiceType,
    calculate_link_build_cost,
    parse_service_type,
)
from fieldops.pricing.models import LinkBuildOrder
from fieldops.pricing.rates import PriceSheet


@pytest.fixture
def sheet():
    return PriceSheet(
        full_splice_cost=3200.0,
        full_splice_float_cost=2800.0,
        access_float_cost=1900.0,
        link_build_discount_15_cost=4100.0,
        splice_per_km_after_15_cost=150.0,
    )


def _order(**fields):
    base = {"id": "lb-1", "circuit_number": "LB-001"}
    base.update(fields)
    return LinkBuildOrder.from_mapping(base)


@pytest.mark.parametrize(
    "pairs, expected",
    [
        (1, 3200.0),
        (2, 6400.0),
        (3, 3200.0),
        (None, 3200.0),
    ],
)
def test_only_exactly_two_pairs_doubles_the_rate(sheet, pairs, expected):
    result = calculate_link_build_cost(
        _order(service_type="full_splice", no_of_fiber_pairs=pairs), sheet
    )
    assert result.breakdown.base_cost == expected
    assert result.total == expected


def test_splices_after_15km_are_charged_per_splice(sheet):
    result = calculate_link_build_cost(
        _order(service_type="access_float", no_of_fiber_pairs=1, no_of_splices_after_15km=3),
        sheet,
    )
    assert result.breakdown.splices_cost == 450.0
    assert result.total == 1900.0 + 450.0


def test_unknown_service_type_has_no_rate(sheet):
    result = calculate_link_build_cost(
        _order(service_type="dark_fibre", no_of_fiber_pairs=2, no_of_splices_after_15km=1),
        sheet,
    )
    assert result.breakdown.service_type is None
    assert result.breakdown.base_cost == 0.0
    assert result.total == 150.0


def test_link_distance_does_not_change_the_price(sheet):
    short = calculate_link_build_cost(_order(service_type="full_splice", link_distance=2), sheet)
    long = calculate_link_build_cost(_order(service_type="full_splice", link_distance=40), sheet)
    assert short.total == long.total


def test_no_additional_cost_for_link_builds(sheet):
    result = calculate_link_build_cost(_order(service_type="full_splice_float"), sheet)
    assert result.additional_cost == 0.0
    assert result.subtotal == result.total == 2800.0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("full_splice", LinkBuildServiceType.FULL_SPLICE),
        ("Full-Splice", LinkBuildServiceType.FULL_SPLICE),
        ("access float", LinkBuildServiceType.ACCESS_FLOAT),
        ("LINK_BUILD_DISCOUNT_15", LinkBuildServiceType.LINK_BUILD_DISCOUNT_15),
        ("something else", None),
        (None, None),
    ],
)
def test_parse_service_type(raw, expected):
    assert parse_service_type(raw) == expected


def test_every_service_type_maps_to_a_price_sheet_column():
    sheet = PriceSheet()
    for service_type in LinkBuildServiceType:
        assert hasattr(sheet, service_type.rate_column)


def test_zero_sheet_costs_nothing():
    order = _order(service_type="full_splice", no_of_fiber_pairs=2, no_of_splices_after_15km=4)
    assert calculate_link_build_cost(order, PriceSheet.zero()).total == 0.0


def test_breakdown_numbers_have_at_most_two_decimals():
    sheet = PriceSheet(full_splice_cost=3200.005, splice_per_km_after_15_cost=149.995)
    result = calculate_link_build_cost(
        _order(service_type="full_splice", no_of_fiber_pairs=2, no_of_splices_after_15km=3),
        sheet,
    )
    breakdown = result.to_dict()["breakdown"]
    numbers = [v for v in breakdown.values() if isinstance(v, float)]

    assert breakdown["rate"] == 3200.01
    assert breakdown["splice_rate"] == 150.0
    for number in numbers:
        assert round(number, 2) == number
