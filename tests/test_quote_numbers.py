import pytest

from fieldops.pricing.quote_numbers import generate_quote_no, resolve_quote_prefix

PREFIXES = {"openserve": "OSV", "vumatel": "VUM"}


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Openserve Western Cape", "OSV"),
        ("OPENSERVE", "OSV"),
        ("Vumatel (Pty) Ltd", "VUM"),
        ("Acme Fibre", None),
        ("", None),
        (None, None),
    ],
)
def test_resolve_prefix_by_substring(name, expected):
    assert resolve_quote_prefix(name, PREFIXES) == expected


def test_quote_no_format():
    assert generate_quote_no("OSV", "2025-07", offset=1000) == "OSV-Q01007"
    assert generate_quote_no("VUM", "2025/52", offset=1000) == "VUM-Q01052"


def test_quote_no_pads_to_five_digits():
    assert generate_quote_no("OSV", "2025-3", offset=0) == "OSV-Q00003"


def test_quote_no_ignores_the_year():
    assert generate_quote_no("OSV", "2024-07", offset=1000) == generate_quote_no(
        "OSV", "2025-07", offset=1000
    )


def test_quote_no_needs_prefix_and_week():
    assert generate_quote_no(None, "2025-07", offset=1000) is None
    assert generate_quote_no("OSV", "not a week", offset=1000) is None
    assert generate_quote_no("OSV", None, offset=1000) is None


def test_same_client_and_week_share_a_quote_no():
    # bekende beperking: geen de-duplicatie per order
    first = generate_quote_no("OSV", "2025-07", offset=1000)
    second = generate_quote_no("OSV", "2025-7", offset=1000)
    assert first == second


@pytest.mark.parametrize("week", ["123", "2025-123", "2031/123"])
def test_three_digit_week_keeps_its_number(week):
    assert generate_quote_no("OSV", week, offset=1000) == "OSV-Q01123"
