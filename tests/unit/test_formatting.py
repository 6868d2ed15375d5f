"""Tests for percentage and size labels."""

import pytest

from bundleburst.core.interaction.formatting import format_percentage, format_size, to_precision


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (50, "50.0"),
        (100, "100"),
        (5, "5.00"),
        (0.05, "0.0500"),
        (99.96, "100"),
        (12.345, "12.3"),
        (0, "0.00"),
        (1234, "1.23e+3"),
    ],
)
def test_to_precision_matches_significant_digit_format(value: float, expected: str) -> None:
    assert to_precision(value, 3) == expected


def test_percentage_half_is_three_significant_digits() -> None:
    assert format_percentage(500, 1000) == "50.0%"


def test_percentage_whole_bundle() -> None:
    assert format_percentage(2000, 2000) == "100%"


def test_percentage_below_threshold_uses_literal_label() -> None:
    assert format_percentage(9, 10_000) == "< 0.1%"
    assert format_percentage(0, 10_000) == "< 0.1%"


def test_percentage_at_threshold_is_numeric() -> None:
    assert format_percentage(1, 1000) == "0.100%"


def test_percentage_rounding_up_to_threshold_is_numeric() -> None:
    """0.09996% rounds to 0.100 at three digits, so it is not floored."""
    assert format_percentage(9.996, 10_000) == "0.100%"


def test_percentage_of_empty_total() -> None:
    assert format_percentage(0, 0) == "< 0.1%"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0.00"),
        (999, "999.00"),
        (1000, "1.00 KiB"),
        (1500, "1.50 KiB"),
        (999_999, "1000.00 KiB"),
        (1_000_000, "1.00 MiB"),
        (1_500_000, "1.50 MiB"),
        (1_000_000_000, "1.00 GiB"),
        (2_000_000_000, "2.00 GiB"),
    ],
)
def test_size_unit_boundaries(value: float, expected: str) -> None:
    assert format_size(value) == expected
