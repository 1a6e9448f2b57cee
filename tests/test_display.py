"""Tests for display formatting."""
import re
from decimal import Decimal
import pytest

from tipsplit.display import build_view, format_money, format_percent, slider_stops
from tipsplit.engine import TipEngine


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("29.5"), "$29.50"),
        (0, "$0.00"),
        (Decimal("1.005"), "$1.01"),  # half cent rounds up
        (Decimal("57.5"), "$57.50"),
    ],
)
def test_format_money(value, expected):
    assert format_money(value) == expected


def test_format_money_custom_symbol():
    assert format_money(Decimal("12"), symbol="€") == "€12.00"


def test_format_percent():
    assert format_percent(18) == "18%"


def test_slider_stops():
    stops = slider_stops()
    assert len(stops) == 11
    assert stops[0] == 0.0
    assert stops[-1] == 1.0
    assert stops[3] == 0.3


def test_build_view_end_to_end():
    engine = TipEngine(bill_text="50", split_count=2, tip_fraction=0.18)
    view = build_view(engine.snapshot())

    assert view.total_per_person == "$29.50"
    assert view.tip_amount == "$9.00"
    assert view.bill_amount == "$50.00"
    assert view.split_count == "2"
    assert view.tip_percent == "18%"
    assert view.show_details is True


def test_build_view_hides_details_for_invalid_bill():
    view = build_view(TipEngine(bill_text="abc").snapshot())
    assert view.show_details is False
    assert view.total_per_person == "$0.00"
    assert view.to_dict()["tip_amount"] == "$0.00"


@pytest.mark.parametrize(
    "bill,split,fraction,expected_total",
    [
        ("1e30", 1, 0.0, "$1" + "0" * 30 + ".00"),
        ("1e30", 4, 0.2, "$3" + "0" * 29 + ".00"),
        ("1e-30", 3, 0.18, "$0.00"),
    ],
)
def test_build_view_extreme_bills(bill, split, fraction, expected_total):
    engine = TipEngine(bill_text=bill, split_count=split, tip_fraction=fraction)
    assert build_view(engine.snapshot()).total_per_person == expected_total


def test_build_view_long_digit_bill_formats_to_cents():
    engine = TipEngine(bill_text="123456789012345678901234567890", split_count=3, tip_fraction=0.18)
    view = build_view(engine.snapshot())
    assert view.total_per_person.startswith("$")
    assert re.fullmatch(r"\$\d{29,30}\.\d\d", view.total_per_person)
    assert view.bill_amount == "$123456789012345678901234567890.00"


def test_build_view_overflowing_bill_shows_zero():
    engine = TipEngine(bill_text="1e999999", tip_fraction=0.5)
    view = build_view(engine.snapshot())
    assert view.total_per_person == "$0.00"
    assert view.bill_amount == "$0.00"
    assert view.show_details is False


def test_build_view_negative_bill_shows_zero():
    view = build_view(TipEngine(bill_text="-20").snapshot())
    assert view.bill_amount == "$0.00"
    assert view.show_details is False
