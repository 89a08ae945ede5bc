import sys
from decimal import Decimal

import pytest

from controller.quote import QuoteOp, estimate
from schema.quote import QuoteIn
from util.enum import ShippingMode


@pytest.mark.parametrize("weight", [3, 7.3, 12, 55.5, 100, 1234.56])
def test_air_estimate_is_eighteen_per_kg(weight):
    assert estimate(weight, ShippingMode.air) == max(50, round(18 * weight))


@pytest.mark.parametrize("weight", [1, 9.9, 10.2, 42, 100, 987.65])
def test_sea_estimate_is_five_per_kg(weight):
    assert estimate(weight, ShippingMode.sea) == max(50, round(5 * weight))


def test_air_100kg():
    assert estimate(100, ShippingMode.air) == 1800


def test_small_sea_shipment_gets_minimum_charge():
    # 0.5 * 1 * 10 = 5, below the floor
    assert estimate(1, ShippingMode.sea) == 50


def test_ties_round_half_up():
    # 61.5 and 125.5
    assert estimate(12.3, ShippingMode.sea) == 62
    assert estimate(25.1, ShippingMode.sea) == 126


def test_mode_accepts_plain_strings():
    assert estimate(10, "air") == estimate(10, ShippingMode.air) == 180


def test_quote_op_reports_currency():
    result = QuoteOp.quote(
        QuoteIn(origin="Nairobi", destination="Mombasa", weight=100, mode="air"),
        "KSH",
    )
    assert result.ok is True
    assert result.estimate == 1800
    assert result.currency == "KSH"


@pytest.mark.parametrize("mode, rate", [("air", 18), ("sea", 5)])
def test_very_large_weight_is_exact(mode, rate):
    assert estimate(1e30, mode) == rate * 10 ** 30


def test_largest_float_weight_is_priced():
    weight = sys.float_info.max
    assert estimate(weight, "sea") == int(Decimal(str(weight)) * 5)
