# tests/test_numeric.py
import math

from brsr.utils.numeric_parser import parse_number, percentage, ratio, to_number, yoy_change
from brsr.utils.paths import get_path, resolve, resolve_block


def test_parse_number_accepts_disclosed_forms():
    assert parse_number(1502) == 1502
    assert parse_number(" 85.5 ") == 85.5
    assert parse_number("85%") == 85
    assert parse_number("1e3") == 1000
    assert parse_number(" 12 ") == 12

    # integral floats come back as ints so summed counts stay counts
    assert isinstance(parse_number(12.0), int)


def test_parse_number_rejects_non_numeric():
    assert parse_number(None) is None
    assert parse_number(True) is None
    assert parse_number("") is None
    assert parse_number("Nil") is None
    assert parse_number(float("nan")) is None
    assert parse_number(math.inf) is None
    assert parse_number({"a": 1}) is None

    assert to_number("Nil") == 0
    assert to_number(None) == 0


def test_percentage_undefined_for_zero_denominator():
    assert percentage(86, 1588) == "5.42%"
    assert percentage(3, 10) == "30.00%"
    assert percentage(0, 0) == "N/A"
    assert percentage(5, None) == "N/A"


def test_yoy_change_rules():
    assert yoy_change(110, 100) == "10.00%"
    assert yoy_change(90, 100) == "-10.00%"
    assert yoy_change(5, 0) == "New"
    assert yoy_change(0, 0) == "N/A"
    assert yoy_change(None, None) == "N/A"


def test_ratio_fixed_precision_and_guards():
    assert ratio(54000, 1080000, "%", scale=100) == "5.0000 %"
    assert ratio(1, 8, "kL per INR") == "0.1250 kL per INR"
    assert ratio(50, 0, "GJ per INR") == "N/A"
    assert ratio(50, -1, "GJ per INR") == "N/A"
    assert ratio(None, 10, "GJ per INR") == "N/A"


def test_path_helpers():
    data = {"a": {"b": {"c": 0}}, "legacy": {"c": 5}, "empty": {}}

    assert get_path(data, "a.b.c") == 0
    assert get_path(data, "a.x.c") is None
    assert get_path(data, "a.b.c.d") is None

    # first present alias wins, even when it is an empty value
    assert resolve(data, ["empty", "legacy"]) == {}
    assert resolve(data, ["missing", "legacy.c"]) == 5
    assert resolve(data, ["missing"], default="x") == "x"

    assert resolve_block({"k": [1, 2]}, ["k"]) == {}
    assert resolve_block({"k": {"v": 1}}, ["other", "k"]) == {"v": 1}
