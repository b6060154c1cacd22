# tests/test_rules.py
import pytest

from brsr.scoring import rules
from brsr.scoring.rules import apply_rule, apply_test

BOOL = {"type": "boolean", "yes": 100, "no": -10}
PCT = {
    "type": "percentage",
    "thresholds": [{"min": 80, "points": 80}, {"min": 100, "points": 100}],
}


def test_boolean_rule():
    assert apply_rule(True, BOOL) == 100
    assert apply_rule(False, BOOL) == -10
    assert apply_rule(None, BOOL) == -10

    with_absent = dict(BOOL, absent=0)
    assert apply_rule(None, with_absent) == 0
    assert apply_rule(False, with_absent) == -10


def test_disclosure_rule():
    rule = {"type": "disclosure", "points": 50}

    assert apply_rule("Nil", rule) == 50
    assert apply_rule({"pf": "100%"}, rule) == 50
    assert apply_rule(2, rule) == 50

    for blank in (None, "", "   ", {}, [], False, 0):
        assert apply_rule(blank, rule) == 0


def test_percentage_rule_first_threshold_met():
    assert apply_rule(100, PCT) == 100
    assert apply_rule(86, PCT) == 80
    assert apply_rule("85%", PCT) == 80
    assert apply_rule(79.9, PCT) == 0
    assert apply_rule("n/a", PCT) == 0
    assert apply_rule(None, PCT) == 0


def test_constant_and_unknown_rules():
    assert apply_rule(None, {"type": "constant", "points": 100}) == 100

    with pytest.raises(ValueError):
        apply_rule(True, {"type": "bonus", "points": 5})


def test_value_tests():
    zero = {"test": "zero"}
    assert apply_test(0, zero) is True
    assert apply_test(0.0, zero) is True
    assert apply_test("0", zero) is False
    assert apply_test(None, zero) is False

    positive = {"test": "positive"}
    assert apply_test("3", positive) is True
    assert apply_test(0, positive) is False

    equals = {"test": "equals", "equals": True}
    assert apply_test(True, equals) is True
    assert apply_test(1, equals) is False
    assert apply_test("Yes", equals) is False

    non_empty = {"test": "non_empty"}
    assert apply_test(["x"], non_empty) is True
    assert apply_test([], non_empty) is False
    assert apply_test("  ", non_empty) is False

    assert apply_test(0, {"test": "present"}) is True
    assert apply_test(None, {"test": "present"}) is False

    with pytest.raises(ValueError):
        apply_test(1, {"test": "odd"})


def test_any_item_test():
    indicator = {"test": "any_item", "item_field": "published"}

    assert apply_test([{"published": False}, {"published": True}], indicator) is True
    assert apply_test([{"published": False}], indicator) is False
    assert apply_test([], indicator) is None
    assert apply_test(None, indicator) is None


def test_tested_value_resolves_aliases_and_any_of():
    block = {"a": {"x": None}, "b": {"x": False}, "c": ["item"]}

    assert rules.tested_value(block, {"path": ["a.x", "b.x"]}) is False
    assert rules.tested_value(block, {"path": "missing"}) is None
    assert rules.tested_value(block, {"any_of": ["missing", "c"], "test": "non_empty"}) is True
    assert rules.tested_value(block, {"any_of": ["missing", "b"], "test": "non_empty"}) is True
    assert rules.tested_value(block, {"any_of": ["missing", "a.x"], "test": "non_empty"}) is False
    assert rules.tested_value(block, {"rule": {"type": "constant", "points": 1}}) is None
