# src/brsr/scoring/rules.py
from __future__ import annotations

from typing import Any, Mapping, Optional

from brsr.utils.numeric_parser import parse_number
from brsr.utils.paths import get_path, is_present, resolve


# ---------------------------------------------------------------------
# Value tests
#
# A test turns a raw indicator value into True / False, or None when the
# value is absent and the distinction matters to the rule.
# ---------------------------------------------------------------------

def _is_non_empty(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) > 0
    return False


def _any_item(value: Any, field: str) -> Optional[bool]:
    if not isinstance(value, (list, tuple)) or not value:
        return None
    return any(
        isinstance(item, Mapping) and bool(item.get(field))
        for item in value
    )


def apply_test(value: Any, indicator: Mapping[str, Any]) -> Any:
    """Apply the indicator's optional value test. Without a test the value passes through."""
    test = indicator.get("test")
    if test is None:
        return value

    if test == "positive":
        num = parse_number(value)
        return num is not None and num > 0
    if test == "zero":
        # Only an explicit numeric zero counts; "" or absent do not.
        return parse_number(value) == 0 and not isinstance(value, str)
    if test == "non_empty":
        return _is_non_empty(value)
    if test == "present":
        return is_present(value)
    if test == "equals":
        expected = indicator.get("equals")
        return type(value) is type(expected) and value == expected
    if test == "any_item":
        return _any_item(value, indicator["item_field"])

    raise ValueError(f"unknown value test: {test!r}")


def tested_value(block: Mapping[str, Any], indicator: Mapping[str, Any]) -> Any:
    """Resolve an indicator's value from a topic block and run its test."""
    if "any_of" in indicator:
        return any(
            bool(apply_test(get_path(block, path), indicator))
            for path in indicator["any_of"]
        )

    paths = indicator.get("path")
    if paths is None:
        return None
    return apply_test(resolve(block, paths), indicator)


# ---------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------

def _disclosed(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) > 0
    if isinstance(value, (int, float)):
        return value != 0
    return True


def apply_rule(value: Any, rule: Mapping[str, Any]) -> float:
    """
    Evaluate one scoring rule against an indicator value.

    - boolean:    rule["yes"] if value is truthy, else rule["no"];
                  rule["absent"] when given and the value is absent
    - disclosure: rule["points"] for any non-blank disclosure, else 0
    - percentage: points of the first threshold met, most demanding first
    - constant:   rule["points"] regardless of value
    """
    rule_type = rule.get("type")

    if rule_type == "boolean":
        if "absent" in rule and not is_present(value):
            return rule["absent"]
        return rule["yes"] if value else rule["no"]

    if rule_type == "disclosure":
        return rule["points"] if _disclosed(value) else 0

    if rule_type == "percentage":
        num = parse_number(value)
        if num is None:
            return 0
        thresholds = sorted(rule.get("thresholds") or [], key=lambda t: t["min"], reverse=True)
        for t in thresholds:
            if num >= t["min"]:
                return t["points"]
        return 0

    if rule_type == "constant":
        return rule["points"]

    raise ValueError(f"unknown rule type: {rule_type!r}")
