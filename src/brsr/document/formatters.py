# src/brsr/document/formatters.py
from __future__ import annotations

from typing import Any, Mapping

from brsr.utils.numeric_parser import NOT_AVAILABLE, parse_number
from brsr.utils.paths import is_present

NOT_APPLICABLE = "not_applicable"


def humanize(key: str) -> str:
    """'employees_other_than_bod_kmp' -> 'Employees other than bod kmp'."""
    text = key.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def display_number(num: Any) -> str:
    """Integral floats print without decimals; others with at most four."""
    if isinstance(num, float):
        if num.is_integer():
            return str(int(num))
        text = f"{num:.4f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text
    return str(num)


def _text(value: Any, fallback: str) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return display_number(value)
    if isinstance(value, str):
        return value.strip() or fallback
    if isinstance(value, (list, tuple)):
        return _join(value, fallback)
    if isinstance(value, Mapping):
        parts = [
            f"{humanize(str(k))}: {_text(v, NOT_AVAILABLE)}"
            for k, v in value.items()
            if is_present(v)
        ]
        return "; ".join(parts) or fallback
    return str(value)


def _join(value: Any, fallback: str) -> str:
    if not isinstance(value, (list, tuple)):
        return _text(value, fallback)
    items = [_text(v, "") for v in value if is_present(v)]
    items = [i for i in items if i]
    return ", ".join(items) or fallback


def _percent(value: Any, fallback: str) -> str:
    if isinstance(value, str) and value.strip().endswith("%"):
        return value.strip()
    num = parse_number(value)
    if num is None:
        return fallback
    return f"{display_number(num)}%"


def _number(value: Any, fallback: str) -> str:
    num = parse_number(value)
    if num is None:
        return _text(value, fallback)
    return display_number(num)


def format_value(value: Any, fmt: str = "text", fallback: str = NOT_AVAILABLE) -> str:
    """
    Render one resolved value as display text.

    Absent or null values always render as `fallback`. Booleans never
    render raw: they become "Yes"/"No" under every format.

    Formats:
      text     free text; lists are joined, mappings listed as "Key: value"
      yes_no   "Yes" for truthy values, "No" otherwise
      tri      True/False/"not_applicable" -> "Yes"/"No"/"Not Applicable"
      percent  numeric value with a "%" suffix
      number   numeric value, integral floats without decimals
      join     comma-separated list
    """
    if not is_present(value):
        return fallback

    if fmt == "yes_no":
        return "Yes" if value else "No"
    if fmt == "tri":
        if value is True:
            return "Yes"
        if value is False:
            return "No"
        if value == NOT_APPLICABLE:
            return "Not Applicable"
        return fallback
    if fmt == "percent":
        return _percent(value, fallback)
    if fmt == "number":
        return _number(value, fallback)
    if fmt == "join":
        return _join(value, fallback)
    return _text(value, fallback)
