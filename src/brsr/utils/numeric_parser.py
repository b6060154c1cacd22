from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

NOT_AVAILABLE = "N/A"


# All known whitespace variants (regular + non-breaking)
SPACE_CHARS = [
    "\u0020",  # normal space
    "\u00A0",  # NBSP
    "\u2007",  # figure space
    "\u202F",  # narrow NBSP
]

# Leading numeric prefix, the way a disclosure form stores "85", "85.5%" or "1e3"
_LEADING_NUMBER = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def _normalize_spaces(s: str) -> str:
    """Replace all types of weird spaces with a normal space."""
    for ch in SPACE_CHARS:
        s = s.replace(ch, " ")
    return s


def _tidy(num: float) -> Number:
    """Return an int for integral floats so sums of counts stay counts."""
    if num.is_integer():
        return int(num)
    return num


def parse_number(raw: Any) -> Optional[Number]:
    """
    Parse a disclosed value into a number, or None when it is not numeric.

    Handles:
      - ints and floats (NaN and infinities count as not numeric)
      - numeric strings: "1502", " 85.5 ", "85%", "1e3"
      - booleans are answers, not quantities: always None
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return None
        return _tidy(float(raw))

    if not isinstance(raw, str):
        return None

    s = _normalize_spaces(raw).strip()
    if not s:
        return None

    match = _LEADING_NUMBER.match(s)
    if not match:
        return None

    try:
        num = float(match.group(0))
    except ValueError:
        return None

    if not math.isfinite(num):
        return None
    return _tidy(num)


def to_number(raw: Any) -> Number:
    """Coerce any value to a number; anything not numeric becomes 0."""
    num = parse_number(raw)
    return 0 if num is None else num


def percentage(numerator: Any, denominator: Any, places: int = 2) -> str:
    """
    Format numerator/denominator as a percentage string.

    Returns "N/A" when the denominator is zero or either operand is not
    numeric, so an undefined ratio never reads as "0%".
    """
    num = parse_number(numerator)
    den = parse_number(denominator)
    if num is None or den is None or den == 0:
        return NOT_AVAILABLE

    value = round(num / den * 100, places)
    return f"{value:.{places}f}%"


def ratio(
    numerator: Any,
    denominator: Any,
    unit: str,
    places: int = 4,
    scale: float = 1.0,
) -> str:
    """
    Fixed-precision intensity ratio with a plain-text unit suffix.

    "N/A" when the numerator is absent or the denominator is not positive.
    """
    num = parse_number(numerator)
    den = parse_number(denominator)
    if num is None or den is None or den <= 0:
        return NOT_AVAILABLE

    value = num / den * scale
    return f"{value:.{places}f} {unit}"


def yoy_change(current: Any, previous: Any) -> str:
    """
    Year-over-year change between two totals.

    Rules:
      - previous 0 and current > 0  -> "New"
      - previous 0 otherwise        -> "N/A"
      - else signed change with two decimals and "%"
    """
    cur = to_number(current)
    prev = to_number(previous)
    if prev == 0:
        return "New" if cur > 0 else NOT_AVAILABLE

    change = (cur - prev) / prev * 100
    return f"{change:.2f}%"
