"""Shared utility functions — income sanitisation, INR formatting."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from app.config import settings

# First number in free text, once thousands separators are gone
_NUMBER = re.compile(r"[-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?")


# ── Income sanitisation ───────────────────────────────────────────────────

def sanitize_income(raw: Union[str, float, int, None]) -> float:
    """Coerce free-text or numeric input into a non-negative income.

    Thousands separators are dropped and the first number in the text is
    taken, so prefixes such as ``₹``, ``Rs.`` or ``INR`` are ignored.
    Empty, unparsable, non-finite or negative values become ``0.0``;
    no error is raised.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _NUMBER.search(str(raw).replace(",", ""))
        if match is None:
            return 0.0
        value = float(match.group())

    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


# ── Financial helpers ─────────────────────────────────────────────────────

def _group_indian(digits: str) -> str:
    """Insert separators the Indian way: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_inr(amount: float) -> str:
    """Format *amount* as whole rupees with lakh/crore grouping.

    >>> format_inr(1450000)
    '₹14,50,000'
    """
    whole = int(Decimal(str(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{settings.CURRENCY_SYMBOL}{_group_indian(str(whole))}"


def format_rate_percent(rate: float) -> str:
    """Render a fractional rate as a percentage string (``0.05`` → ``"5%"``)."""
    return f"{rate * 100:g}%"


def slab_range_label(lower: float, upper: float) -> str:
    """Label for the bracket ``[lower, upper)``; an infinite top bound is ``∞``."""
    upper_label = settings.INFINITY_SYMBOL if math.isinf(upper) else format_inr(upper)
    return f"{format_inr(lower)} - {upper_label}"
