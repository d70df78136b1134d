"""
Currency helpers shared by every view of a quote.

All display rounding goes through round_cents() so the customer view, the
admin view and the printed summary show identical figures.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, ROUND_HALF_UP

_CENT = Decimal("0.01")


def round_cents(amount: float) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    if amount is None or not math.isfinite(amount):
        return Decimal("0.00")
    # str() gives the shortest repr, so 2.675 rounds to 2.68 as displayed
    return Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """Format as US dollars, e.g. ``$1,234.50`` or ``-$5.00``."""
    rounded = round_cents(amount)
    if rounded == 0:
        return "$0.00"
    if rounded < 0:
        return f"-${-rounded:,.2f}"
    return f"${rounded:,.2f}"


def parse_currency_string(value: str) -> float:
    """
    Parse user-typed money like ``"$25,000"`` or ``"25000.5"``.

    Everything except digits and dots is dropped; when more than one dot is
    left, the first one is kept as the decimal point. Unparsable input → 0.
    """
    cleaned = re.sub(r"[^0-9.]", "", str(value or ""))
    if not cleaned:
        return 0.0

    parts = cleaned.split(".")
    if len(parts) > 2:
        cleaned = f"{parts[0]}.{''.join(parts[1:])}"

    try:
        number = float(cleaned)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0
