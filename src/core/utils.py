"""Shared utility functions for Caravan Weigh."""

import math
from datetime import date

Number = int | float


def parse_number(text: str | None) -> Number:
    """Leniently coerce form input to a non-negative number.

    Blank, unparsable, non-finite and negative input all become ``0``.
    Integral values are returned as ``int`` so they render without ``.0``.
    """
    if text is None:
        return 0
    cleaned = str(text).strip()
    if not cleaned or "_" in cleaned:
        return 0
    try:
        value = float(cleaned)
    except ValueError:
        return 0
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value) if value.is_integer() else value


def net_weight(gross: Number, tare: Number) -> Number:
    """Return gross minus tare, floored at zero."""
    difference = gross - tare
    return difference if difference > 0 else 0


def format_plain(value: Number) -> str:
    """Render a number in plain decimal form (``42000``, ``12.5``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_grouped(value: Number) -> str:
    """Render a number with thousands separators for table display."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def today_iso() -> str:
    """Return today's local date as ``YYYY-MM-DD``."""
    return date.today().isoformat()
