"""Stateless formatting helpers shared by the report renderers."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from shared.models import MonthKey

_CENTS = Decimal("0.01")


def format_amount(value: Decimal) -> str:
    """Return ``value`` with exactly two decimals, rounded half-up, no symbol."""

    amount = Decimal(value)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents digits
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"


def format_date(value: date) -> str:
    """Return ``value`` as ``YYYY-MM-DD``."""
    return value.strftime("%Y-%m-%d")


def format_month(value: MonthKey) -> str:
    """Return ``value`` as ``YYYY-MM``."""
    return f"{value.year:04d}-{value.month:02d}"


def separator(width: int, char: str = "-") -> str:
    """Return a horizontal rule of ``width`` copies of ``char``."""
    return char * width


def bar_length(value: Decimal, max_value: Decimal | None, width: int) -> int:
    """Return the size of a bar scaled so that ``max_value`` fills ``width``.

    A missing or zero maximum is replaced by 1 so empty and all-zero groups
    never divide by zero. The result always lies in ``0..width``: zero and
    negative values give an empty bar.
    """

    value = Decimal(value)
    if value <= 0:
        return 0
    divisor = Decimal(max_value) if max_value else Decimal("1")
    scaled = value * width / divisor
    if scaled <= 0:
        return 0
    if scaled >= width:
        return width
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def text_bar(value: Decimal, max_value: Decimal | None, width: int = 30, fill: str = "#") -> str:
    return fill * bar_length(value, max_value, width)
