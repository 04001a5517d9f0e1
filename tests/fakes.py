"""Deterministic expense fixtures for reporting tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from shared.models import Expense


SAMPLE_EXPENSES = [
    Expense(date=date(2024, 1, 5), category="Food", amount=Decimal("20.00"), notes="lunch"),
    Expense(date=date(2024, 1, 20), category="Food", amount=Decimal("30.00"), notes="dinner"),
    Expense(date=date(2024, 2, 1), category="Transport", amount=Decimal("15.00"), notes="bus"),
]


def make_expenses(count: int) -> list[Expense]:
    """Return ``count`` expenses whose notes record their storage position."""

    return [
        Expense(
            date=date(2024, 3, 1 + index % 28),
            category="Misc",
            amount=Decimal(index + 1),
            notes=f"entry-{index}",
        )
        for index in range(count)
    ]
