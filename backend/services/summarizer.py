"""Aggregate expenses into monthly, categorical and grand totals."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from shared.models import Expense, MonthKey

RECENT_ENTRIES_LIMIT = 10


class Summarizer:
    """Grouping and summation passes over one expense list.

    Mappings keep first-seen order: the first month (or category) met while
    scanning the input front to back is the first key returned.
    """

    def __init__(self, expenses: Sequence[Expense]) -> None:
        self._expenses = list(expenses)

    def monthly_totals(self) -> dict[MonthKey, Decimal]:
        """Return totals per calendar month, in first-seen month order."""

        totals: dict[MonthKey, Decimal] = {}
        for expense in self._expenses:
            month = expense.month
            totals[month] = totals.get(month, Decimal("0")) + expense.amount
        return totals

    def category_totals(self, month: MonthKey | None = None) -> dict[str, Decimal]:
        """Return totals per category, optionally restricted to one month."""

        totals: dict[str, Decimal] = {}
        for expense in self._expenses:
            if month is not None and expense.month != month:
                continue
            totals[expense.category] = totals.get(expense.category, Decimal("0")) + expense.amount
        return totals

    def grand_total(self) -> Decimal:
        """Return the sum of every expense amount, zero for no expenses."""

        return sum((expense.amount for expense in self._expenses), Decimal("0"))


def recent_entries(expenses: Sequence[Expense], limit: int = RECENT_ENTRIES_LIMIT) -> list[Expense]:
    """Return the last ``limit`` stored expenses, most recently stored first.

    Selection follows storage order, not expense dates.
    """

    if limit <= 0:
        return []
    return list(reversed(list(expenses)[-limit:]))
