"""Repository interfaces and adapters for stored expenses."""

from __future__ import annotations

import csv
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Protocol

from shared.models import Expense


logger = logging.getLogger(__name__)

CSV_FIELDNAMES = ("date", "category", "amount", "notes")


class ExpenseDataError(ValueError):
    """Raised when stored expense data cannot be parsed."""


class ExpenseRepository(Protocol):
    def find_all(self) -> list[Expense]:
        """Return every stored expense in storage order."""


class InMemoryExpenseRepository:
    """In-memory expense repository used by tests/dev."""

    def __init__(self, expenses: list[Expense] | None = None) -> None:
        self._expenses: list[Expense] = list(expenses or [])

    def add(self, expense: Expense) -> Expense:
        self._expenses.append(expense)
        return expense

    def find_all(self) -> list[Expense]:
        return list(self._expenses)


class CsvExpenseRepository:
    """CSV-file backed expense repository.

    The file is re-read on every ``find_all`` call so each report sees the
    current contents. Rows keep file order, which is also append order.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def find_all(self) -> list[Expense]:
        if not self._path.exists():
            logger.info("expenses_csv_missing path=%s", self._path)
            return []

        expenses: list[Expense] = []
        with self._path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.DictReader(handle)
            missing_columns = [name for name in CSV_FIELDNAMES[:3] if name not in (reader.fieldnames or [])]
            if missing_columns:
                raise ExpenseDataError(
                    f"{self._path}: missing required columns: {', '.join(missing_columns)}"
                )
            for row in reader:
                expenses.append(self._parse_row(row, line_number=reader.line_num))

        logger.info("expenses_csv_loaded path=%s count=%s", self._path, len(expenses))
        return expenses

    def add(self, expense: Expense) -> Expense:
        write_header = not self._path.exists() or self._path.stat().st_size == 0
        with self._path.open("a", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=CSV_FIELDNAMES)
            if write_header:
                writer.writeheader()
            writer.writerow(
                {
                    "date": expense.date.isoformat(),
                    "category": expense.category,
                    "amount": str(expense.amount),
                    "notes": expense.notes,
                }
            )
        return expense

    def _parse_row(self, row: dict[str, str | None], *, line_number: int) -> Expense:
        try:
            expense_date = date.fromisoformat((row.get("date") or "").strip())
        except ValueError as exc:
            raise ExpenseDataError(f"{self._path}:{line_number}: invalid date {row.get('date')!r}") from exc

        try:
            amount = Decimal((row.get("amount") or "").strip())
        except InvalidOperation as exc:
            raise ExpenseDataError(f"{self._path}:{line_number}: invalid amount {row.get('amount')!r}") from exc
        if not amount.is_finite():
            raise ExpenseDataError(f"{self._path}:{line_number}: invalid amount {row.get('amount')!r}")

        return Expense(
            date=expense_date,
            category=(row.get("category") or "").strip(),
            amount=amount,
            notes=row.get("notes") or "",
        )
