"""Composition root for backend services."""

from __future__ import annotations

import logging

from backend.repositories.expenses_repository import (
    CsvExpenseRepository,
    ExpenseRepository,
    InMemoryExpenseRepository,
)
from shared import config


logger = logging.getLogger(__name__)


def build_expense_repository() -> ExpenseRepository:
    """Build the expense repository adapter selected by configuration.

    A configured CSV path wins; otherwise an empty in-memory store is used.
    """

    csv_path = config.expenses_csv_path()
    if csv_path:
        logger.info("expense_repository_selected kind=csv path=%s", csv_path)
        return CsvExpenseRepository(csv_path)

    logger.info("expense_repository_selected kind=in_memory")
    return InMemoryExpenseRepository()
