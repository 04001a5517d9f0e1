"""Pydantic models shared across backend layers."""

from .expenses import Expense, MonthKey

__all__ = [
    "Expense",
    "MonthKey",
]
