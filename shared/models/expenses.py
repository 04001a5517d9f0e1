"""Core shared schemas for expense records and aggregation buckets."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class MonthKey(BaseModel):
    """Calendar month bucket (year + month) used to aggregate expenses."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    month: int = Field(ge=1, le=12)

    @classmethod
    def of(cls, value: date) -> MonthKey:
        """Return the month bucket containing ``value``."""
        return cls(year=value.year, month=value.month)


class Expense(BaseModel):
    """One recorded spending event."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: date
    category: str
    amount: Decimal
    notes: str = ""

    @property
    def month(self) -> MonthKey:
        return MonthKey.of(self.date)
