"""Generate fixed-width plain-text expense reports with ASCII bar charts."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from backend.repositories.expenses_repository import ExpenseRepository
from backend.reporting.formatting import format_amount, format_date, format_month, separator, text_bar
from backend.services.summarizer import Summarizer, recent_entries
from shared.models import Expense


logger = logging.getLogger(__name__)

REPORT_TITLE = "BUDGETBUDDY EXPENSE REPORT"
BANNER_WIDTH = 37
BANNER_TITLE_INDENT = 7
RULE_WIDTH = 60
BAR_MAX_LENGTH = 30


def _header() -> str:
    banner = separator(BANNER_WIDTH, "=")
    title_line = (" " * BANNER_TITLE_INDENT + REPORT_TITLE).ljust(BANNER_WIDTH)
    return f"{banner}\n{title_line}\n{banner}\n\n"


def _monthly_summary(summarizer: Summarizer) -> str:
    lines = ["MONTHLY SUMMARY", separator(RULE_WIDTH)]
    for month, amount in summarizer.monthly_totals().items():
        lines.append(f"{format_month(month):<10} : {format_amount(amount):>12}")
    return "\n".join(lines) + "\n\n"


def _category_breakdown(summarizer: Summarizer) -> str:
    lines = ["CATEGORY BREAKDOWN (All Time)", separator(RULE_WIDTH)]
    category_totals = summarizer.category_totals()
    max_amount = max(category_totals.values(), default=None)
    for category, amount in category_totals.items():
        bar = text_bar(amount, max_amount, BAR_MAX_LENGTH)
        lines.append(f"{category:<15} {format_amount(amount):>12}  {bar}")
    return "\n".join(lines) + "\n\n"


def _grand_total(summarizer: Summarizer) -> str:
    rule = separator(RULE_WIDTH)
    return f"{rule}\nGRAND TOTAL: {format_amount(summarizer.grand_total())}\n{rule}\n"


def _recent_entries(expenses: Sequence[Expense]) -> str:
    lines = ["", "RECENT ENTRIES (Last 10)", separator(RULE_WIDTH)]
    for expense in recent_entries(expenses):
        lines.append(
            f"{format_date(expense.date)}  {expense.category:<12} "
            f"{format_amount(expense.amount):>10}  {expense.notes}"
        )
    return "\n".join(lines) + "\n"


def _sections(expenses: Sequence[Expense]) -> Iterator[str]:
    summarizer = Summarizer(expenses)
    yield _header()
    yield _monthly_summary(summarizer)
    yield _category_breakdown(summarizer)
    yield _grand_total(summarizer)
    yield _recent_entries(expenses)


def render_text_report(expenses: Sequence[Expense]) -> str:
    return "".join(_sections(expenses))


def write_text_report(file_path: str | Path, repository: ExpenseRepository) -> None:
    """Write the plain-text report for every stored expense to ``file_path``."""

    expenses = repository.find_all()
    with open(file_path, "w", encoding="utf-8") as handle:
        for section in _sections(expenses):
            handle.write(section)

    logger.info("text_report_written path=%s expenses=%s", file_path, len(expenses))
    print(f"Text report written to: {file_path}")
