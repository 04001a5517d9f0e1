"""Generate styled HTML expense reports."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from decimal import Decimal
from html import escape
from pathlib import Path

from backend.repositories.expenses_repository import ExpenseRepository
from backend.reporting.formatting import bar_length, format_amount, format_date, format_month
from backend.services.summarizer import Summarizer, recent_entries
from shared.models import Expense


logger = logging.getLogger(__name__)

REPORT_TITLE = "BudgetBuddy Expense Report"
BAR_MAX_WIDTH_PX = 200

_STYLESHEET = (
    "body { font-family: Arial, sans-serif; margin: 20px; }\n"
    "h1 { color: #333; }\n"
    "table { border-collapse: collapse; width: 100%; margin-bottom: 20px; }\n"
    "th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }\n"
    "th { background-color: #4CAF50; color: white; }\n"
    ".bar { background-color: #4CAF50; height: 20px; display: inline-block; }\n"
    ".total { font-weight: bold; font-size: 1.2em; color: #4CAF50; }\n"
)


def _row(*cells: str, header: bool = False) -> str:
    tag = "th" if header else "td"
    return "<tr>" + "".join(f"<{tag}>{cell}</{tag}>" for cell in cells) + "</tr>\n"


def _bar_html(value: Decimal, max_value: Decimal | None) -> str:
    width = bar_length(value, max_value, BAR_MAX_WIDTH_PX)
    return f'<div class="bar" style="width: {width}px;"></div>'


def _header() -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        f"<title>{REPORT_TITLE}</title>\n"
        "<style>\n"
        f"{_STYLESHEET}"
        "</style>\n"
        "</head>\n<body>\n"
        f"<h1>{REPORT_TITLE}</h1>\n"
    )


def _monthly_summary(summarizer: Summarizer) -> str:
    lines = ["<h2>Monthly Summary</h2>\n", "<table>\n", _row("Month", "Total Amount", header=True)]
    for month, amount in summarizer.monthly_totals().items():
        lines.append(_row(format_month(month), format_amount(amount)))
    lines.append("</table>\n")
    return "".join(lines)


def _category_breakdown(summarizer: Summarizer) -> str:
    lines = [
        "<h2>Category Breakdown (All Time)</h2>\n",
        "<table>\n",
        _row("Category", "Total Amount", "Visual", header=True),
    ]
    category_totals = summarizer.category_totals()
    max_amount = max(category_totals.values(), default=None)
    for category, amount in category_totals.items():
        lines.append(_row(escape(category), format_amount(amount), _bar_html(amount, max_amount)))
    lines.append("</table>\n")
    return "".join(lines)


def _grand_total(summarizer: Summarizer) -> str:
    return f'<p class="total">Grand Total: {format_amount(summarizer.grand_total())}</p>\n'


def _recent_entries(expenses: Sequence[Expense]) -> str:
    lines = [
        "<h2>Recent Entries (Last 10)</h2>\n",
        "<table>\n",
        _row("Date", "Category", "Amount", "Notes", header=True),
    ]
    for expense in recent_entries(expenses):
        lines.append(
            _row(
                format_date(expense.date),
                escape(expense.category),
                format_amount(expense.amount),
                escape(expense.notes),
            )
        )
    lines.append("</table>\n")
    return "".join(lines)


def _footer() -> str:
    return "</body>\n</html>\n"


def _sections(expenses: Sequence[Expense]) -> Iterator[str]:
    summarizer = Summarizer(expenses)
    yield _header()
    yield _monthly_summary(summarizer)
    yield _category_breakdown(summarizer)
    yield _grand_total(summarizer)
    yield _recent_entries(expenses)
    yield _footer()


def render_html_report(expenses: Sequence[Expense]) -> str:
    """Render the full HTML report document for ``expenses``."""

    return "".join(_sections(expenses))


def write_html_report(file_path: str | Path, repository: ExpenseRepository) -> None:
    """Write the HTML report for every stored expense to ``file_path``.

    The file is overwritten. ``OSError`` raised while opening or writing
    propagates to the caller and any partial file is left in place.
    """

    expenses = repository.find_all()
    with open(file_path, "w", encoding="utf-8") as handle:
        for section in _sections(expenses):
            handle.write(section)

    logger.info("html_report_written path=%s expenses=%s", file_path, len(expenses))
    print(f"HTML report written to: {file_path}")
