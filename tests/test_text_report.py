"""Tests for the fixed-width plain-text report."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from backend.reporting.text_report import render_text_report, write_text_report
from backend.repositories.expenses_repository import InMemoryExpenseRepository
from shared.models import Expense
from tests.fakes import SAMPLE_EXPENSES, make_expenses


def _section(lines: list[str], heading: str) -> list[str]:
    """Return the lines following ``heading`` and its rule, up to the next blank line."""

    start = lines.index(heading) + 2
    end = lines.index("", start) if "" in lines[start:] else len(lines)
    return lines[start:end]


def test_banner_frames_title_like_the_original_layout() -> None:
    lines = render_text_report([]).splitlines()

    assert lines[0] == "=" * 37
    assert lines[2] == "=" * 37
    assert lines[1] == "       BUDGETBUDDY EXPENSE REPORT    "
    assert lines[3] == ""


def test_sample_report_sections() -> None:
    lines = render_text_report(SAMPLE_EXPENSES).splitlines()

    assert lines[lines.index("MONTHLY SUMMARY") + 1] == "-" * 60
    assert _section(lines, "MONTHLY SUMMARY") == [
        "2024-01    :        50.00",
        "2024-02    :        15.00",
    ]
    assert _section(lines, "CATEGORY BREAKDOWN (All Time)") == [
        "Food                   50.00  " + "#" * 30,
        "Transport              15.00  " + "#" * 9,
    ]
    assert _section(lines, "RECENT ENTRIES (Last 10)") == [
        "2024-02-01  Transport         15.00  bus",
        "2024-01-20  Food              30.00  dinner",
        "2024-01-05  Food              20.00  lunch",
    ]


def test_grand_total_is_framed_by_rules() -> None:
    lines = render_text_report(SAMPLE_EXPENSES).splitlines()
    index = lines.index("GRAND TOTAL: 65.00")

    assert lines[index - 1] == "-" * 60
    assert lines[index + 1] == "-" * 60


def test_section_order_is_fixed() -> None:
    text = render_text_report(SAMPLE_EXPENSES)

    positions = [
        text.index("BUDGETBUDDY EXPENSE REPORT"),
        text.index("MONTHLY SUMMARY"),
        text.index("CATEGORY BREAKDOWN (All Time)"),
        text.index("GRAND TOTAL:"),
        text.index("RECENT ENTRIES (Last 10)"),
    ]
    assert positions == sorted(positions)


def test_empty_report_renders_all_headings_without_rows() -> None:
    lines = render_text_report([]).splitlines()

    assert _section(lines, "MONTHLY SUMMARY") == []
    assert _section(lines, "CATEGORY BREAKDOWN (All Time)") == []
    assert "GRAND TOTAL: 0.00" in lines
    assert _section(lines, "RECENT ENTRIES (Last 10)") == []


def test_recent_entries_lists_last_ten_stored() -> None:
    lines = render_text_report(make_expenses(12)).splitlines()

    rows = _section(lines, "RECENT ENTRIES (Last 10)")
    assert len(rows) == 10
    assert rows[0].endswith("entry-11")
    assert rows[-1].endswith("entry-2")


def test_write_text_report_writes_file_and_prints_notice(tmp_path, capsys) -> None:
    output = tmp_path / "report.txt"
    output.write_text("stale contents", encoding="utf-8")

    write_text_report(output, InMemoryExpenseRepository(SAMPLE_EXPENSES))

    assert output.read_text(encoding="utf-8") == render_text_report(SAMPLE_EXPENSES)
    assert capsys.readouterr().out == f"Text report written to: {output}\n"


def test_write_text_report_propagates_io_errors(tmp_path) -> None:
    output = tmp_path / "missing-dir" / "report.txt"

    with pytest.raises(OSError):
        write_text_report(output, InMemoryExpenseRepository(SAMPLE_EXPENSES))

    assert not output.exists()


def test_large_amounts_render_in_full() -> None:
    expenses = [Expense(date=date(2024, 7, 1), category="Estate", amount=Decimal("1E+27"), notes="castle")]
    big = "1" + "0" * 27 + ".00"

    lines = render_text_report(expenses).splitlines()

    assert _section(lines, "MONTHLY SUMMARY") == [f"2024-07    : {big:>12}"]
    assert _section(lines, "CATEGORY BREAKDOWN (All Time)") == [f"Estate          {big}  " + "#" * 30]
    assert f"GRAND TOTAL: {big}" in lines
