"""Reporting utilities for expense documents."""

from backend.reporting.html_report import render_html_report, write_html_report
from backend.reporting.text_report import render_text_report, write_text_report

__all__ = ["render_html_report", "render_text_report", "write_html_report", "write_text_report"]
