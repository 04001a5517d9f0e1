"""FastAPI entrypoint serving expense reports over HTTP."""

from __future__ import annotations

import logging
import time
from functools import lru_cache

from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from backend.factory import build_expense_repository
from backend.reporting import render_html_report, render_text_report
from backend.repositories.expenses_repository import ExpenseDataError, ExpenseRepository


logger = logging.getLogger(__name__)

app = FastAPI(title="BudgetBuddy Reports API")


@lru_cache(maxsize=1)
def get_expense_repository() -> ExpenseRepository:
    return build_expense_repository()


@app.middleware("http")
async def time_report_requests(request: Request, call_next):
    """Log each request with its status code and duration."""

    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "report_request method=%s path=%s status_code=%s duration_ms=%.1f",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


@app.exception_handler(ExpenseDataError)
async def handle_expense_data_error(request: Request, exc: ExpenseDataError) -> JSONResponse:
    """Report unreadable stored expenses as 422 with the parser message."""

    logger.warning("expenses_load_failed path=%s error=%s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "report_request_failed path=%s exception_type=%s",
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health")
def health() -> dict[str, str]:
    """Healthcheck endpoint."""

    return {"status": "ok"}


@app.get("/reports/expenses.html", response_class=HTMLResponse)
def get_expenses_report_html() -> HTMLResponse:
    expenses = get_expense_repository().find_all()
    logger.info("expenses_report_rendered format=html expenses=%s", len(expenses))
    return HTMLResponse(content=render_html_report(expenses))


@app.get("/reports/expenses.txt", response_class=PlainTextResponse)
def get_expenses_report_text() -> PlainTextResponse:
    expenses = get_expense_repository().find_all()
    logger.info("expenses_report_rendered format=text expenses=%s", len(expenses))
    return PlainTextResponse(content=render_text_report(expenses))
