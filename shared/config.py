"""Environment-driven settings for the report service."""

from __future__ import annotations

import os

from dotenv import load_dotenv


_DOTENV_ENVS = {"dev", "local"}


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def app_env() -> str:
    """Return the current application environment, ``dev`` when unset."""
    return (get_env("APP_ENV", "dev") or "dev").strip().lower() or "dev"


if app_env() in _DOTENV_ENVS:
    load_dotenv()


def expenses_csv_path() -> str | None:
    """Return the expenses CSV file backing the repository, if one is configured.

    Reads ``BUDGETBUDDY_EXPENSES_CSV``; blank values count as unset.
    """
    return (get_env("BUDGETBUDDY_EXPENSES_CSV", "") or "").strip() or None
