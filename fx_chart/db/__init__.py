"""Provider access helpers and the shape of the provider's exchange-rate table."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = [
    "AMOUNT_FIELD",
    "DATE_FIELD",
    "DEFAULT_SQLITE_DB_NAME",
    "NAME_FIELD",
    "PROVIDER_TABLE",
    "default_sqlite_path",
]

PROVIDER_TABLE: Final[str] = "exchangerate"
NAME_FIELD: Final[str] = "name"
DATE_FIELD: Final[str] = "date"
AMOUNT_FIELD: Final[str] = "amount"

DEFAULT_SQLITE_DB_NAME: Final[str] = "exchangerate.db"


def default_sqlite_path() -> Path:
    """Return the absolute path of the provider database in the working directory."""

    return (Path.cwd() / DEFAULT_SQLITE_DB_NAME).resolve()
