"""PostgreSQL provider backend."""

from __future__ import annotations

from fx_chart.db.sql_backend import SQLBackend


class PostgresBackend(SQLBackend):
    """Concrete SQL backend for PostgreSQL providers."""

    pass


__all__ = ["PostgresBackend"]
