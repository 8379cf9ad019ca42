"""MySQL provider backend."""

from __future__ import annotations

from fx_chart.db.sql_backend import SQLBackend


class MySQLBackend(SQLBackend):
    """Concrete SQL backend for MySQL providers."""

    pass


__all__ = ["MySQLBackend"]
