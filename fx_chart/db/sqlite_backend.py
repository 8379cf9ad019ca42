"""SQLite provider backend."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from fx_chart.db import default_sqlite_path
from fx_chart.db.sql_backend import SQLBackend


def read_only_sqlite_url(db_path: str | Path) -> str:
    """Return a SQLAlchemy URL opening ``db_path`` in SQLite read-only URI mode."""

    resolved = Path(db_path).expanduser().resolve()
    return f"sqlite:///file:{quote(resolved.as_posix(), safe='/:')}?mode=ro&uri=true"


class SQLiteBackend(SQLBackend):
    """Backend strategy reading the provider's SQLite database file."""

    def __init__(self, db_path: str | Path | None = None) -> None:
        self.db_path = Path(db_path) if db_path is not None else default_sqlite_path()
        super().__init__(
            read_only_sqlite_url(self.db_path),
            engine_options={"connect_args": {"check_same_thread": False}},
        )


__all__ = ["SQLiteBackend", "read_only_sqlite_url"]
