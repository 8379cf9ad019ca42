"""SQL provider backend tests against a temporary SQLite provider."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError

from fx_chart.db.sql_backend import SQLBackend
from fx_chart.db.sqlite_backend import SQLiteBackend, read_only_sqlite_url
from fx_chart.errors import MalformedRowError, ProviderError
from fx_chart.models import RateObservation


def test_sqlite_backend_lists_names_sorted_with_duplicates(provider_db) -> None:
    backend = SQLiteBackend(provider_db())

    assert backend.fetch_currency_names() == ["EUR", "USD", "USD"]

    backend.close()


def test_sqlite_backend_filters_by_currency_and_inclusive_range(provider_db) -> None:
    db_path = provider_db(
        [
            ("USD", "2024-01-03", 1.03),
            ("USD", "2024-01-01", 1.00),
            ("USD", "2024-01-04", 1.04),
            ("USD", "2023-12-31", 0.99),
            ("EUR", "2024-01-02", 0.91),
        ]
    )
    backend = SQLiteBackend(db_path)

    rows = backend.fetch_observations("USD", "2024-01-01", "2024-01-03")

    assert rows == [
        RateObservation(date="2024-01-01", rate=1.00),
        RateObservation(date="2024-01-03", rate=1.03),
    ]
    assert backend.fetch_observations("GBP", "2024-01-01", "2024-01-31") == []

    backend.close()


def test_sqlite_backend_opens_provider_read_only(provider_db) -> None:
    backend = SQLiteBackend(provider_db())

    with pytest.raises(OperationalError):
        with backend._get_engine().begin() as connection:
            connection.execute(
                text("INSERT INTO exchangerate(name, date, amount) VALUES('GBP', '2024-01-01', 1.2)")
            )
    assert "GBP" not in backend.fetch_currency_names()

    backend.close()


def test_sqlite_backend_missing_file_raises_provider_error(tmp_path: Path) -> None:
    backend = SQLiteBackend(tmp_path / "missing.db")

    with pytest.raises(ProviderError):
        backend.fetch_currency_names()
    with pytest.raises(ProviderError):
        backend.ping()
    assert not (tmp_path / "missing.db").exists()


def test_sqlite_backend_missing_table_raises_provider_error(tmp_path: Path) -> None:
    db_path = tmp_path / "empty.db"
    engine = create_engine(f"sqlite:///{db_path}", future=True)
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE other (id INTEGER)"))
    engine.dispose()

    backend = SQLiteBackend(db_path)
    with pytest.raises(ProviderError):
        backend.fetch_observations("USD", "2024-01-01", "2024-01-31")
    backend.close()


def test_sqlite_backend_malformed_rows_raise(provider_db) -> None:
    backend = SQLiteBackend(provider_db([("USD", "2024-01-01", "not-a-number")]))

    with pytest.raises(MalformedRowError):
        backend.fetch_observations("USD", "2024-01-01", "2024-01-31")

    backend.close()


def test_sql_backend_accepts_any_sqlalchemy_url(provider_db) -> None:
    backend = SQLBackend(f"sqlite:///{provider_db()}")

    backend.ping()
    assert backend.fetch_observations("EUR", "2024-01-01", "2024-01-01") == [
        RateObservation(date="2024-01-01", rate=0.90)
    ]

    backend.close()


def test_sql_backend_reads_typed_provider_columns(tmp_path: Path) -> None:
    db_path = tmp_path / "typed.db"
    engine = create_engine(f"sqlite:///{db_path}", future=True)
    with engine.begin() as connection:
        connection.execute(text("CREATE TABLE exchangerate (name TEXT, date DATE, amount NUMERIC)"))
        connection.execute(
            text("INSERT INTO exchangerate VALUES(:name, :date, :amount)"),
            {"name": "USD", "date": "2024-05-01", "amount": 17.25},
        )
    engine.dispose()

    backend = SQLBackend(f"sqlite:///{db_path}")
    assert backend.fetch_observations("USD", "2024-05-01", "2024-05-01") == [
        RateObservation(date="2024-05-01", rate=17.25)
    ]
    backend.close()


def test_read_only_sqlite_url_uses_uri_mode(tmp_path: Path) -> None:
    url = read_only_sqlite_url(tmp_path / "fx.db")

    assert url.startswith("sqlite:///file:/")
    assert url.endswith("fx.db?mode=ro&uri=true")
