from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Iterable

import pytest
from sqlalchemy import create_engine, text

from fx_chart.db.base_backend import ProviderBackend
from fx_chart.errors import ProviderError
from fx_chart.models import RateObservation

PROVIDER_SCHEMA = """
CREATE TABLE IF NOT EXISTS exchangerate (
    name TEXT NOT NULL,
    date TEXT NOT NULL,
    amount REAL NOT NULL
);
"""

SCENARIO_ROWS = [
    ("USD", "2024-01-01", 1.00),
    ("USD", "2024-01-02", 1.02),
    ("EUR", "2024-01-01", 0.90),
]


def write_provider_rows(db_path: Path, rows: Iterable[tuple[str, str, object]]) -> None:
    """Stand in for the external provider by writing its table directly."""

    engine = create_engine(f"sqlite:///{db_path}", future=True)
    try:
        with engine.begin() as connection:
            connection.execute(text(PROVIDER_SCHEMA))
            for name, day, amount in rows:
                connection.execute(
                    text("INSERT INTO exchangerate(name, date, amount) VALUES(:name, :date, :amount)"),
                    {"name": name, "date": day, "amount": amount},
                )
    finally:
        engine.dispose()


@pytest.fixture()
def provider_db(tmp_path: Path) -> Callable[..., Path]:
    def _build(rows: Iterable[tuple[str, str, object]] = SCENARIO_ROWS) -> Path:
        db_path = tmp_path / "exchangerate.db"
        write_provider_rows(db_path, rows)
        return db_path

    return _build


class MemoryBackend(ProviderBackend):
    """Serves ``(name, date, amount)`` rows and records every query."""

    def __init__(self, rows: Iterable[tuple[str, str, float]] = ()) -> None:
        self.rows = list(rows)
        self.calls: list[tuple[str, ...]] = []
        self.blocked: dict[str, threading.Event] = {}
        self.started: dict[str, threading.Event] = {}

    def block(self, currency: str) -> tuple[threading.Event, threading.Event]:
        """Make queries for ``currency`` wait until the returned release event is set."""

        self.started[currency] = threading.Event()
        self.blocked[currency] = threading.Event()
        return self.started[currency], self.blocked[currency]

    def fetch_currency_names(self) -> list[str]:
        self.calls.append(("names",))
        return sorted(name for name, _, _ in self.rows)

    def fetch_observations(self, currency: str, start_date: str, end_date: str) -> list[RateObservation]:
        self.calls.append(("observations", currency, start_date, end_date))
        if currency in self.blocked:
            self.started[currency].set()
            self.blocked[currency].wait(timeout=5)
        return [
            RateObservation(date=day, rate=amount)
            for name, day, amount in sorted(self.rows, key=lambda row: row[1])
            if name == currency and start_date <= day <= end_date
        ]


class BrokenBackend(ProviderBackend):
    def __init__(self, error: ProviderError | None = None) -> None:
        self.error = error or ProviderError("provider is unreachable")

    def fetch_currency_names(self) -> list[str]:
        raise self.error

    def fetch_observations(self, currency: str, start_date: str, end_date: str) -> list[RateObservation]:
        raise self.error


@pytest.fixture()
def memory_backend() -> Callable[..., MemoryBackend]:
    def _build(rows: Iterable[tuple[str, str, float]] = SCENARIO_ROWS) -> MemoryBackend:
        return MemoryBackend(rows)

    return _build


@pytest.fixture()
def broken_backend() -> Callable[..., BrokenBackend]:
    def _build(error: ProviderError | None = None) -> BrokenBackend:
        return BrokenBackend(error)

    return _build
