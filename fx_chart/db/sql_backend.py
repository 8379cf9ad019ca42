"""Shared logic for SQLAlchemy powered providers (SQLite/Postgres/MySQL)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import column, create_engine, select, table, text
from sqlalchemy.exc import SQLAlchemyError

from fx_chart.db import AMOUNT_FIELD, DATE_FIELD, NAME_FIELD, PROVIDER_TABLE
from fx_chart.db.base_backend import ProviderBackend
from fx_chart.errors import ProviderError
from fx_chart.models import CurrencyName, DateKey, RateObservation
from fx_chart.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - type checker helper
    from sqlalchemy.engine import Engine

LOGGER = get_logger(__name__)

EXCHANGE_RATES = table(
    PROVIDER_TABLE,
    column(NAME_FIELD),
    column(DATE_FIELD),
    column(AMOUNT_FIELD),
)


class SQLBackend(ProviderBackend):
    """Read-only provider backend issuing SELECTs through SQLAlchemy."""

    def __init__(self, url: str, *, engine_options: dict[str, Any] | None = None) -> None:
        self.url = url
        self._engine_options = engine_options or {}
        self._engine_instance: Engine | None = None

    def _get_engine(self) -> Engine:
        if self._engine_instance is None:
            self._engine_instance = create_engine(self.url, future=True, **self._engine_options)
        return self._engine_instance

    def ping(self) -> None:
        """Issue ``SELECT 1`` to verify connectivity."""

        try:
            with self._get_engine().connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise ProviderError(f"Provider is unreachable: {exc}") from exc

    def fetch_currency_names(self) -> list[CurrencyName]:
        stmt = select(EXCHANGE_RATES.c[NAME_FIELD]).order_by(EXCHANGE_RATES.c[NAME_FIELD])
        try:
            with self._get_engine().connect() as connection:
                return [row._mapping[NAME_FIELD] for row in connection.execute(stmt)]
        except SQLAlchemyError as exc:
            raise ProviderError(f"Failed to list currencies: {exc}") from exc

    def fetch_observations(
        self,
        currency: CurrencyName,
        start_date: DateKey,
        end_date: DateKey,
    ) -> list[RateObservation]:
        stmt = (
            select(EXCHANGE_RATES.c[DATE_FIELD], EXCHANGE_RATES.c[AMOUNT_FIELD])
            .where(EXCHANGE_RATES.c[NAME_FIELD] == currency)
            .where(EXCHANGE_RATES.c[DATE_FIELD] >= start_date)
            .where(EXCHANGE_RATES.c[DATE_FIELD] <= end_date)
            .order_by(EXCHANGE_RATES.c[DATE_FIELD])
        )
        LOGGER.debug("Querying %s for %s between %s and %s", PROVIDER_TABLE, currency, start_date, end_date)
        try:
            with self._get_engine().connect() as connection:
                rows = [dict(row._mapping) for row in connection.execute(stmt)]
        except SQLAlchemyError as exc:
            raise ProviderError(f"Failed to query observations for {currency}: {exc}") from exc
        return [RateObservation.from_row(row) for row in rows]

    def close(self) -> None:  # pragma: no cover - trivial resource cleanup
        if self._engine_instance is not None:
            self._engine_instance.dispose()
            self._engine_instance = None


__all__ = ["EXCHANGE_RATES", "SQLBackend"]
