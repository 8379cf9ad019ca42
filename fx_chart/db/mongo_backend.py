"""MongoDB provider backend."""

from __future__ import annotations

from typing import Any

from fx_chart.db import AMOUNT_FIELD, DATE_FIELD, NAME_FIELD, PROVIDER_TABLE
from fx_chart.db.base_backend import ProviderBackend
from fx_chart.errors import ProviderError
from fx_chart.models import CurrencyName, DateKey, RateObservation
from fx_chart.utils.logger import get_logger

try:  # pragma: no cover - optional dependency
    from pymongo import ASCENDING, MongoClient
    from pymongo.collection import Collection
    from pymongo.errors import PyMongoError
except ModuleNotFoundError:  # pragma: no cover - handled dynamically
    ASCENDING = 1
    MongoClient = None  # type: ignore[assignment]
    Collection = None  # type: ignore[assignment]
    PyMongoError = Exception  # type: ignore[assignment]

LOGGER = get_logger(__name__)


class MongoBackend(ProviderBackend):
    """Backend strategy reading exchange rates from a MongoDB collection."""

    def __init__(self, url: str, *, database: str | None = None) -> None:
        if MongoClient is None:  # pragma: no cover - defensive
            raise ModuleNotFoundError("pymongo is required for MongoDB backends")
        self.url = url
        self._client = MongoClient(url)
        try:
            db = self._client.get_default_database() if database is None else self._client[database]
        except PyMongoError as exc:
            raise ValueError("MongoDB connection URI must include a database name") from exc
        if db is None:
            raise ValueError("MongoDB connection URI must include a database name")
        self._collection: Collection = db[PROVIDER_TABLE]

    def ping(self) -> None:
        try:
            self._client.admin.command("ping")
        except PyMongoError as exc:
            raise ProviderError(f"Provider is unreachable: {exc}") from exc

    def fetch_currency_names(self) -> list[CurrencyName]:
        try:
            docs = self._collection.find({}, {NAME_FIELD: 1, "_id": 0}).sort(NAME_FIELD, ASCENDING)
            return [doc[NAME_FIELD] for doc in docs if NAME_FIELD in doc]
        except PyMongoError as exc:
            raise ProviderError(f"Failed to list currencies: {exc}") from exc

    def fetch_observations(
        self,
        currency: CurrencyName,
        start_date: DateKey,
        end_date: DateKey,
    ) -> list[RateObservation]:
        query: dict[str, Any] = {
            NAME_FIELD: currency,
            DATE_FIELD: {"$gte": start_date, "$lte": end_date},
        }
        LOGGER.debug("Querying %s collection with %s", PROVIDER_TABLE, query)
        try:
            docs = list(
                self._collection.find(query, {DATE_FIELD: 1, AMOUNT_FIELD: 1, "_id": 0}).sort(
                    DATE_FIELD, ASCENDING
                )
            )
        except PyMongoError as exc:
            raise ProviderError(f"Failed to query observations for {currency}: {exc}") from exc
        return [RateObservation.from_row(doc) for doc in docs]

    def close(self) -> None:  # pragma: no cover - trivial cleanup
        self._client.close()


__all__ = ["MongoBackend"]
