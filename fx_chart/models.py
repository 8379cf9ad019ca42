"""Data models shared by the gateway, orchestrator, renderer and session."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Tuple, cast

from fx_chart.errors import MalformedRowError
from fx_chart.utils.date_keys import is_date_key

CurrencyName = str
DateKey = str


@dataclass(frozen=True, slots=True)
class RateObservation:
    """One historical exchange-rate sample for the selected currency."""

    date: DateKey
    rate: float

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RateObservation":
        """Decode a provider row carrying ``date`` and ``amount`` fields."""

        try:
            raw_date = row["date"]
            raw_amount = row["amount"]
        except KeyError as exc:
            raise MalformedRowError(f"Provider row is missing field {exc.args[0]!r}") from exc
        date_key = _normalise_date_key(raw_date)
        if isinstance(raw_amount, bool):
            raise MalformedRowError(f"Invalid amount {raw_amount!r} for {date_key}")
        try:
            rate = float(raw_amount)
        except (TypeError, ValueError) as exc:
            raise MalformedRowError(f"Invalid amount {raw_amount!r} for {date_key}") from exc
        if not math.isfinite(rate):
            raise MalformedRowError(f"Non-finite amount {raw_amount!r} for {date_key}")
        return cls(date=date_key, rate=rate)


ExchangeSeries = Tuple[RateObservation, ...]


@dataclass(slots=True)
class Selection:
    """The user's in-progress choice of currency and date range."""

    currency: CurrencyName | None = None
    start_date: DateKey | None = None
    end_date: DateKey | None = None

    @property
    def is_complete(self) -> bool:
        """Return True when every field is present and non-empty."""

        return bool(self.currency) and bool(self.start_date) and bool(self.end_date)

    def snapshot(self) -> "Selection":
        """Return an independent copy for in-flight loads."""

        return replace(self)


class LoadStatus(str, Enum):
    """Outcome of a retrieval attempt."""

    OK = "ok"
    INCOMPLETE_SELECTION = "incomplete_selection"
    PROVIDER_FAILED = "provider_failed"
    SUPERSEDED = "superseded"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Either an ordered series or a diagnostic explaining why it is empty."""

    series: ExchangeSeries = field(default_factory=tuple)
    status: LoadStatus = LoadStatus.OK
    diagnostic: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK

    @property
    def is_empty(self) -> bool:
        return not self.series

    @classmethod
    def success(cls, series: ExchangeSeries) -> "LoadResult":
        return cls(series=tuple(series))

    @classmethod
    def incomplete(cls, selection: Selection) -> "LoadResult":
        missing = [
            name
            for name, value in (
                ("currency", selection.currency),
                ("start_date", selection.start_date),
                ("end_date", selection.end_date),
            )
            if not value
        ]
        return cls(
            status=LoadStatus.INCOMPLETE_SELECTION,
            diagnostic=f"Selection is missing: {', '.join(missing)}",
        )

    @classmethod
    def failure(cls, diagnostic: str) -> "LoadResult":
        return cls(status=LoadStatus.PROVIDER_FAILED, diagnostic=diagnostic)

    @classmethod
    def superseded(cls) -> "LoadResult":
        return cls(status=LoadStatus.SUPERSEDED, diagnostic="A newer load replaced this one")


def _normalise_date_key(value: object) -> DateKey:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not is_date_key(value):
        raise MalformedRowError(f"Invalid date value {value!r}; expected YYYY-MM-DD")
    return cast(str, value)


__all__ = [
    "CurrencyName",
    "DateKey",
    "ExchangeSeries",
    "LoadResult",
    "LoadStatus",
    "RateObservation",
    "Selection",
]
