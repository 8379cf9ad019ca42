"""Backend strategy interface for the exchange-rate provider."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fx_chart.models import CurrencyName, DateKey, RateObservation


class ProviderBackend(ABC):
    """Read-only contract implemented by every provider backend."""

    @abstractmethod
    def fetch_currency_names(self) -> list[CurrencyName]:
        """Return the ``name`` field of every row, sorted by name."""

    @abstractmethod
    def fetch_observations(
        self,
        currency: CurrencyName,
        start_date: DateKey,
        end_date: DateKey,
    ) -> list[RateObservation]:
        """Return observations for ``currency`` within the inclusive range, by date."""

    def close(self) -> None:  # pragma: no cover - optional cleanup hook
        """Backends may override to release connections/resources."""


__all__ = ["ProviderBackend"]
