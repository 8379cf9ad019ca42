"""Read-only gateway between the screen and the exchange-rate provider."""

from __future__ import annotations

from fx_chart.db.base_backend import ProviderBackend
from fx_chart.errors import ProviderError
from fx_chart.models import CurrencyName, DateKey, ExchangeSeries, LoadResult
from fx_chart.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ExchangeRateGateway:
    """Issues the two provider queries and absorbs provider failures.

    Nothing raised by a backend escapes this class: failures are logged and
    turned into empty results so callers only ever see "data" or "no data".
    """

    __slots__ = ("backend",)

    def __init__(self, backend: ProviderBackend) -> None:
        self.backend = backend

    def list_currencies(self) -> set[CurrencyName]:
        """Return the de-duplicated set of currency names known to the provider."""

        try:
            names = self.backend.fetch_currency_names()
        except ProviderError as exc:
            LOGGER.warning("Currency listing failed; treating as no data: %s", exc)
            return set()
        currencies = {name for name in names if isinstance(name, str) and name}
        LOGGER.info("Provider lists %s currencies", len(currencies))
        return currencies

    def fetch_observations(
        self,
        currency: CurrencyName,
        start_date: DateKey,
        end_date: DateKey,
    ) -> LoadResult:
        """Return the ascending series for ``currency`` or a failure diagnostic."""

        try:
            observations = self.backend.fetch_observations(currency, start_date, end_date)
        except ProviderError as exc:
            LOGGER.warning(
                "Observation query for %s (%s..%s) failed: %s", currency, start_date, end_date, exc
            )
            return LoadResult.failure(str(exc))
        series = tuple(sorted(observations, key=lambda observation: observation.date))
        LOGGER.info(
            "Fetched %s observations for %s between %s and %s",
            len(series),
            currency,
            start_date,
            end_date,
        )
        return LoadResult.success(series)

    def list_observations(
        self,
        currency: CurrencyName,
        start_date: DateKey,
        end_date: DateKey,
    ) -> ExchangeSeries:
        """Return the series only; empty when nothing matched or the query failed."""

        return self.fetch_observations(currency, start_date, end_date).series


__all__ = ["ExchangeRateGateway"]
