"""Turns a selection into a provider query."""

from __future__ import annotations

from fx_chart.gateway import ExchangeRateGateway
from fx_chart.models import ExchangeSeries, LoadResult, Selection
from fx_chart.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RetrievalOrchestrator:
    """Validates a selection before delegating to the gateway.

    There is no retry and no caching: each call issues a fresh query.
    """

    __slots__ = ("gateway",)

    def __init__(self, gateway: ExchangeRateGateway) -> None:
        self.gateway = gateway

    def load_result(self, selection: Selection) -> LoadResult:
        if not selection.is_complete:
            result = LoadResult.incomplete(selection)
            LOGGER.debug("Skipping provider query: %s", result.diagnostic)
            return result
        # is_complete guarantees all three fields are non-empty strings.
        return self.gateway.fetch_observations(
            selection.currency,  # type: ignore[arg-type]
            selection.start_date,  # type: ignore[arg-type]
            selection.end_date,  # type: ignore[arg-type]
        )

    def load(self, selection: Selection) -> ExchangeSeries:
        """Return the series for ``selection``; empty when it is incomplete."""

        return self.load_result(selection).series


__all__ = ["RetrievalOrchestrator"]
