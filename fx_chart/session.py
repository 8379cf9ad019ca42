"""Per-screen state and the asynchronous load workflow."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Callable

from fx_chart.gateway import ExchangeRateGateway
from fx_chart.models import CurrencyName, ExchangeSeries, LoadResult, Selection
from fx_chart.orchestrator import RetrievalOrchestrator
from fx_chart.renderer import ChartDescription, SeriesRenderer
from fx_chart.utils.date_keys import optional_date_key
from fx_chart.utils.logger import get_logger

LOGGER = get_logger(__name__)

ChartListener = Callable[[ChartDescription], None]


class ScreenSession:
    """State owned by one screen: selection, currency list, series and chart.

    Loads run the orchestrator in a worker thread and apply their result back
    on the event loop. A new load request cancels the one in flight, so only
    the most recent request can replace the displayed series.
    """

    def __init__(
        self,
        orchestrator: RetrievalOrchestrator,
        gateway: ExchangeRateGateway,
        renderer: SeriesRenderer | None = None,
    ) -> None:
        self.orchestrator = orchestrator
        self.gateway = gateway
        self.renderer = renderer or SeriesRenderer()
        self.selection = Selection()
        self.currencies: list[CurrencyName] = []
        self.series: ExchangeSeries = ()
        self.chart: ChartDescription = self.renderer.render(self.series)
        self.last_result: LoadResult | None = None
        self._inflight: asyncio.Task[LoadResult] | None = None
        self._listeners: list[ChartListener] = []

    def select_currency(self, currency: CurrencyName | None) -> None:
        self.selection.currency = currency or None

    def set_start_date(self, value: str | date | None) -> None:
        self.selection.start_date = optional_date_key(value)

    def set_end_date(self, value: str | date | None) -> None:
        self.selection.end_date = optional_date_key(value)

    async def refresh_currencies(self) -> list[CurrencyName]:
        """Fetch the provider's currency names and keep them sorted for display."""

        names = await asyncio.to_thread(self.gateway.list_currencies)
        self.currencies = sorted(names)
        return self.currencies

    @property
    def is_loading(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    def add_listener(self, callback: ChartListener) -> None:
        """Register ``callback`` to receive every newly applied chart."""

        self._listeners.append(callback)

    def request_load(self) -> asyncio.Task[LoadResult]:
        """Start a load for the current selection, cancelling any load in flight.

        Must be called from a running event loop.
        """

        previous = self._inflight
        if previous is not None and not previous.done():
            LOGGER.info("Cancelling in-flight load in favour of a newer request")
            previous.cancel()
        task = asyncio.get_running_loop().create_task(self._run_load(self.selection.snapshot()))
        self._inflight = task
        return task

    async def load(self) -> LoadResult:
        """Run a load and return its outcome.

        If a newer request replaces this load before it finishes, the result is
        a ``SUPERSEDED`` ``LoadResult`` rather than a cancellation.
        """

        task = self.request_load()
        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise
        if task.cancelled():
            return LoadResult.superseded()
        return task.result()

    async def _run_load(self, selection: Selection) -> LoadResult:
        result = await asyncio.to_thread(self.orchestrator.load_result, selection)
        if asyncio.current_task() is not self._inflight:
            # A newer request took over while the query was running.
            return result
        self._apply(result)
        return result

    def _apply(self, result: LoadResult) -> None:
        if not result.ok:
            LOGGER.info("Load produced no data: %s", result.diagnostic)
        self.last_result = result
        self.series = result.series
        self.chart = self.renderer.render(self.series)
        for listener in list(self._listeners):
            listener(self.chart)


__all__ = ["ChartListener", "ScreenSession"]
