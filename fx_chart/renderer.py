"""Maps an exchange series into a chart description and a Plotly figure."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import plotly.graph_objects as go

from fx_chart.models import ExchangeSeries

AXIS_PADDING = 0.5
EMPTY_BOUNDS = (0.0, 1.0)
NO_DATA_TEXT = "No data available"
CHART_TITLE = "Exchange rate history"
SERIES_LABEL = "Exchange rate"
CHART_DESCRIPTION = "Exchange rate trend"

LINE_COLOR = "#FFA500"
FILL_COLOR = "#FFECB3"


class ChartState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class ChartDescription:
    """Everything needed to draw the chart for one series."""

    series: ExchangeSeries = field(default_factory=tuple)
    points: Tuple[Tuple[int, float], ...] = field(default_factory=tuple)
    y_min: float = EMPTY_BOUNDS[0]
    y_max: float = EMPTY_BOUNDS[1]

    @property
    def state(self) -> ChartState:
        return ChartState.POPULATED if self.points else ChartState.EMPTY

    @property
    def placeholder(self) -> str | None:
        return NO_DATA_TEXT if self.state is ChartState.EMPTY else None

    @property
    def y_bounds(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)

    def label(self, x: float) -> str:
        """Return the date at horizontal coordinate ``x``; ``""`` when out of range."""

        if not math.isfinite(x):
            return ""
        index = int(x)
        if 0 <= index < len(self.series):
            return self.series[index].date
        return ""

    def tick_labels(self) -> list[str]:
        return [self.label(x) for x, _ in self.points]


class SeriesRenderer:
    """Builds a fresh :class:`ChartDescription` for every series it is given."""

    def render(self, series: ExchangeSeries) -> ChartDescription:
        series = tuple(series)
        if not series:
            return ChartDescription()
        rates = [observation.rate for observation in series]
        return ChartDescription(
            series=series,
            points=tuple((index, observation.rate) for index, observation in enumerate(series)),
            y_min=min(rates) - AXIS_PADDING,
            y_max=max(rates) + AXIS_PADDING,
        )


def build_figure(chart: ChartDescription) -> go.Figure:
    """Draw ``chart`` as a smoothed, filled line chart keyed by index."""

    fig = go.Figure()
    fig.update_layout(
        title=CHART_TITLE,
        plot_bgcolor="white",
        paper_bgcolor="white",
        showlegend=True,
        legend=dict(font=dict(size=14)),
        margin=dict(l=10, r=10, t=50, b=10),
        height=400,
    )
    fig.update_yaxes(range=list(chart.y_bounds), showgrid=True, tickfont=dict(size=12))

    if chart.state is ChartState.EMPTY:
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        fig.add_annotation(
            text=chart.placeholder,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=16),
        )
        return fig

    xs = [x for x, _ in chart.points]
    ys = [y for _, y in chart.points]
    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            name=SERIES_LABEL,
            mode="lines+markers+text",
            text=[f"{y:g}" for y in ys],
            textposition="top center",
            line=dict(color=LINE_COLOR, width=3, shape="spline"),
            marker=dict(color=LINE_COLOR, size=10),
            fill="tozeroy",
            fillcolor=FILL_COLOR,
        )
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=xs,
        ticktext=chart.tick_labels(),
        tickangle=-45,
        tickfont=dict(size=12),
        showgrid=True,
        showline=True,
    )
    fig.add_annotation(
        text=CHART_DESCRIPTION,
        xref="paper",
        yref="paper",
        x=1,
        y=0,
        xanchor="right",
        yanchor="bottom",
        showarrow=False,
        font=dict(size=12),
    )
    return fig


__all__ = [
    "AXIS_PADDING",
    "ChartDescription",
    "ChartState",
    "NO_DATA_TEXT",
    "SeriesRenderer",
    "build_figure",
]
