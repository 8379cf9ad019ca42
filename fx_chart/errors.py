"""Exception types raised by provider backends."""

from __future__ import annotations


class FxChartError(Exception):
    """Base class for fx_chart errors."""


class ProviderError(FxChartError):
    """The provider could not be queried (connection, driver or SQL failure)."""


class MalformedRowError(ProviderError, ValueError):
    """A provider row is missing a field or carries an undecodable value."""


__all__ = ["FxChartError", "MalformedRowError", "ProviderError"]
