"""Logging utilities for the fx_chart package."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "FX_CHART_LOG_LEVEL"

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "fx_chart") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter.

    The root level defaults to INFO and honours ``FX_CHART_LOG_LEVEL``.
    """
    global _LOGGER
    if _LOGGER is None:
        level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        logging.basicConfig(
            level=getattr(logging, level_name, logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)
