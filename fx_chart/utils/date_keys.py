"""Helpers for the ``YYYY-MM-DD`` date keys exchanged with the provider."""

from __future__ import annotations

from datetime import date, datetime

DATE_KEY_FORMAT = "%Y-%m-%d"


def parse_date(value: str | date) -> date:
    """Parse a date key to :class:`date`."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def to_date_key(value: str | date) -> str:
    """Normalise ``value`` into the canonical ``YYYY-MM-DD`` form.

    Raises ``ValueError`` when a string is not a valid calendar date.
    """

    return parse_date(value).isoformat()


def optional_date_key(value: str | date | None) -> str | None:
    """Like :func:`to_date_key`, but ``None`` and ``""`` mean "no date"."""

    if value is None or value == "":
        return None
    return to_date_key(value)


def is_date_key(value: object) -> bool:
    """Return True when ``value`` is a string already in canonical form."""

    if not isinstance(value, str):
        return False
    try:
        return to_date_key(value) == value
    except ValueError:
        return False


__all__ = ["DATE_KEY_FORMAT", "is_date_key", "optional_date_key", "parse_date", "to_date_key"]
