"""Shared helpers for :mod:`fx_chart`."""
