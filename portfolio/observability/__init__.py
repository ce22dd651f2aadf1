"""Logging setup."""

from __future__ import annotations

from portfolio.observability.logging import configure_logging

__all__ = ["configure_logging"]
