"""Logging setup."""

from synth_exchange_indexer.logging.config import configure_logging

__all__ = ["configure_logging"]
