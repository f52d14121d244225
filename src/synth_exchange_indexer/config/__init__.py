"""Configuration subpackage."""

from synth_exchange_indexer.config.config import (
    AppSettings,
    IndexerSettings,
    LoggingSettings,
    ReplaySettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "IndexerSettings",
    "LoggingSettings",
    "ReplaySettings",
    "Settings",
    "get_settings",
]
