"""Granularity: the bucketing schemes aggregate totals are tracked under."""

from __future__ import annotations

from enum import Enum


class Granularity(str, Enum):
    """Time/era partition of an AggregateTotal and its TraderSeen set."""

    ALL_TIME = "ALL_TIME"
    POST_ARCHERNAR = "POST_ARCHERNAR"
    """All-time, restricted to the primary network after the era start block."""
    DAILY = "DAILY"
    FIFTEEN_MINUTE = "FIFTEEN_MINUTE"
