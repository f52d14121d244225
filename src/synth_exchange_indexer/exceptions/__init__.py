"""Exceptions subpackage."""

from synth_exchange_indexer.exceptions.exceptions import (
    DuplicateRecordError,
    EventOrderError,
    IndexerError,
    MalformedEventError,
    MissingRequiredConfigError,
    PriceUnavailableError,
)

__all__ = [
    "DuplicateRecordError",
    "EventOrderError",
    "IndexerError",
    "MalformedEventError",
    "MissingRequiredConfigError",
    "PriceUnavailableError",
]
