"""Custom exceptions for event decoding, pricing and aggregation."""

from __future__ import annotations


class IndexerError(Exception):
    """Base exception for indexer errors."""

    pass


class MissingRequiredConfigError(IndexerError):
    """Raised when a required configuration value is missing."""

    pass


class PriceUnavailableError(IndexerError):
    """Raised when no rate is known for a currency as of a transaction.

    Expected and non-fatal: new or illiquid synths, oracle gaps.
    """

    def __init__(
        self,
        currency_key: str,
        *,
        tx_hash: str | None = None,
    ) -> None:
        super().__init__(f"No rate for {currency_key!r} as of tx {tx_hash}")
        self.currency_key = currency_key
        self.tx_hash = tx_hash


class MalformedEventError(IndexerError):
    """Raised when a decoded event record is missing fields or has invalid values."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.line_number = line_number


class EventOrderError(IndexerError):
    """Raised when an event is delivered out of canonical chain order."""

    pass


class DuplicateRecordError(IndexerError):
    """Raised when an append-once record key is written a second time."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} {key!r} already exists")
        self.entity = entity
        self.key = key
