"""In-memory exchange fee repository (keyed by currency key)."""

from __future__ import annotations

from synth_exchange_indexer.models.exchange_fee import ExchangeFee
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_fee_repository import (
    IExchangeFeeRepository,
)


class InMemoryExchangeFeeRepository(IExchangeFeeRepository):
    """In-memory implementation of IExchangeFeeRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, ExchangeFee] = {}

    def get(self, currency_key: str) -> ExchangeFee | None:
        """Return the fee for the currency, or None if never set."""
        return self._store.get(currency_key.strip())

    def save(self, fee: ExchangeFee) -> None:
        """Upsert the fee (by currency_key)."""
        self._store[fee.currency_key.strip()] = fee

    def list_all(self) -> list[ExchangeFee]:
        """Return all fees."""
        return list(self._store.values())
