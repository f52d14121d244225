"""In-memory latest rate repository (keyed by currency key)."""

from __future__ import annotations

from synth_exchange_indexer.models.latest_rate import LatestRate
from synth_exchange_indexer.persistence.repositories.interfaces.latest_rate_repository import (
    ILatestRateRepository,
)


class InMemoryLatestRateRepository(ILatestRateRepository):
    """In-memory implementation of ILatestRateRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, LatestRate] = {}

    def get(self, currency_key: str) -> LatestRate | None:
        """Return the latest rate for the currency, or None if never seen."""
        return self._store.get(currency_key.strip())

    def save(self, rate: LatestRate) -> None:
        """Upsert the rate (by currency_key)."""
        self._store[rate.currency_key.strip()] = rate
