"""In-memory exchange record repository (keyed by {txHash}-{logIndex})."""

from __future__ import annotations

from synth_exchange_indexer.exceptions import DuplicateRecordError
from synth_exchange_indexer.models.synth_exchange import SynthExchange
from synth_exchange_indexer.persistence.repositories.interfaces.synth_exchange_repository import (
    ISynthExchangeRepository,
)


class InMemorySynthExchangeRepository(ISynthExchangeRepository):
    """In-memory implementation of ISynthExchangeRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, SynthExchange] = {}

    def get(self, record_id: str) -> SynthExchange | None:
        """Return the record by id, or None if missing."""
        return self._store.get(record_id)

    def add(self, record: SynthExchange) -> None:
        """Insert a new record; a second write to the same id is rejected."""
        if record.id in self._store:
            raise DuplicateRecordError("SynthExchange", record.id)
        self._store[record.id] = record

    def list_all(self) -> list[SynthExchange]:
        """Return all records in insertion order."""
        return list(self._store.values())
