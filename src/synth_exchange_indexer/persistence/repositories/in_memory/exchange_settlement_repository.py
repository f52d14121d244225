"""In-memory reclaim/rebate repository (keyed by (kind, {txHash}-{logIndex}))."""

from __future__ import annotations

from synth_exchange_indexer.exceptions import DuplicateRecordError
from synth_exchange_indexer.models.exchange_settlement import (
    ExchangeSettlement,
    SettlementKind,
)
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_settlement_repository import (
    IExchangeSettlementRepository,
)


class InMemoryExchangeSettlementRepository(IExchangeSettlementRepository):
    """In-memory implementation of IExchangeSettlementRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[tuple[SettlementKind, str], ExchangeSettlement] = {}

    def get(self, kind: SettlementKind, record_id: str) -> ExchangeSettlement | None:
        """Return the record by (kind, id), or None if missing."""
        return self._store.get((kind, record_id))

    def add(self, record: ExchangeSettlement) -> None:
        """Insert a new record; a second write to the same (kind, id) is rejected."""
        k = (record.kind, record.id)
        if k in self._store:
            raise DuplicateRecordError(f"Exchange{record.kind.value.title()}", record.id)
        self._store[k] = record

    def list_by_kind(self, kind: SettlementKind) -> list[ExchangeSettlement]:
        """Return all records of the kind in insertion order."""
        return [r for (k, _), r in self._store.items() if k == kind]
