# -*- coding: utf-8 -*-
"""Abstract interface for reclaim/rebate storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from synth_exchange_indexer.models.exchange_settlement import (
    ExchangeSettlement,
    SettlementKind,
)


class IExchangeSettlementRepository(ABC):
    """Interface for persisting ExchangeSettlement, one collection per kind (append-once)."""

    @abstractmethod
    def get(self, kind: SettlementKind, record_id: str) -> Optional[ExchangeSettlement]:
        """Return the record by (kind, id), or None if missing."""
        ...

    @abstractmethod
    def add(self, record: ExchangeSettlement) -> None:
        """Insert a new record.

        Raises:
            DuplicateRecordError: If a record with the same (kind, id) already exists.
        """
        ...

    @abstractmethod
    def list_by_kind(self, kind: SettlementKind) -> list[ExchangeSettlement]:
        """Return all records of the kind in insertion order."""
        ...
