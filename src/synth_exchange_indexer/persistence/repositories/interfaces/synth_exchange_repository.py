# -*- coding: utf-8 -*-
"""Abstract interface for exchange record storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from synth_exchange_indexer.models.synth_exchange import SynthExchange


class ISynthExchangeRepository(ABC):
    """Interface for persisting SynthExchange records (append-once by id)."""

    @abstractmethod
    def get(self, record_id: str) -> Optional[SynthExchange]:
        """Return the record by id, or None if missing."""
        ...

    @abstractmethod
    def add(self, record: SynthExchange) -> None:
        """Insert a new record.

        Raises:
            DuplicateRecordError: If a record with the same id already exists.
        """
        ...

    @abstractmethod
    def list_all(self) -> list[SynthExchange]:
        """Return all records in insertion (chain) order."""
        ...
