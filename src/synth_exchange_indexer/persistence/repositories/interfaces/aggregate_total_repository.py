# -*- coding: utf-8 -*-
"""Abstract interface for aggregate totals storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from synth_exchange_indexer.models.aggregate_total import AggregateTotal
from synth_exchange_indexer.models.granularity import Granularity


class IAggregateTotalRepository(ABC):
    """Interface for persisting AggregateTotal by (granularity, key)."""

    @abstractmethod
    def get(self, granularity: Granularity, key: str) -> AggregateTotal | None:
        """Return the total for (granularity, key), or None if the bucket was never observed."""
        ...

    @abstractmethod
    def save(self, total: AggregateTotal) -> None:
        """Upsert a total (by granularity, key)."""
        ...

    @abstractmethod
    def list_by_granularity(self, granularity: Granularity) -> list[AggregateTotal]:
        """Return all totals of the granularity in bucket creation order."""
        ...

    def get_or_create(self, granularity: Granularity, key: str) -> AggregateTotal:
        """Return the stored total or a zeroed one.

        A new total is not persisted until save() is called with it.
        """
        total = self.get(granularity, key)
        if total is not None:
            return total
        return AggregateTotal.create(granularity, key)
