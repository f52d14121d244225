# -*- coding: utf-8 -*-
"""In-memory aggregate totals repository (keyed by granularity, key)."""

from __future__ import annotations

from typing import Optional

from synth_exchange_indexer.models.aggregate_total import AggregateTotal
from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.persistence.repositories.interfaces.aggregate_total_repository import (
    IAggregateTotalRepository,
)


def _key(granularity: Granularity, key: str) -> tuple[Granularity, str]:
    return (granularity, key.strip())


class InMemoryAggregateTotalRepository(IAggregateTotalRepository):
    """In-memory implementation of IAggregateTotalRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[tuple[Granularity, str], AggregateTotal] = {}

    def get(self, granularity: Granularity, key: str) -> Optional[AggregateTotal]:
        """Return the total for (granularity, key), or None if missing."""
        return self._store.get(_key(granularity, key))

    def save(self, total: AggregateTotal) -> None:
        """Upsert a total (by granularity, key)."""
        self._store[_key(total.granularity, total.key)] = total

    def list_by_granularity(self, granularity: Granularity) -> list[AggregateTotal]:
        """Return all totals of the granularity in bucket creation order."""
        return [t for (g, _), t in self._store.items() if g == granularity]
