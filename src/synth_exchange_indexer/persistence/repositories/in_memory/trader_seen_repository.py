# -*- coding: utf-8 -*-
"""In-memory bucket membership repository (keyed by granularity, {bucketKey}-{account})."""

from __future__ import annotations

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.models.trader_seen import TraderSeen
from synth_exchange_indexer.persistence.repositories.interfaces.trader_seen_repository import (
    ITraderSeenRepository,
)
from synth_exchange_indexer.utils.keys import trader_seen_key


class InMemoryTraderSeenRepository(ITraderSeenRepository):
    """In-memory implementation of ITraderSeenRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[tuple[Granularity, str], TraderSeen] = {}

    def contains(self, granularity: Granularity, bucket_key: str, account: str) -> bool:
        """Return True if account has been seen in (granularity, bucket_key)."""
        return (granularity, trader_seen_key(bucket_key, account)) in self._store

    def add(self, seen: TraderSeen) -> None:
        """Record membership. Idempotent."""
        k = (seen.granularity, seen.key)
        if k not in self._store:
            self._store[k] = seen

    def list_by_granularity(self, granularity: Granularity) -> list[TraderSeen]:
        """Return all memberships of the granularity in insertion order."""
        return [s for (g, _), s in self._store.items() if g == granularity]
