"""Abstract interface for bucket membership storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.models.trader_seen import TraderSeen


class ITraderSeenRepository(ABC):
    """Interface for persisting TraderSeen (which accounts traded in which bucket)."""

    @abstractmethod
    def contains(self, granularity: Granularity, bucket_key: str, account: str) -> bool:
        """Return True if account has been seen in (granularity, bucket_key)."""
        ...

    @abstractmethod
    def add(self, seen: TraderSeen) -> None:
        """Record membership. Idempotent (re-adding the same key is a no-op)."""
        ...

    @abstractmethod
    def list_by_granularity(self, granularity: Granularity) -> list[TraderSeen]:
        """Return all memberships of the granularity in insertion order."""
        ...
