"""Handler contract and result type shared by all event handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

E = TypeVar("E")


class HandlerStatus(str, Enum):
    """What a handler did with its event."""

    INDEXED = "INDEXED"
    INDEXED_WITHOUT_PRICE = "INDEXED_WITHOUT_PRICE"
    """Record written with its USD amount left unset."""
    SKIPPED_PRICE_UNAVAILABLE = "SKIPPED_PRICE_UNAVAILABLE"
    """Nothing written: a required rate was unknown."""


@dataclass(frozen=True, slots=True)
class HandlerResult:
    """Outcome of handling one event."""

    event_kind: str
    status: HandlerStatus
    record_id: str | None = None
    totals_updated: int = 0
    """Number of aggregate buckets written."""

    @property
    def skipped(self) -> bool:
        return self.status == HandlerStatus.SKIPPED_PRICE_UNAVAILABLE


class IEventHandler(ABC, Generic[E]):
    """Stateless transformation of one decoded event into store writes."""

    @abstractmethod
    def handle(self, event: E) -> HandlerResult:
        """Apply the event. Runs exactly once per event, in chain order."""
        ...
