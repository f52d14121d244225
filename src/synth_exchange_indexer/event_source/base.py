# -*- coding: utf-8 -*-
"""Event source interface: ordered, replayable delivery of decoded events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from synth_exchange_indexer.models.events import ChainPosition, DecodedEvent


class IEventSource(ABC):
    """Abstract interface for an ordered event log.

    Implementations yield events in canonical chain order (block number, then
    log index) and can be replayed any number of times.
    """

    @abstractmethod
    def iter_events(self, after: ChainPosition | None = None) -> Iterator[DecodedEvent]:
        """Yield events in chain order.

        Args:
            after: Checkpoint; if set, only events strictly after it are yielded.

        Raises:
            MalformedEventError: If a stored record cannot be decoded.
        """
        ...
