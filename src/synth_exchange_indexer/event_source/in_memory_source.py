# -*- coding: utf-8 -*-
"""In-memory event source backed by a list of decoded events."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from synth_exchange_indexer.event_source.base import IEventSource
from synth_exchange_indexer.models.events import ChainPosition, DecodedEvent


class InMemoryEventSource(IEventSource):
    """In-memory implementation of IEventSource. Events are kept in the order given."""

    def __init__(self, events: Iterable[DecodedEvent] = ()) -> None:
        """Initialize the source.

        Args:
            events: Decoded events, already in chain order.
        """
        self._events: list[DecodedEvent] = list(events)

    def __len__(self) -> int:
        """Return the number of events in the log."""
        return len(self._events)

    def append(self, event: DecodedEvent) -> None:
        """Append an event to the end of the log."""
        self._events.append(event)

    def iter_events(self, after: ChainPosition | None = None) -> Iterator[DecodedEvent]:
        """Yield events in stored order, skipping those at or before after."""
        for event in self._events:
            if after is not None and event.meta.position <= after:
                continue
            yield event
