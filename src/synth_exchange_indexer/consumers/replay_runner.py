# -*- coding: utf-8 -*-
"""Runner that replays an event source through the event processor.

Single-threaded and synchronous: each event is fully applied before the next
one is read. The runner enforces canonical chain order and stops on the first
hard fault (malformed record, out-of-order event, duplicate record key).
Price gaps are not faults; the handlers report them and the replay continues.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from synth_exchange_indexer.event_source.base import IEventSource
from synth_exchange_indexer.exceptions import EventOrderError
from synth_exchange_indexer.models.events import ChainPosition
from synth_exchange_indexer.services.event_processing import EventProcessorService


@dataclass(slots=True)
class ReplaySummary:
    """Counters for one replay run."""

    events_processed: int = 0
    events_skipped: int = 0
    """Events dropped by their handler (e.g. exchange without a known rate)."""
    last_position: Optional[ChainPosition] = None
    """Checkpoint to resume after."""
    by_kind: dict[str, int] = field(default_factory=dict)


class ReplayRunner:
    """Feeds every event of a source, in order, to EventProcessorService."""

    def __init__(
        self,
        event_processor: EventProcessorService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            event_processor: Dispatches each event to its handler.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._processor = event_processor
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def run(self, source: IEventSource, *, after: ChainPosition | None = None) -> ReplaySummary:
        """Replay source from the beginning, or from just after the checkpoint.

        Args:
            source: Ordered event log.
            after: Optional checkpoint (last position already applied to the store).

        Returns:
            Summary with counts and the last applied position.

        Raises:
            EventOrderError: If an event is not strictly after the previous one.
            MalformedEventError: If the source yields an undecodable record.
            DuplicateRecordError: If a per-event record key is written twice.
        """
        summary = ReplaySummary(last_position=after)
        self._logger.info(
            "replay_started",
            resume_after=tuple(after) if after is not None else None,
        )
        for event in source.iter_events(after=after):
            position = event.meta.position
            if summary.last_position is not None and position <= summary.last_position:
                self._logger.error(
                    "replay_event_out_of_order",
                    position=tuple(position),
                    previous_position=tuple(summary.last_position),
                    tx_hash=event.meta.tx_hash,
                )
                raise EventOrderError(
                    f"Event at {tuple(position)} is not after {tuple(summary.last_position)}"
                )

            result = self._processor.process(event)

            summary.events_processed += 1
            if result.skipped:
                summary.events_skipped += 1
            summary.by_kind[event.kind] = summary.by_kind.get(event.kind, 0) + 1
            summary.last_position = position

        self._logger.info(
            "replay_completed",
            events_processed=summary.events_processed,
            events_skipped=summary.events_skipped,
            last_position=tuple(summary.last_position) if summary.last_position else None,
            by_kind=summary.by_kind,
        )
        return summary
