"""Service that dispatches each decoded event to the handler for its kind."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from synth_exchange_indexer.exceptions import MalformedEventError
from synth_exchange_indexer.models.events import DecodedEvent
from synth_exchange_indexer.services.event_handlers.base import HandlerResult, IEventHandler


class EventProcessorService:
    """Routes events by kind; one event is fully applied before the call returns."""

    def __init__(
        self,
        handlers: Mapping[str, IEventHandler[Any]],
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            handlers: Handler per event kind (e.g. "SynthExchange").
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._handlers = dict(handlers)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def kinds(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def process(self, event: DecodedEvent) -> HandlerResult:
        """Apply a single event through its handler.

        Raises:
            MalformedEventError: If no handler is registered for the event kind.
        """
        handler = self._handlers.get(event.kind)
        if handler is None:
            raise MalformedEventError(f"No handler for event kind {event.kind!r}", field="kind")

        result = handler.handle(event)
        self._logger.debug(
            "event_processed",
            event_kind=event.kind,
            tx_hash=event.meta.tx_hash,
            log_index=event.meta.log_index,
            block_number=event.meta.block_number,
            status=result.status.value,
            record_id=result.record_id,
            totals_updated=result.totals_updated,
        )
        return result
