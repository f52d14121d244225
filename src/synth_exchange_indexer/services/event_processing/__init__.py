"""Event processing services."""

from synth_exchange_indexer.services.event_processing.event_processor import (
    EventProcessorService,
)

__all__ = ["EventProcessorService"]
