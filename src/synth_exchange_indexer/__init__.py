"""Synth exchange indexer: USD-valued trade totals across time buckets and eras."""

from synth_exchange_indexer.config import get_settings
from synth_exchange_indexer.consumers import ReplayRunner
from synth_exchange_indexer.DI import Container
from synth_exchange_indexer.services import EventProcessorService

__version__ = "0.1.0"
__all__ = [
    "Container",
    "EventProcessorService",
    "ReplayRunner",
    "get_settings",
]
