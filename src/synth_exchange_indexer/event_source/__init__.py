# -*- coding: utf-8 -*-
"""Event source abstraction and implementations."""

from synth_exchange_indexer.event_source.base import IEventSource
from synth_exchange_indexer.event_source.in_memory_source import InMemoryEventSource
from synth_exchange_indexer.event_source.jsonl_source import JsonLinesEventSource

__all__ = [
    "IEventSource",
    "InMemoryEventSource",
    "JsonLinesEventSource",
]
