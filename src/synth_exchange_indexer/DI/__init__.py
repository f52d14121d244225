"""Dependency injection."""

from synth_exchange_indexer.DI.container import Container

__all__ = ["Container"]
