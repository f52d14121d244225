"""Consumers of the event source."""

from synth_exchange_indexer.consumers.replay_runner import ReplayRunner, ReplaySummary

__all__ = ["ReplayRunner", "ReplaySummary"]
