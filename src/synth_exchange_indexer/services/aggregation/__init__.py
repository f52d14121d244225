"""Aggregation services: bucketing, uniqueness and totals upsert."""

from synth_exchange_indexer.services.aggregation.aggregate_engine import AggregateUpsertEngine
from synth_exchange_indexer.services.aggregation.bucketing import (
    DAY_SECONDS,
    FIFTEEN_MINUTE_SECONDS,
    bucket_key,
    bucket_of,
)
from synth_exchange_indexer.services.aggregation.era_policy import ARCHERNAR_BLOCK, EraPolicy
from synth_exchange_indexer.services.aggregation.totals_tracker import TotalsTracker
from synth_exchange_indexer.services.aggregation.uniqueness_tracker import UniquenessTracker

__all__ = [
    "ARCHERNAR_BLOCK",
    "AggregateUpsertEngine",
    "DAY_SECONDS",
    "EraPolicy",
    "FIFTEEN_MINUTE_SECONDS",
    "TotalsTracker",
    "UniquenessTracker",
    "bucket_key",
    "bucket_of",
]
