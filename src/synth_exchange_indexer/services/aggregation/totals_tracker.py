"""Totals tracker: fans one exchange out to every active granularity."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import structlog

from synth_exchange_indexer.models.aggregate_total import AggregateTotal
from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.services.aggregation.aggregate_engine import AggregateUpsertEngine
from synth_exchange_indexer.services.aggregation.bucketing import bucket_key
from synth_exchange_indexer.services.aggregation.era_policy import EraPolicy
from synth_exchange_indexer.services.aggregation.uniqueness_tracker import UniquenessTracker


class TotalsTracker:
    """Updates all-time, era-gated all-time, daily and 15-minute totals for a trade."""

    def __init__(
        self,
        uniqueness_tracker: UniquenessTracker,
        aggregate_engine: AggregateUpsertEngine,
        era_policy: EraPolicy,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the tracker.

        Args:
            uniqueness_tracker: First-appearance check per bucket (injected).
            aggregate_engine: Per-bucket upsert (injected).
            era_policy: Decides whether the era-gated total applies.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._uniqueness = uniqueness_tracker
        self._engine = aggregate_engine
        self._era_policy = era_policy
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def active_buckets(
        self,
        *,
        network: str,
        block_number: int,
        timestamp: int,
    ) -> list[tuple[Granularity, str]]:
        """Return (granularity, bucket key) for every total this event updates."""
        granularities = [Granularity.ALL_TIME]
        if self._era_policy.includes(network, block_number):
            granularities.append(Granularity.POST_ARCHERNAR)
        granularities += [Granularity.DAILY, Granularity.FIFTEEN_MINUTE]
        return [
            (g, bucket_key(g, network=network, timestamp=timestamp))
            for g in granularities
        ]

    def track_trade(
        self,
        *,
        account: str,
        network: str,
        block_number: int,
        timestamp: int,
        amount_usd: Decimal | None,
        fees_usd: Decimal | None,
    ) -> list[AggregateTotal]:
        """Apply one trade to every active bucket; return the saved totals.

        Membership is checked per bucket, so a trader can be new to today's
        bucket while already counted in the all-time one.
        """
        updated: list[AggregateTotal] = []
        for granularity, key in self.active_buckets(
            network=network,
            block_number=block_number,
            timestamp=timestamp,
        ):
            is_first = self._uniqueness.observe_and_check_first(granularity, key, account)
            updated.append(
                self._engine.apply_observation(
                    granularity,
                    key,
                    is_first_time_trader=is_first,
                    amount_usd=amount_usd,
                    fees_usd=fees_usd,
                )
            )
        return updated
