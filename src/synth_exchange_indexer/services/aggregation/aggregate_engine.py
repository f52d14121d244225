"""Aggregate upsert engine: applies one trade observation to one bucket total."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import structlog

from synth_exchange_indexer.models.aggregate_total import AggregateTotal
from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.persistence.repositories.interfaces.aggregate_total_repository import (
    IAggregateTotalRepository,
)


class AggregateUpsertEngine:
    """Load-or-init the bucket total, apply the observation, save under the same key.

    One routine for every granularity; the granularity only selects the collection.
    """

    def __init__(
        self,
        aggregate_total_repository: IAggregateTotalRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            aggregate_total_repository: Totals storage (injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._repo = aggregate_total_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def apply_observation(
        self,
        granularity: Granularity,
        key: str,
        *,
        is_first_time_trader: bool,
        amount_usd: Decimal | None,
        fees_usd: Decimal | None,
    ) -> AggregateTotal:
        """Apply one trade to the (granularity, key) bucket and persist it.

        Args:
            granularity: Bucketing scheme of the total.
            key: Bucket key (network tag or bucket start timestamp).
            is_first_time_trader: Whether the trader is new to this bucket.
            amount_usd: Traded volume in USD; None if unknown.
            fees_usd: Fees in USD; None if unknown.

        Returns:
            The saved total.
        """
        total = self._repo.get_or_create(granularity, key)
        updated = total.with_observation(
            is_first_time_trader=is_first_time_trader,
            amount_usd=amount_usd,
            fees_usd=fees_usd,
        )
        self._repo.save(updated)
        self._logger.debug(
            "aggregate_total_updated",
            granularity=granularity.value,
            key=updated.key,
            trades=updated.trades,
            exchangers=updated.exchangers,
            exchange_usd_tally=str(updated.exchange_usd_tally),
            total_fees_generated_usd=str(updated.total_fees_generated_usd),
        )
        return updated
