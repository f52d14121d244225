"""AggregateTotal: trade count, unique traders and USD tallies for one bucket.

Identity is (granularity, key). All-time buckets are keyed by network tag,
time buckets by the stringified bucket start timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.utils.units import DECIMAL_CONTEXT


@dataclass(frozen=True, slots=True)
class AggregateTotal:
    """Counters for one bucket. Monotonically non-decreasing within the bucket's lifetime."""

    granularity: Granularity
    key: str

    trades: int = 0
    """Number of exchanges attributed to this bucket."""
    exchangers: int = 0
    """Number of distinct accounts that traded in this bucket."""
    exchange_usd_tally: Decimal = Decimal("0")
    total_fees_generated_usd: Decimal = Decimal("0")

    def with_observation(
        self,
        *,
        is_first_time_trader: bool,
        amount_usd: Decimal | None,
        fees_usd: Decimal | None,
    ) -> AggregateTotal:
        """Return a copy with one trade applied.

        trades always increases by 1; exchangers only for a first-time trader.
        USD tallies move only when both amounts are known.
        """
        volume = self.exchange_usd_tally
        fees = self.total_fees_generated_usd
        if amount_usd is not None and fees_usd is not None:
            volume = DECIMAL_CONTEXT.add(volume, amount_usd)
            fees = DECIMAL_CONTEXT.add(fees, fees_usd)
        return replace(
            self,
            trades=self.trades + 1,
            exchangers=self.exchangers + (1 if is_first_time_trader else 0),
            exchange_usd_tally=volume,
            total_fees_generated_usd=fees,
        )

    @classmethod
    def create(cls, granularity: Granularity, key: str) -> AggregateTotal:
        """Create a zeroed total for a bucket seen for the first time."""
        key = key.strip()
        if not key:
            raise ValueError("key must be non-empty")
        return cls(granularity=granularity, key=key)
