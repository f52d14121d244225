# -*- coding: utf-8 -*-
"""Unit tests for TotalsTracker fan-out."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.persistence.repositories.in_memory import (
    InMemoryAggregateTotalRepository,
    InMemoryTraderSeenRepository,
)
from synth_exchange_indexer.services.aggregation import (
    AggregateUpsertEngine,
    EraPolicy,
    TotalsTracker,
    UniquenessTracker,
)


def _tracker(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
) -> TotalsTracker:
    return TotalsTracker(
        UniquenessTracker(trader_seen_repo),
        AggregateUpsertEngine(aggregate_total_repo),
        EraPolicy(primary_network="mainnet", era_start_block=1000),
    )


def test_active_buckets_above_era_on_primary_network_has_four(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
) -> None:
    tracker = _tracker(trader_seen_repo, aggregate_total_repo)

    buckets = tracker.active_buckets(network="mainnet", block_number=1001, timestamp=950)

    assert buckets == [
        (Granularity.ALL_TIME, "mainnet"),
        (Granularity.POST_ARCHERNAR, "mainnet"),
        (Granularity.DAILY, "0"),
        (Granularity.FIFTEEN_MINUTE, "900"),
    ]


def test_track_trade_above_era_writes_four_buckets(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
    account: str,
    D: Callable[[Any], Decimal],
) -> None:
    tracker = _tracker(trader_seen_repo, aggregate_total_repo)

    totals = tracker.track_trade(
        account=account,
        network="mainnet",
        block_number=1001,
        timestamp=100,
        amount_usd=D("200"),
        fees_usd=D("2"),
    )

    assert [t.granularity for t in totals] == [
        Granularity.ALL_TIME,
        Granularity.POST_ARCHERNAR,
        Granularity.DAILY,
        Granularity.FIFTEEN_MINUTE,
    ]
    assert all(t.trades == 1 and t.exchangers == 1 for t in totals)


def test_track_trade_at_or_below_era_writes_three_buckets(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
    account: str,
) -> None:
    tracker = _tracker(trader_seen_repo, aggregate_total_repo)

    totals = tracker.track_trade(
        account=account,
        network="mainnet",
        block_number=1000,
        timestamp=100,
        amount_usd=None,
        fees_usd=None,
    )

    assert len(totals) == 3
    assert aggregate_total_repo.get(Granularity.POST_ARCHERNAR, "mainnet") is None


def test_track_trade_on_other_network_skips_era_bucket_and_keys_all_time_by_network(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
    account: str,
) -> None:
    tracker = _tracker(trader_seen_repo, aggregate_total_repo)

    totals = tracker.track_trade(
        account=account,
        network="optimism",
        block_number=5_000_000,
        timestamp=100,
        amount_usd=None,
        fees_usd=None,
    )

    assert len(totals) == 3
    assert aggregate_total_repo.get(Granularity.ALL_TIME, "optimism") is not None
    assert aggregate_total_repo.get(Granularity.ALL_TIME, "mainnet") is None


def test_uniqueness_is_per_bucket(
    trader_seen_repo: InMemoryTraderSeenRepository,
    aggregate_total_repo: InMemoryAggregateTotalRepository,
    account: str,
) -> None:
    tracker = _tracker(trader_seen_repo, aggregate_total_repo)
    common = dict(account=account, network="mainnet", block_number=1001, amount_usd=None, fees_usd=None)

    tracker.track_trade(timestamp=100, **common)
    tracker.track_trade(timestamp=950, **common)

    assert aggregate_total_repo.get(Granularity.ALL_TIME, "mainnet").exchangers == 1
    assert aggregate_total_repo.get(Granularity.DAILY, "0").exchangers == 1
    assert aggregate_total_repo.get(Granularity.FIFTEEN_MINUTE, "0").exchangers == 1
    assert aggregate_total_repo.get(Granularity.FIFTEEN_MINUTE, "900").exchangers == 1
    assert aggregate_total_repo.get(Granularity.DAILY, "0").trades == 2
