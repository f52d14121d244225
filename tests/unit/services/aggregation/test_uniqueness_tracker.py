# -*- coding: utf-8 -*-
"""Unit tests for UniquenessTracker."""

from __future__ import annotations

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.persistence.repositories.in_memory import InMemoryTraderSeenRepository
from synth_exchange_indexer.services.aggregation.uniqueness_tracker import UniquenessTracker


def test_first_observation_returns_true_then_false(
    trader_seen_repo: InMemoryTraderSeenRepository,
    account: str,
) -> None:
    tracker = UniquenessTracker(trader_seen_repo)

    assert tracker.observe_and_check_first(Granularity.DAILY, "0", account) is True
    assert tracker.observe_and_check_first(Granularity.DAILY, "0", account) is False
    assert trader_seen_repo.contains(Granularity.DAILY, "0", account)


def test_each_bucket_tracks_membership_independently(
    trader_seen_repo: InMemoryTraderSeenRepository,
    account: str,
) -> None:
    tracker = UniquenessTracker(trader_seen_repo)
    tracker.observe_and_check_first(Granularity.ALL_TIME, "mainnet", account)

    assert tracker.observe_and_check_first(Granularity.DAILY, "0", account) is True
    assert tracker.observe_and_check_first(Granularity.FIFTEEN_MINUTE, "900", account) is True
    assert tracker.observe_and_check_first(Granularity.FIFTEEN_MINUTE, "0", account) is True
    assert tracker.observe_and_check_first(Granularity.ALL_TIME, "mainnet", account) is False


def test_accounts_are_tracked_separately(
    trader_seen_repo: InMemoryTraderSeenRepository,
    account: str,
    other_account: str,
) -> None:
    tracker = UniquenessTracker(trader_seen_repo)
    tracker.observe_and_check_first(Granularity.DAILY, "0", account)

    assert tracker.observe_and_check_first(Granularity.DAILY, "0", other_account) is True
