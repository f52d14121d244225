# -*- coding: utf-8 -*-
"""Unit tests for time bucketing."""

from __future__ import annotations

import pytest

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.services.aggregation.bucketing import (
    DAY_SECONDS,
    FIFTEEN_MINUTE_SECONDS,
    bucket_key,
    bucket_of,
)


@pytest.mark.parametrize("k", [0, 1, 18312])
def test_daily_bucket_is_constant_within_day_and_changes_at_boundary(k: int) -> None:
    start = DAY_SECONDS * k

    assert bucket_of(start, DAY_SECONDS) == start
    assert bucket_of(start + 1, DAY_SECONDS) == start
    assert bucket_of(start + DAY_SECONDS - 1, DAY_SECONDS) == start
    assert bucket_of(start + DAY_SECONDS, DAY_SECONDS) == start + DAY_SECONDS


def test_fifteen_minute_buckets() -> None:
    assert bucket_of(100, FIFTEEN_MINUTE_SECONDS) == 0
    assert bucket_of(899, FIFTEEN_MINUTE_SECONDS) == 0
    assert bucket_of(900, FIFTEEN_MINUTE_SECONDS) == 900
    assert bucket_of(950, FIFTEEN_MINUTE_SECONDS) == 900


def test_bucket_of_is_monotonic() -> None:
    buckets = [bucket_of(t, FIFTEEN_MINUTE_SECONDS) for t in range(0, 5000, 37)]
    assert buckets == sorted(buckets)


def test_bucket_of_rejects_negative_timestamp_and_bad_width() -> None:
    with pytest.raises(ValueError):
        bucket_of(-1, DAY_SECONDS)
    with pytest.raises(ValueError):
        bucket_of(10, 0)


def test_bucket_key_per_granularity() -> None:
    ts = DAY_SECONDS + 950

    assert bucket_key(Granularity.ALL_TIME, network="mainnet", timestamp=ts) == "mainnet"
    assert bucket_key(Granularity.POST_ARCHERNAR, network="mainnet", timestamp=ts) == "mainnet"
    assert bucket_key(Granularity.DAILY, network="mainnet", timestamp=ts) == "86400"
    assert bucket_key(Granularity.FIFTEEN_MINUTE, network="mainnet", timestamp=ts) == "87300"
