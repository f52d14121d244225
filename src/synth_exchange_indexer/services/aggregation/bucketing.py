"""Time buckets: map a block timestamp to the start of its window."""

from __future__ import annotations

from synth_exchange_indexer.models.granularity import Granularity

DAY_SECONDS = 86400
FIFTEEN_MINUTE_SECONDS = 900


def bucket_of(timestamp: int, width: int) -> int:
    """Return floor(timestamp / width) * width.

    Pure and monotonic in timestamp for a fixed width. Chain time is never
    negative, so a negative timestamp is a decoding fault, not a bucket.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if timestamp < 0:
        raise ValueError(f"timestamp must be non-negative, got {timestamp}")
    return (timestamp // width) * width


def bucket_key(granularity: Granularity, *, network: str, timestamp: int) -> str:
    """Return the AggregateTotal key of the bucket for (granularity, event).

    All-time granularities are keyed by network tag; time granularities by the
    stringified bucket start.
    """
    if granularity in (Granularity.ALL_TIME, Granularity.POST_ARCHERNAR):
        return network
    if granularity == Granularity.DAILY:
        return str(bucket_of(timestamp, DAY_SECONDS))
    if granularity == Granularity.FIFTEEN_MINUTE:
        return str(bucket_of(timestamp, FIFTEEN_MINUTE_SECONDS))
    raise ValueError(f"Unknown granularity: {granularity!r}")
