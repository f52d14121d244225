"""TraderSeen: membership of an account in a bucket.

Existence of the record is the membership; it carries no other data.
"""

from __future__ import annotations

from dataclasses import dataclass

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.utils.keys import trader_seen_key


@dataclass(frozen=True, slots=True)
class TraderSeen:
    """Record that an account has traded in (granularity, bucket_key)."""

    granularity: Granularity
    bucket_key: str
    account: str

    @property
    def key(self) -> str:
        """Storage key within the granularity: {bucketKey}-{account}."""
        return trader_seen_key(self.bucket_key, self.account)

    @classmethod
    def create(cls, granularity: Granularity, bucket_key: str, account: str) -> TraderSeen:
        """Create a new membership record."""
        bucket_key = bucket_key.strip()
        account = account.strip()
        if not bucket_key or not account:
            raise ValueError("bucket_key and account must be non-empty")
        return cls(granularity=granularity, bucket_key=bucket_key, account=account)
