"""Deterministic storage keys for indexed entities."""

from __future__ import annotations


def event_record_id(tx_hash: str, log_index: int) -> str:
    """Return the key for a per-event record: {txHash}-{logIndex}.

    Unique per chain, so records written under it are append-once.
    """
    tx_hash = tx_hash.strip()
    if not tx_hash:
        raise ValueError("tx_hash must be non-empty")
    if log_index < 0:
        raise ValueError("log_index must be non-negative")
    return f"{tx_hash}-{log_index}"


def trader_seen_key(bucket_key: str, account: str) -> str:
    """Return the membership key for (bucket, account): {bucketKey}-{account}."""
    return f"{bucket_key.strip()}-{account.strip()}"
