# -*- coding: utf-8 -*-
"""Utility modules."""

from synth_exchange_indexer.utils.keys import event_record_id, trader_seen_key
from synth_exchange_indexer.utils.units import (
    DECIMAL_CONTEXT,
    ETHER_UNITS,
    to_decimal,
    usd_amount,
)
from synth_exchange_indexer.utils.validation import (
    is_hex_address,
    is_tx_hash,
    mask_address,
)

__all__ = [
    "DECIMAL_CONTEXT",
    "ETHER_UNITS",
    "event_record_id",
    "is_hex_address",
    "is_tx_hash",
    "mask_address",
    "to_decimal",
    "trader_seen_key",
    "usd_amount",
]
