# -*- coding: utf-8 -*-
"""Domain models."""

from synth_exchange_indexer.models.aggregate_total import AggregateTotal
from synth_exchange_indexer.models.events import (
    ChainPosition,
    DecodedEvent,
    EventMeta,
    ExchangeFeeUpdatedEvent,
    ExchangeRebateEvent,
    ExchangeReclaimEvent,
    RatesUpdatedEvent,
    SettlementEvent,
    SynthExchangeEvent,
    decode_event,
)
from synth_exchange_indexer.models.exchange_fee import ExchangeFee
from synth_exchange_indexer.models.exchange_settlement import (
    ExchangeSettlement,
    SettlementKind,
)
from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.models.latest_rate import LatestRate
from synth_exchange_indexer.models.synth_exchange import SynthExchange
from synth_exchange_indexer.models.trader_seen import TraderSeen

__all__ = [
    "AggregateTotal",
    "ChainPosition",
    "DecodedEvent",
    "EventMeta",
    "ExchangeFee",
    "ExchangeFeeUpdatedEvent",
    "ExchangeRebateEvent",
    "ExchangeReclaimEvent",
    "ExchangeSettlement",
    "Granularity",
    "LatestRate",
    "RatesUpdatedEvent",
    "SettlementEvent",
    "SettlementKind",
    "SynthExchange",
    "SynthExchangeEvent",
    "TraderSeen",
    "decode_event",
]
