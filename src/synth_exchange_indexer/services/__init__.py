"""Services: pricing, aggregation, event handlers and dispatch."""

from synth_exchange_indexer.services.aggregation import (
    AggregateUpsertEngine,
    EraPolicy,
    TotalsTracker,
    UniquenessTracker,
)
from synth_exchange_indexer.services.event_handlers import (
    ExchangeSettlementHandler,
    FeeChangeHandler,
    RatesUpdatedHandler,
    SynthExchangeHandler,
)
from synth_exchange_indexer.services.event_processing import EventProcessorService
from synth_exchange_indexer.services.pricing import RateResolver

__all__ = [
    "AggregateUpsertEngine",
    "EraPolicy",
    "EventProcessorService",
    "ExchangeSettlementHandler",
    "FeeChangeHandler",
    "RateResolver",
    "RatesUpdatedHandler",
    "SynthExchangeHandler",
    "TotalsTracker",
    "UniquenessTracker",
]
