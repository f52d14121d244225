"""Event handlers, one per event kind."""

from synth_exchange_indexer.services.event_handlers.base import (
    HandlerResult,
    HandlerStatus,
    IEventHandler,
)
from synth_exchange_indexer.services.event_handlers.fee_change_handler import FeeChangeHandler
from synth_exchange_indexer.services.event_handlers.rates_updated_handler import (
    RatesUpdatedHandler,
)
from synth_exchange_indexer.services.event_handlers.settlement_handler import (
    ExchangeSettlementHandler,
)
from synth_exchange_indexer.services.event_handlers.synth_exchange_handler import (
    SynthExchangeHandler,
)

__all__ = [
    "ExchangeSettlementHandler",
    "FeeChangeHandler",
    "HandlerResult",
    "HandlerStatus",
    "IEventHandler",
    "RatesUpdatedHandler",
    "SynthExchangeHandler",
]
