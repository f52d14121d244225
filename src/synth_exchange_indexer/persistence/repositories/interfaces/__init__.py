# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/."""

from synth_exchange_indexer.persistence.repositories.interfaces.aggregate_total_repository import (
    IAggregateTotalRepository,
)
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_fee_repository import (
    IExchangeFeeRepository,
)
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_settlement_repository import (
    IExchangeSettlementRepository,
)
from synth_exchange_indexer.persistence.repositories.interfaces.latest_rate_repository import (
    ILatestRateRepository,
)
from synth_exchange_indexer.persistence.repositories.interfaces.synth_exchange_repository import (
    ISynthExchangeRepository,
)
from synth_exchange_indexer.persistence.repositories.interfaces.trader_seen_repository import (
    ITraderSeenRepository,
)

__all__ = [
    "IAggregateTotalRepository",
    "IExchangeFeeRepository",
    "IExchangeSettlementRepository",
    "ILatestRateRepository",
    "ISynthExchangeRepository",
    "ITraderSeenRepository",
]
