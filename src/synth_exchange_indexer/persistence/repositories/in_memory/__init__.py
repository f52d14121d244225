"""In-memory repository implementations."""

from synth_exchange_indexer.persistence.repositories.in_memory.aggregate_total_repository import (
    InMemoryAggregateTotalRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory.exchange_fee_repository import (
    InMemoryExchangeFeeRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory.exchange_settlement_repository import (
    InMemoryExchangeSettlementRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory.latest_rate_repository import (
    InMemoryLatestRateRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory.synth_exchange_repository import (
    InMemorySynthExchangeRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory.trader_seen_repository import (
    InMemoryTraderSeenRepository,
)

__all__ = [
    "InMemoryAggregateTotalRepository",
    "InMemoryExchangeFeeRepository",
    "InMemoryExchangeSettlementRepository",
    "InMemoryLatestRateRepository",
    "InMemorySynthExchangeRepository",
    "InMemoryTraderSeenRepository",
]
