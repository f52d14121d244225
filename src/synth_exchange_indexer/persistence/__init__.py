"""Persistence layer (repositories, etc.)."""

from synth_exchange_indexer.persistence.repositories import (
    IAggregateTotalRepository,
    IExchangeFeeRepository,
    IExchangeSettlementRepository,
    ILatestRateRepository,
    ISynthExchangeRepository,
    ITraderSeenRepository,
    InMemoryAggregateTotalRepository,
    InMemoryExchangeFeeRepository,
    InMemoryExchangeSettlementRepository,
    InMemoryLatestRateRepository,
    InMemorySynthExchangeRepository,
    InMemoryTraderSeenRepository,
)

__all__ = [
    "IAggregateTotalRepository",
    "IExchangeFeeRepository",
    "IExchangeSettlementRepository",
    "ILatestRateRepository",
    "ISynthExchangeRepository",
    "ITraderSeenRepository",
    "InMemoryAggregateTotalRepository",
    "InMemoryExchangeFeeRepository",
    "InMemoryExchangeSettlementRepository",
    "InMemoryLatestRateRepository",
    "InMemorySynthExchangeRepository",
    "InMemoryTraderSeenRepository",
]
