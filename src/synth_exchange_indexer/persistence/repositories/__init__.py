# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from synth_exchange_indexer.persistence.repositories.interfaces import (
    IAggregateTotalRepository,
    IExchangeFeeRepository,
    IExchangeSettlementRepository,
    ILatestRateRepository,
    ISynthExchangeRepository,
    ITraderSeenRepository,
)
from synth_exchange_indexer.persistence.repositories.in_memory import (
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
