# -*- coding: utf-8 -*-
"""Abstract interface for latest rate storage (backs the price oracle)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from synth_exchange_indexer.models.latest_rate import LatestRate


class ILatestRateRepository(ABC):
    """Interface for persisting LatestRate (one per currency key)."""

    @abstractmethod
    def get(self, currency_key: str) -> Optional[LatestRate]:
        """Return the latest rate for the currency, or None if never seen."""
        ...

    @abstractmethod
    def save(self, rate: LatestRate) -> None:
        """Upsert the rate (by currency_key). Last write wins."""
        ...
