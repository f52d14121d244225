# -*- coding: utf-8 -*-
"""Abstract interface for exchange fee storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from synth_exchange_indexer.models.exchange_fee import ExchangeFee


class IExchangeFeeRepository(ABC):
    """Interface for persisting ExchangeFee (one per currency key)."""

    @abstractmethod
    def get(self, currency_key: str) -> Optional[ExchangeFee]:
        """Return the fee for the currency, or None if never set."""
        ...

    @abstractmethod
    def save(self, fee: ExchangeFee) -> None:
        """Upsert the fee (by currency_key). Last write wins."""
        ...

    @abstractmethod
    def list_all(self) -> list[ExchangeFee]:
        """Return all fees."""
        ...
