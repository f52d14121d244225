"""LatestRate: last known USD price of a currency, fed by rate updates."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class LatestRate:
    """USD rate for currency_key as of the rate update at block_number."""

    currency_key: str
    rate: Decimal
    block_number: int
    timestamp: int
