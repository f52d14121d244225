"""ExchangeFee: current exchange fee rate of a synth."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class ExchangeFee:
    """Fee fraction per currency key. Last update wins; no history kept."""

    currency_key: str
    fee: Decimal
