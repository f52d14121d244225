"""ExchangeSettlement: reclaim or rebate applied after an exchange settles."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class SettlementKind(str, Enum):
    """Direction of the settlement adjustment."""

    RECLAIM = "RECLAIM"
    REBATE = "REBATE"


@dataclass(frozen=True, slots=True)
class ExchangeSettlement:
    """One reclaim or rebate. Identity: (kind, {txHash}-{logIndex}); written once."""

    id: str
    kind: SettlementKind
    account: str
    amount: Decimal
    currency_key: str
    timestamp: int
    block_number: int
    gas_price: int
    amount_usd: Optional[Decimal] = None
    """None when no rate was known for currency_key at the time of the event."""
