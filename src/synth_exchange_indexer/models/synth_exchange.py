"""SynthExchange: immutable record of one exchange, valued in USD at exchange time."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class SynthExchange:
    """One exchange event. Identity: {txHash}-{logIndex}; written once."""

    id: str
    account: str
    """Account parameter of the event (owner of the exchanged synths)."""
    from_address: str
    """Transaction sender; the account counted as the trader."""
    from_currency_key: str
    from_amount: Decimal
    from_amount_usd: Decimal
    to_currency_key: str
    to_amount: Decimal
    to_amount_usd: Decimal
    to_address: str
    fees_usd: Decimal
    """from_amount_usd - to_amount_usd: the spread consumed as the exchange fee."""
    timestamp: int
    block_number: int
    gas_price: int
    network: str
