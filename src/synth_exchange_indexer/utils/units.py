"""Fixed-point unit conversion: on-chain integers to Decimal, asset amounts to USD.

All arithmetic runs in DECIMAL_CONTEXT. Its precision covers a full uint256
(78 digits), so the 18 fractional digits of an on-chain amount are never rounded.
"""

from __future__ import annotations

from decimal import Context, Decimal

DECIMAL_CONTEXT = Context(prec=78)

ETHER_DECIMALS = 18
ETHER_UNITS = Decimal(10) ** ETHER_DECIMALS


def to_decimal(raw: int, decimals: int = ETHER_DECIMALS) -> Decimal:
    """Convert an on-chain fixed-point integer into a Decimal (e.g. wei -> ether)."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"raw amount must be an int, got {type(raw).__name__}")
    return DECIMAL_CONTEXT.divide(Decimal(raw), Decimal(10) ** decimals)


def usd_amount(raw_amount: int, price: Decimal, decimals: int = ETHER_DECIMALS) -> Decimal:
    """Return raw_amount (fixed-point) valued at price, in USD."""
    return DECIMAL_CONTEXT.multiply(to_decimal(raw_amount, decimals), price)
