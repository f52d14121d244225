"""Validation helpers for addresses and transaction hashes."""

from __future__ import annotations

from typing import Any


def _is_hex(s: str, length: int) -> bool:
    if len(s) != length or not s.startswith("0x"):
        return False
    try:
        int(s[2:], 16)
        return True
    except ValueError:
        return False


def is_hex_address(addr: Any) -> bool:
    """Return True if addr is a valid 0x account address (42 chars)."""
    if not isinstance(addr, str):
        return False
    return _is_hex(addr.strip(), 42)


def is_tx_hash(x: Any) -> bool:
    """Return True if x is a valid transaction hash (0x + 64 hex chars = 66 chars)."""
    if not isinstance(x, str):
        return False
    return _is_hex(x.strip(), 66)


def mask_address(addr: str | None) -> str:
    """Return a masked account address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
