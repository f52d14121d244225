"""Era gating: which events count toward the since-upgrade totals."""

from __future__ import annotations

from dataclasses import dataclass

# Archernar (v2.19.x) upgrade on mainnet, Feb 20 2020.
ARCHERNAR_BLOCK = 9518914


@dataclass(frozen=True, slots=True)
class EraPolicy:
    """Immutable era configuration, built from settings at startup."""

    primary_network: str = "mainnet"
    era_start_block: int = ARCHERNAR_BLOCK

    def includes(self, network: str, block_number: int) -> bool:
        """Return True if an event on network at block_number belongs to the era."""
        return network == self.primary_network and block_number > self.era_start_block
