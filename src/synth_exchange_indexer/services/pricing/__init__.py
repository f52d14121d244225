"""Pricing services."""

from synth_exchange_indexer.services.pricing.rate_resolver import USD_PEG, RateResolver

__all__ = ["RateResolver", "USD_PEG"]
