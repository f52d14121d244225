"""Rate resolver: latest known USD rate of a currency, as seen by a transaction.

Rates come from RatesUpdated events processed earlier in chain order, so the
stored value is the point-in-time price for any later transaction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any

import structlog

from synth_exchange_indexer.exceptions import PriceUnavailableError
from synth_exchange_indexer.models.latest_rate import LatestRate
from synth_exchange_indexer.persistence.repositories.interfaces.latest_rate_repository import (
    ILatestRateRepository,
)

USD_PEG = Decimal("1")


class RateResolver:
    """Answers latest-rate queries; pegged currencies (e.g. sUSD) always resolve to 1."""

    def __init__(
        self,
        latest_rate_repository: ILatestRateRepository,
        *,
        pegged_currencies: Iterable[str] = ("sUSD",),
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            latest_rate_repository: Rate storage (injected).
            pegged_currencies: Currency keys valued at exactly 1 USD.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._repo = latest_rate_repository
        self._pegged = frozenset(c.strip() for c in pegged_currencies)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def latest_rate(self, currency_key: str, tx_hash: str) -> Decimal | None:
        """Return the latest rate of currency_key as of tx_hash, or None if unknown."""
        if currency_key in self._pegged:
            return USD_PEG
        latest = self._repo.get(currency_key)
        if latest is None:
            self._logger.warning(
                "latest_rate_missing",
                currency_key=currency_key,
                tx_hash=tx_hash,
            )
            return None
        return latest.rate

    def require_rate(self, currency_key: str, tx_hash: str) -> Decimal:
        """Like latest_rate(), but raise PriceUnavailableError when unknown."""
        rate = self.latest_rate(currency_key, tx_hash)
        if rate is None:
            raise PriceUnavailableError(currency_key, tx_hash=tx_hash)
        return rate

    def record_rate(
        self,
        currency_key: str,
        rate: Decimal,
        *,
        block_number: int,
        timestamp: int,
    ) -> LatestRate:
        """Store rate as the latest for currency_key (last write wins)."""
        latest = LatestRate(
            currency_key=currency_key.strip(),
            rate=rate,
            block_number=block_number,
            timestamp=timestamp,
        )
        self._repo.save(latest)
        self._logger.debug(
            "latest_rate_recorded",
            currency_key=latest.currency_key,
            rate=str(rate),
            block_number=block_number,
        )
        return latest
