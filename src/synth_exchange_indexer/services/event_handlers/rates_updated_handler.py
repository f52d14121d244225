"""RatesUpdated handler: feeds oracle prices into the rate resolver."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from synth_exchange_indexer.models.events import RatesUpdatedEvent
from synth_exchange_indexer.services.event_handlers.base import (
    HandlerResult,
    HandlerStatus,
    IEventHandler,
)
from synth_exchange_indexer.services.pricing.rate_resolver import RateResolver
from synth_exchange_indexer.utils.units import to_decimal


class RatesUpdatedHandler(IEventHandler[RatesUpdatedEvent]):
    """Records each (currency, rate) pair as the latest rate."""

    def __init__(
        self,
        rate_resolver: RateResolver,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._rates = rate_resolver
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def handle(self, event: RatesUpdatedEvent) -> HandlerResult:
        for currency_key, raw_rate in zip(event.currency_keys, event.new_rates, strict=True):
            self._rates.record_rate(
                currency_key,
                to_decimal(raw_rate),
                block_number=event.meta.block_number,
                timestamp=event.meta.block_timestamp,
            )
        self._logger.debug(
            "rates_updated",
            currency_keys=list(event.currency_keys),
            block_number=event.meta.block_number,
        )
        return HandlerResult(event_kind=event.kind, status=HandlerStatus.INDEXED)
