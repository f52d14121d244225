"""ExchangeFeeUpdated handler: overwrites the fee fraction of a synth."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from synth_exchange_indexer.models.events import ExchangeFeeUpdatedEvent
from synth_exchange_indexer.models.exchange_fee import ExchangeFee
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_fee_repository import (
    IExchangeFeeRepository,
)
from synth_exchange_indexer.services.event_handlers.base import (
    HandlerResult,
    HandlerStatus,
    IEventHandler,
)
from synth_exchange_indexer.utils.units import to_decimal


class FeeChangeHandler(IEventHandler[ExchangeFeeUpdatedEvent]):
    """Last value wins; no history is retained."""

    def __init__(
        self,
        exchange_fee_repository: IExchangeFeeRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._repo = exchange_fee_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def handle(self, event: ExchangeFeeUpdatedEvent) -> HandlerResult:
        fee = ExchangeFee(
            currency_key=event.synth_key,
            fee=to_decimal(event.new_exchange_fee_rate),
        )
        self._repo.save(fee)
        self._logger.info(
            "exchange_fee_updated",
            currency_key=fee.currency_key,
            fee=str(fee.fee),
            block_number=event.meta.block_number,
        )
        return HandlerResult(
            event_kind=event.kind,
            status=HandlerStatus.INDEXED,
            record_id=fee.currency_key,
        )
