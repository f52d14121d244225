"""SynthExchange handler: values the exchange in USD, records it and updates totals."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from synth_exchange_indexer.models.events import SynthExchangeEvent
from synth_exchange_indexer.models.synth_exchange import SynthExchange
from synth_exchange_indexer.persistence.repositories.interfaces.synth_exchange_repository import (
    ISynthExchangeRepository,
)
from synth_exchange_indexer.services.aggregation.totals_tracker import TotalsTracker
from synth_exchange_indexer.services.event_handlers.base import (
    HandlerResult,
    HandlerStatus,
    IEventHandler,
)
from synth_exchange_indexer.services.pricing.rate_resolver import RateResolver
from synth_exchange_indexer.utils.units import DECIMAL_CONTEXT, to_decimal, usd_amount
from synth_exchange_indexer.utils.validation import mask_address


class SynthExchangeHandler(IEventHandler[SynthExchangeEvent]):
    """Handles SynthExchange events.

    If either side's rate is unknown the whole event is dropped: no record and no
    totals. Reclaims and rebates behave differently (see ExchangeSettlementHandler).
    """

    def __init__(
        self,
        rate_resolver: RateResolver,
        synth_exchange_repository: ISynthExchangeRepository,
        totals_tracker: TotalsTracker,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            rate_resolver: Price oracle boundary (injected).
            synth_exchange_repository: Exchange record storage (injected).
            totals_tracker: Fan-out to aggregate totals (injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._rates = rate_resolver
        self._exchanges = synth_exchange_repository
        self._totals = totals_tracker
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def handle(self, event: SynthExchangeEvent) -> HandlerResult:
        meta = event.meta
        from_rate = self._rates.latest_rate(event.from_currency_key, meta.tx_hash)
        to_rate = self._rates.latest_rate(event.to_currency_key, meta.tx_hash)

        if from_rate is None or to_rate is None:
            self._logger.error(
                "synth_exchange_price_unavailable",
                tx_hash=meta.tx_hash,
                log_index=meta.log_index,
                from_currency_key=event.from_currency_key,
                to_currency_key=event.to_currency_key,
                from_rate_missing=from_rate is None,
                to_rate_missing=to_rate is None,
            )
            return HandlerResult(
                event_kind=event.kind,
                status=HandlerStatus.SKIPPED_PRICE_UNAVAILABLE,
                record_id=meta.record_id,
            )

        from_amount_usd = usd_amount(event.from_amount, from_rate)
        to_amount_usd = usd_amount(event.to_amount, to_rate)
        fees_usd = DECIMAL_CONTEXT.subtract(from_amount_usd, to_amount_usd)

        record = SynthExchange(
            id=meta.record_id,
            account=event.account,
            from_address=meta.tx_from,
            from_currency_key=event.from_currency_key,
            from_amount=to_decimal(event.from_amount),
            from_amount_usd=from_amount_usd,
            to_currency_key=event.to_currency_key,
            to_amount=to_decimal(event.to_amount),
            to_amount_usd=to_amount_usd,
            to_address=event.to_address,
            fees_usd=fees_usd,
            timestamp=meta.block_timestamp,
            block_number=meta.block_number,
            gas_price=meta.gas_price,
            network=meta.network,
        )
        self._exchanges.add(record)

        totals = self._totals.track_trade(
            account=meta.tx_from,
            network=meta.network,
            block_number=meta.block_number,
            timestamp=meta.block_timestamp,
            amount_usd=from_amount_usd,
            fees_usd=fees_usd,
        )

        self._logger.info(
            "synth_exchange_indexed",
            record_id=record.id,
            account_masked=mask_address(meta.tx_from),
            from_currency_key=record.from_currency_key,
            to_currency_key=record.to_currency_key,
            from_amount_usd=str(from_amount_usd),
            fees_usd=str(fees_usd),
            block_number=meta.block_number,
            totals_updated=len(totals),
        )
        return HandlerResult(
            event_kind=event.kind,
            status=HandlerStatus.INDEXED,
            record_id=record.id,
            totals_updated=len(totals),
        )
