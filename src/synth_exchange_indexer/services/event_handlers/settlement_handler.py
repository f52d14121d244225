"""Reclaim/rebate handler: records the settlement, valued in USD when a rate is known."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from synth_exchange_indexer.models.events import SettlementEvent
from synth_exchange_indexer.models.exchange_settlement import (
    ExchangeSettlement,
    SettlementKind,
)
from synth_exchange_indexer.persistence.repositories.interfaces.exchange_settlement_repository import (
    IExchangeSettlementRepository,
)
from synth_exchange_indexer.services.event_handlers.base import (
    HandlerResult,
    HandlerStatus,
    IEventHandler,
)
from synth_exchange_indexer.services.pricing.rate_resolver import RateResolver
from synth_exchange_indexer.utils.units import to_decimal, usd_amount


class ExchangeSettlementHandler(IEventHandler[SettlementEvent]):
    """Handles ExchangeReclaim or ExchangeRebate (one instance per kind).

    A missing rate does not drop the record: it is written with amount_usd=None.
    Aggregate totals are never touched.
    """

    def __init__(
        self,
        kind: SettlementKind,
        rate_resolver: RateResolver,
        settlement_repository: IExchangeSettlementRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._kind = kind
        self._rates = rate_resolver
        self._repo = settlement_repository
        self._logger = get_logger(logger_name or f"{self.__class__.__name__}.{kind.value}")

    def handle(self, event: SettlementEvent) -> HandlerResult:
        meta = event.meta
        rate = self._rates.latest_rate(event.currency_key, meta.tx_hash)
        amount_usd = usd_amount(event.amount, rate) if rate is not None else None

        record = ExchangeSettlement(
            id=meta.record_id,
            kind=self._kind,
            account=event.account,
            amount=to_decimal(event.amount),
            currency_key=event.currency_key,
            timestamp=meta.block_timestamp,
            block_number=meta.block_number,
            gas_price=meta.gas_price,
            amount_usd=amount_usd,
        )
        self._repo.add(record)

        if amount_usd is None:
            self._logger.error(
                "exchange_settlement_price_unavailable",
                kind=self._kind.value,
                tx_hash=meta.tx_hash,
                currency_key=event.currency_key,
                record_id=record.id,
            )
            status = HandlerStatus.INDEXED_WITHOUT_PRICE
        else:
            self._logger.info(
                "exchange_settlement_indexed",
                kind=self._kind.value,
                record_id=record.id,
                currency_key=event.currency_key,
                amount_usd=str(amount_usd),
            )
            status = HandlerStatus.INDEXED
        return HandlerResult(event_kind=event.kind, status=status, record_id=record.id)
