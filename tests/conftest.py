# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from decimal import Decimal
from types import SimpleNamespace
from typing import Any

import pytest

from synth_exchange_indexer.consumers.replay_runner import ReplayRunner
from synth_exchange_indexer.models.events import (
    EventMeta,
    ExchangeFeeUpdatedEvent,
    ExchangeRebateEvent,
    ExchangeReclaimEvent,
    RatesUpdatedEvent,
    SynthExchangeEvent,
)
from synth_exchange_indexer.models.exchange_settlement import SettlementKind
from synth_exchange_indexer.persistence.repositories.in_memory import (
    InMemoryAggregateTotalRepository,
    InMemoryExchangeFeeRepository,
    InMemoryExchangeSettlementRepository,
    InMemoryLatestRateRepository,
    InMemorySynthExchangeRepository,
    InMemoryTraderSeenRepository,
)
from synth_exchange_indexer.services.aggregation import (
    AggregateUpsertEngine,
    EraPolicy,
    TotalsTracker,
    UniquenessTracker,
)
from synth_exchange_indexer.services.event_handlers import (
    ExchangeSettlementHandler,
    FeeChangeHandler,
    RatesUpdatedHandler,
    SynthExchangeHandler,
)
from synth_exchange_indexer.services.event_processing import EventProcessorService
from synth_exchange_indexer.services.pricing import RateResolver

UNIT = 10**18
"""One whole token in raw fixed-point units."""

ERA_BLOCK = 9518914


@pytest.fixture
def account() -> str:
    """Default trader (transaction sender) used by tests."""
    return "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"


@pytest.fixture
def other_account() -> str:
    return "0x8ba1f109551bd432803012645ac136ddd64dba72"


@pytest.fixture
def D() -> Callable[[Any], Decimal]:
    """Decimal helper: D('1.23') -> Decimal('1.23')."""
    return lambda value: Decimal(str(value))


@pytest.fixture
def meta_factory(account: str) -> Callable[..., EventMeta]:
    """Build EventMeta with a fresh tx hash per call and easy overrides."""
    counter = itertools.count(1)

    def _build(**overrides: Any) -> EventMeta:
        n = next(counter)
        return EventMeta(
            tx_hash=overrides.pop("tx_hash", f"0x{n:064x}"),
            log_index=overrides.pop("log_index", 0),
            block_number=overrides.pop("block_number", ERA_BLOCK + n),
            block_timestamp=overrides.pop("block_timestamp", 100),
            tx_from=overrides.pop("tx_from", account),
            gas_price=overrides.pop("gas_price", 20_000_000_000),
            network=overrides.pop("network", "mainnet"),
        )

    return _build


@pytest.fixture
def synth_exchange_factory(
    account: str,
    meta_factory: Callable[..., EventMeta],
) -> Callable[..., SynthExchangeEvent]:
    """Build SynthExchangeEvent; sUSD -> sUSD at 100 -> 99 units by default."""

    def _build(**overrides: Any) -> SynthExchangeEvent:
        meta = overrides.pop("meta", None) or meta_factory(**overrides.pop("meta_overrides", {}))
        return SynthExchangeEvent(
            meta=meta,
            account=overrides.pop("account", account),
            from_currency_key=overrides.pop("from_currency_key", "sUSD"),
            from_amount=overrides.pop("from_amount", 100 * UNIT),
            to_currency_key=overrides.pop("to_currency_key", "sUSD"),
            to_amount=overrides.pop("to_amount", 99 * UNIT),
            to_address=overrides.pop("to_address", account),
        )

    return _build


@pytest.fixture
def settlement_factory(
    account: str,
    meta_factory: Callable[..., EventMeta],
) -> Callable[..., ExchangeReclaimEvent | ExchangeRebateEvent]:
    """Build ExchangeReclaimEvent (default) or ExchangeRebateEvent (kind=REBATE)."""

    def _build(**overrides: Any) -> ExchangeReclaimEvent | ExchangeRebateEvent:
        kind = overrides.pop("kind", SettlementKind.RECLAIM)
        event_type = ExchangeReclaimEvent if kind == SettlementKind.RECLAIM else ExchangeRebateEvent
        return event_type(
            meta=overrides.pop("meta", None) or meta_factory(**overrides.pop("meta_overrides", {})),
            account=overrides.pop("account", account),
            currency_key=overrides.pop("currency_key", "sETH"),
            amount=overrides.pop("amount", 2 * UNIT),
        )

    return _build


@pytest.fixture
def fee_updated_factory(meta_factory: Callable[..., EventMeta]) -> Callable[..., ExchangeFeeUpdatedEvent]:
    def _build(**overrides: Any) -> ExchangeFeeUpdatedEvent:
        return ExchangeFeeUpdatedEvent(
            meta=overrides.pop("meta", None) or meta_factory(),
            synth_key=overrides.pop("synth_key", "sETH"),
            new_exchange_fee_rate=overrides.pop("new_exchange_fee_rate", 3 * 10**15),
        )

    return _build


@pytest.fixture
def rates_updated_factory(meta_factory: Callable[..., EventMeta]) -> Callable[..., RatesUpdatedEvent]:
    """Build RatesUpdatedEvent from a {currency: raw_rate} mapping."""

    def _build(rates: dict[str, int], **overrides: Any) -> RatesUpdatedEvent:
        return RatesUpdatedEvent(
            meta=overrides.pop("meta", None) or meta_factory(**overrides.pop("meta_overrides", {})),
            currency_keys=tuple(rates),
            new_rates=tuple(rates.values()),
        )

    return _build


@pytest.fixture
def latest_rate_repo() -> InMemoryLatestRateRepository:
    """Fresh in-memory rate repository per test."""
    return InMemoryLatestRateRepository()


@pytest.fixture
def aggregate_total_repo() -> InMemoryAggregateTotalRepository:
    """Fresh in-memory totals repository per test."""
    return InMemoryAggregateTotalRepository()


@pytest.fixture
def trader_seen_repo() -> InMemoryTraderSeenRepository:
    """Fresh in-memory membership repository per test."""
    return InMemoryTraderSeenRepository()


@pytest.fixture
def rate_resolver(latest_rate_repo: InMemoryLatestRateRepository) -> RateResolver:
    return RateResolver(latest_rate_repo)


def build_indexer(era_policy: EraPolicy | None = None) -> SimpleNamespace:
    """Wire a complete indexer over fresh in-memory repositories."""
    ns = SimpleNamespace(
        latest_rates=InMemoryLatestRateRepository(),
        exchanges=InMemorySynthExchangeRepository(),
        settlements=InMemoryExchangeSettlementRepository(),
        fees=InMemoryExchangeFeeRepository(),
        totals=InMemoryAggregateTotalRepository(),
        seen=InMemoryTraderSeenRepository(),
    )
    ns.rate_resolver = RateResolver(ns.latest_rates)
    ns.totals_tracker = TotalsTracker(
        UniquenessTracker(ns.seen),
        AggregateUpsertEngine(ns.totals),
        era_policy or EraPolicy(),
    )
    ns.processor = EventProcessorService(
        {
            SynthExchangeEvent.kind: SynthExchangeHandler(ns.rate_resolver, ns.exchanges, ns.totals_tracker),
            ExchangeReclaimEvent.kind: ExchangeSettlementHandler(
                SettlementKind.RECLAIM, ns.rate_resolver, ns.settlements
            ),
            ExchangeRebateEvent.kind: ExchangeSettlementHandler(
                SettlementKind.REBATE, ns.rate_resolver, ns.settlements
            ),
            ExchangeFeeUpdatedEvent.kind: FeeChangeHandler(ns.fees),
            RatesUpdatedEvent.kind: RatesUpdatedHandler(ns.rate_resolver),
        }
    )
    ns.runner = ReplayRunner(ns.processor)
    return ns


@pytest.fixture
def indexer() -> SimpleNamespace:
    """Complete indexer over fresh in-memory repositories."""
    return build_indexer()


@pytest.fixture
def indexer_factory() -> Callable[..., SimpleNamespace]:
    """Factory for independent indexers (e.g. two fresh stores in one test)."""
    return build_indexer
