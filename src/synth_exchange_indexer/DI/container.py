# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from synth_exchange_indexer.config import Settings, get_settings
from synth_exchange_indexer.consumers.replay_runner import ReplayRunner
from synth_exchange_indexer.models.events import (
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
    IEventHandler,
    RatesUpdatedHandler,
    SynthExchangeHandler,
)
from synth_exchange_indexer.services.event_processing import EventProcessorService
from synth_exchange_indexer.services.pricing import RateResolver


def _build_era_policy(settings: Settings) -> EraPolicy:
    return settings.indexer.era_policy()


def _build_pegged_currencies(settings: Settings) -> list[str]:
    return settings.indexer.pegged_currencies


def _build_handlers(
    synth_exchange: SynthExchangeHandler,
    reclaim: ExchangeSettlementHandler,
    rebate: ExchangeSettlementHandler,
    fee_change: FeeChangeHandler,
    rates_updated: RatesUpdatedHandler,
) -> dict[str, IEventHandler]:
    return {
        SynthExchangeEvent.kind: synth_exchange,
        ExchangeReclaimEvent.kind: reclaim,
        ExchangeRebateEvent.kind: rebate,
        ExchangeFeeUpdatedEvent.kind: fee_change,
        RatesUpdatedEvent.kind: rates_updated,
    }


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, repositories, aggregation services, handlers and runner."""

    config = providers.Callable(get_settings)

    era_policy = providers.Singleton(_build_era_policy, config)

    synth_exchange_repository = providers.Singleton(InMemorySynthExchangeRepository)

    exchange_settlement_repository = providers.Singleton(InMemoryExchangeSettlementRepository)

    exchange_fee_repository = providers.Singleton(InMemoryExchangeFeeRepository)

    aggregate_total_repository = providers.Singleton(InMemoryAggregateTotalRepository)

    trader_seen_repository = providers.Singleton(InMemoryTraderSeenRepository)

    latest_rate_repository = providers.Singleton(InMemoryLatestRateRepository)

    rate_resolver = providers.Singleton(
        RateResolver,
        latest_rate_repository=latest_rate_repository,
        pegged_currencies=providers.Callable(_build_pegged_currencies, config),
    )

    uniqueness_tracker = providers.Singleton(
        UniquenessTracker,
        trader_seen_repository=trader_seen_repository,
    )

    aggregate_engine = providers.Singleton(
        AggregateUpsertEngine,
        aggregate_total_repository=aggregate_total_repository,
    )

    totals_tracker = providers.Singleton(
        TotalsTracker,
        uniqueness_tracker=uniqueness_tracker,
        aggregate_engine=aggregate_engine,
        era_policy=era_policy,
    )

    synth_exchange_handler = providers.Singleton(
        SynthExchangeHandler,
        rate_resolver=rate_resolver,
        synth_exchange_repository=synth_exchange_repository,
        totals_tracker=totals_tracker,
    )

    exchange_reclaim_handler = providers.Singleton(
        ExchangeSettlementHandler,
        kind=SettlementKind.RECLAIM,
        rate_resolver=rate_resolver,
        settlement_repository=exchange_settlement_repository,
    )

    exchange_rebate_handler = providers.Singleton(
        ExchangeSettlementHandler,
        kind=SettlementKind.REBATE,
        rate_resolver=rate_resolver,
        settlement_repository=exchange_settlement_repository,
    )

    fee_change_handler = providers.Singleton(
        FeeChangeHandler,
        exchange_fee_repository=exchange_fee_repository,
    )

    rates_updated_handler = providers.Singleton(
        RatesUpdatedHandler,
        rate_resolver=rate_resolver,
    )

    event_processor = providers.Singleton(
        EventProcessorService,
        handlers=providers.Callable(
            _build_handlers,
            synth_exchange_handler,
            exchange_reclaim_handler,
            exchange_rebate_handler,
            fee_change_handler,
            rates_updated_handler,
        ),
    )

    replay_runner = providers.Singleton(
        ReplayRunner,
        event_processor=event_processor,
    )
