# -*- coding: utf-8 -*-
"""Unit tests for the dependency injection container wiring."""

from __future__ import annotations

from dependency_injector import providers

from synth_exchange_indexer.DI import Container
from synth_exchange_indexer.config import Settings
from synth_exchange_indexer.consumers import ReplayRunner
from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.services.aggregation import EraPolicy


def _container(**overrides) -> Container:
    container = Container()
    container.config.override(providers.Object(Settings(**overrides)))
    return container


def test_container_builds_runner_with_all_handlers() -> None:
    container = _container()

    runner = container.replay_runner()

    assert isinstance(runner, ReplayRunner)
    assert container.event_processor().kinds == frozenset(
        {"SynthExchange", "ExchangeReclaim", "ExchangeRebate", "ExchangeFeeUpdated", "RatesUpdated"}
    )


def test_repositories_are_singletons() -> None:
    container = _container()

    assert container.aggregate_total_repository() is container.aggregate_total_repository()
    assert container.synth_exchange_repository() is container.synth_exchange_repository()


def test_era_policy_comes_from_settings() -> None:
    container = _container(indexer={"primary_network": "optimism", "era_start_block": 5})

    assert container.era_policy() == EraPolicy(primary_network="optimism", era_start_block=5)


def test_pegged_currencies_come_from_settings() -> None:
    container = _container(indexer={"pegged_currencies": "sUSD,sEUR"})

    rate = container.rate_resolver().latest_rate("sEUR", "0x" + "00" * 32)

    assert rate == 1


def test_totals_tracker_writes_to_container_repository() -> None:
    container = _container()

    container.totals_tracker().track_trade(
        account="0x2d27b6e21b3d4d7c9a43fdf58f12345678907706",
        network="mainnet",
        block_number=1,
        timestamp=0,
        amount_usd=None,
        fees_usd=None,
    )

    assert container.aggregate_total_repository().get(Granularity.ALL_TIME, "mainnet").trades == 1
