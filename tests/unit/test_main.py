# -*- coding: utf-8 -*-
"""Unit tests for the replay entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from dependency_injector import providers

from synth_exchange_indexer import main as main_module
from synth_exchange_indexer.DI import Container
from synth_exchange_indexer.config import Settings
from synth_exchange_indexer.exceptions import MissingRequiredConfigError
from synth_exchange_indexer.models.granularity import Granularity

ACCOUNT = "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings without an event log; logging setup is stubbed out."""
    value = Settings(replay={"event_log_path": None})
    monkeypatch.setattr(main_module, "get_settings", lambda: value)
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)
    return value


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    return container


def test_run_without_event_log_path_raises(settings: Settings) -> None:
    with pytest.raises(MissingRequiredConfigError):
        main_module.run(container=_container(settings))


def test_run_replays_event_log(settings: Settings, tmp_path: Path) -> None:
    record = {
        "kind": "SynthExchange",
        "transactionHash": "0x" + "12" * 32,
        "logIndex": 0,
        "blockNumber": 9_600_000,
        "blockTimestamp": 1_600_000_000,
        "from": ACCOUNT,
        "gasPrice": 1,
        "network": "mainnet",
        "params": {
            "account": ACCOUNT,
            "fromCurrencyKey": "sUSD",
            "fromAmount": 10 * 10**18,
            "toCurrencyKey": "sUSD",
            "toAmount": 9 * 10**18,
            "toAddress": ACCOUNT,
        },
    }
    path = tmp_path / "events.jsonl"
    path.write_text(json.dumps(record) + "\n", encoding="utf-8")
    container = _container(settings)

    summary = main_module.run(str(path), container=container)

    assert summary.events_processed == 1
    total = container.aggregate_total_repository().get(Granularity.POST_ARCHERNAR, "mainnet")
    assert total.trades == 1
    assert total.total_fees_generated_usd == 1
