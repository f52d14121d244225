# -*- coding: utf-8 -*-
"""
Entry point for the exchange indexer.

Orchestrates: logging, settings, container, replay of the event log, summary of totals.
Events flow: event log -> ReplayRunner -> EventProcessorService -> handlers -> repositories.

Run with: REPLAY__EVENT_LOG_PATH=events.jsonl python -m synth_exchange_indexer.main
"""
from __future__ import annotations

import structlog

from synth_exchange_indexer.DI import Container
from synth_exchange_indexer.config import get_settings
from synth_exchange_indexer.consumers import ReplaySummary
from synth_exchange_indexer.event_source import JsonLinesEventSource
from synth_exchange_indexer.exceptions import MissingRequiredConfigError
from synth_exchange_indexer.logging.config import configure_logging
from synth_exchange_indexer.models import Granularity


def run(event_log_path: str | None = None, container: Container | None = None) -> ReplaySummary:
    """Replay the configured event log into a fresh store and log the resulting totals."""
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    path = event_log_path or settings.replay.event_log_path
    if not path:
        logger.error(
            "main_missing_event_log_path",
            message="REPLAY__EVENT_LOG_PATH is not set",
        )
        raise MissingRequiredConfigError("REPLAY__EVENT_LOG_PATH")

    container = container or Container()
    runner = container.replay_runner()
    totals_repo = container.aggregate_total_repository()

    summary = runner.run(JsonLinesEventSource(path), after=settings.replay.resume_position)

    for granularity in (Granularity.ALL_TIME, Granularity.POST_ARCHERNAR):
        for total in totals_repo.list_by_granularity(granularity):
            logger.info(
                "main_total",
                granularity=granularity.value,
                key=total.key,
                trades=total.trades,
                exchangers=total.exchangers,
                exchange_usd_tally=str(total.exchange_usd_tally),
                total_fees_generated_usd=str(total.total_fees_generated_usd),
            )
    return summary


def main() -> None:
    run()


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
