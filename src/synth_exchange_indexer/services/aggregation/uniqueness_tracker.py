"""Uniqueness tracker: first appearance of an account in a bucket."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from synth_exchange_indexer.models.granularity import Granularity
from synth_exchange_indexer.models.trader_seen import TraderSeen
from synth_exchange_indexer.persistence.repositories.interfaces.trader_seen_repository import (
    ITraderSeenRepository,
)
from synth_exchange_indexer.utils.validation import mask_address


class UniquenessTracker:
    """Check-then-insert on TraderSeen, independently per (granularity, bucket)."""

    def __init__(
        self,
        trader_seen_repository: ITraderSeenRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._repo = trader_seen_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def observe_and_check_first(self, granularity: Granularity, bucket_key: str, account: str) -> bool:
        """Record account in the bucket; return True only the first time it appears there."""
        if self._repo.contains(granularity, bucket_key, account):
            return False
        self._repo.add(TraderSeen.create(granularity, bucket_key, account))
        self._logger.debug(
            "trader_first_seen",
            granularity=granularity.value,
            bucket_key=bucket_key,
            account_masked=mask_address(account),
        )
        return True
