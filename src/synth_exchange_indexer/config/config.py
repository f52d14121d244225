# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, INDEXER__ERA_START_BLOCK.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from synth_exchange_indexer.models.events import ChainPosition
from synth_exchange_indexer.services.aggregation.era_policy import ARCHERNAR_BLOCK, EraPolicy


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "synth-exchange-indexer"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/indexer.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class IndexerSettings(BaseSettings):
    """Aggregation policy: primary network, era gating and pegged currencies."""

    model_config = SettingsConfigDict(extra="ignore")

    primary_network: str = Field(
        default="mainnet",
        description="Network whose exchanges count toward the era-gated totals.",
    )
    era_start_block: int = Field(
        default=ARCHERNAR_BLOCK,
        ge=0,
        description="Exchanges strictly after this block count toward the era-gated totals.",
    )
    # Raw string from env so pydantic-settings does not try to JSON-decode it.
    pegged_currencies_raw: str = Field(
        default="sUSD",
        description="Currency keys valued at exactly 1 USD, comma-separated. Env: INDEXER__PEGGED_CURRENCIES.",
        validation_alias="pegged_currencies",
    )

    @computed_field
    @property
    def pegged_currencies(self) -> list[str]:
        """Parse comma-separated pegged_currencies_raw into list of stripped strings."""
        return [s.strip() for s in self.pegged_currencies_raw.split(",") if s.strip()]

    def era_policy(self) -> EraPolicy:
        """Return the immutable era policy for these settings."""
        return EraPolicy(
            primary_network=self.primary_network,
            era_start_block=self.era_start_block,
        )


class ReplaySettings(BaseSettings):
    """Event log to replay and optional checkpoint to resume after."""

    model_config = SettingsConfigDict(extra="ignore")

    event_log_path: Optional[str] = Field(
        default=None,
        description="JSON-lines event log. Env: REPLAY__EVENT_LOG_PATH.",
    )
    resume_after_block: Optional[int] = Field(default=None, ge=0)
    resume_after_log_index: int = Field(default=0, ge=0)

    @property
    def resume_position(self) -> ChainPosition | None:
        """Checkpoint to resume after, or None to replay from scratch."""
        if self.resume_after_block is None:
            return None
        return ChainPosition(self.resume_after_block, self.resume_after_log_index)


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, REPLAY__EVENT_LOG_PATH.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    indexer: IndexerSettings = Field(default_factory=IndexerSettings)
    replay: ReplaySettings = Field(default_factory=ReplaySettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(indexer={"era_start_block": 100}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from synth_exchange_indexer.config import get_settings

        settings = get_settings()
        policy = settings.indexer.era_policy()
    """
    return Settings()
