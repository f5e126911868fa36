"""Configuration system for spendwise-core.

This module provides Pydantic Settings-based configuration with environment
variable support. Every default reproduces the dashboard's fixed behaviour,
so an unconfigured engine computes exactly the documented summary.

Usage:
    from spendwise_core.config import SpendwiseConfig, configure_logging

    config = SpendwiseConfig()
    configure_logging(config)

    print(config.engine.trend_window_months)
"""

import logging

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class EngineSettings(BaseSettings):
    """Tunables for the summary aggregation engine.

    Environment Variables:
        SPENDWISE_ENGINE_TREND_WINDOW_MONTHS: Monthly trend points retained
        SPENDWISE_ENGINE_PALETTE_SIZE: Number of chart colors to cycle through
        SPENDWISE_ENGINE_MAX_INSIGHTS: Maximum insights returned
        SPENDWISE_ENGINE_WARNING_THRESHOLD_PERCENT: Lower bound of the warning band
        SPENDWISE_ENGINE_SENTINEL_CATEGORY: Category used for missing categories
        SPENDWISE_ENGINE_CURRENCY_SYMBOL: Symbol used in insight messages
    """

    model_config = SettingsConfigDict(
        env_prefix="SPENDWISE_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    trend_window_months: int = Field(
        default=6,
        ge=1,
        le=120,
        description="Number of most recent monthly points kept in the trend",
    )
    palette_size: int = Field(
        default=10,
        ge=1,
        le=64,
        description="Size of the display palette category colors cycle through",
    )
    max_insights: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Maximum number of insights returned",
    )
    warning_threshold_percent: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Percent of budget spent at which a warning is raised",
    )
    sentinel_category: str = Field(
        default="uncategorized",
        description="Category substituted when a transaction has none",
    )
    currency_symbol: str = Field(
        default="$",
        description="Currency symbol used in insight messages",
    )

    @classmethod
    def defaults(cls) -> "EngineSettings":
        """Built-in defaults, ignoring the environment and any .env file."""
        return cls.model_construct()

    @field_validator("sentinel_category")
    @classmethod
    def validate_sentinel_category(cls, v: str) -> str:
        """Ensure the sentinel category is not empty."""
        if not v or not v.strip():
            raise ValueError("Sentinel category cannot be empty")
        return v.strip()


class SpendwiseConfig(BaseSettings):
    """Root configuration for spendwise-core.

    Environment Variables:
        SPENDWISE_ENV: Environment name (development, staging, production, test)
        SPENDWISE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        SPENDWISE_LOG_FORMAT: Log renderer (console, json)

    Example:
        config = SpendwiseConfig(engine=EngineSettings(trend_window_months=12))
    """

    model_config = SettingsConfigDict(
        env_prefix="SPENDWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production, test)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="console",
        description="Log renderer: console or json",
    )

    engine: EngineSettings = Field(default_factory=EngineSettings)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return v.lower().strip()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_debug(self) -> bool:
        return self.log_level == "DEBUG"


def configure_logging(config: SpendwiseConfig) -> None:
    """Configure structlog from the given settings.

    Raises:
        ConfigurationError: If the log format is not console or json.
    """
    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    elif config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        raise ConfigurationError(
            "SPENDWISE_LOG_FORMAT", config.log_format, ("console", "json")
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
        cache_logger_on_first_use=False,
    )
