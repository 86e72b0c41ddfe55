"""
Centralized configuration with environment variable overrides.

Marketplace presentation values, search limits, and model settings are
configurable here. Nothing is hardcoded in flow or tool logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class MarketplaceConfig:
    """Marketplace branding and search limits."""

    name: str = os.getenv("APP_NAME", "ParkPulse")
    support_email: str = os.getenv("SUPPORT_EMAIL", "support@parkpulse.app")
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "$")
    max_query_length: int = _safe_int("MAX_QUERY_LENGTH", "500")
    max_search_listings: int = _safe_int("MAX_SEARCH_LISTINGS", "50")


@dataclass(frozen=True)
class ModelConfig:
    """LLM settings for search and notification copy."""

    llm_model: str = os.getenv("LLM_MODEL", "gpt-4o-mini")
    llm_temperature: float = _safe_float("LLM_TEMPERATURE", "0.3")
    llm_timeout_sec: float = _safe_float("LLM_TIMEOUT_SEC", "30.0")
    api_key: str = os.getenv("OPENAI_API_KEY", "")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    marketplace: MarketplaceConfig = field(default_factory=MarketplaceConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not 0.0 <= config.model.llm_temperature <= 2.0:
        raise ValueError(
            f"LLM_TEMPERATURE must be between 0.0 and 2.0, got {config.model.llm_temperature}"
        )
    if config.model.llm_timeout_sec <= 0:
        raise ValueError(
            f"LLM_TIMEOUT_SEC must be > 0, got {config.model.llm_timeout_sec}"
        )
    if config.marketplace.max_query_length < 1:
        raise ValueError(
            f"MAX_QUERY_LENGTH must be >= 1, got {config.marketplace.max_query_length}"
        )
    if config.marketplace.max_search_listings < 1:
        raise ValueError(
            "MAX_SEARCH_LISTINGS must be >= 1, "
            f"got {config.marketplace.max_search_listings}"
        )
    if not config.marketplace.currency_symbol:
        raise ValueError("CURRENCY_SYMBOL must not be empty")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.marketplace.name)
    return config


# Singleton instance
settings = load_config()
