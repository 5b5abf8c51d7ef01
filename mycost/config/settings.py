"""
Configuration Management for MyCost

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The statistics engine and keypad read their labels and thresholds
from these classes rather than hard-coding them, so a host app can
localize the fallback labels without touching the core.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatsSettings(BaseSettings):
    """Statistics and reporting configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MYCOST_STATS_",
        extra="ignore"
    )

    uncategorized_label: str = Field(
        default="Uncategorized",
        min_length=1,
        description="Group name for transactions without a category"
    )
    fallback_icon: str = Field(
        default="tag",
        description="Icon used for a group whose first member has no category"
    )
    fallback_color: str = Field(
        default="#8E8E93",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Color used for a group whose first member has no category"
    )
    min_share: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        description="Category shares below this fraction are left out of charts"
    )
    trend_visible_months: int = Field(
        default=6,
        ge=1,
        le=24,
        description="Number of months shown at once in the trend chart"
    )
    currency_symbol: str = Field(
        default="¥",
        description="Symbol prefixed to formatted currency amounts"
    )


class CalculatorSettings(BaseSettings):
    """Numeric keypad configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MYCOST_CALCULATOR_",
        extra="ignore"
    )

    input_fraction_digits: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Maximum fractional digits when re-seeding the expression field"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MYCOST_LOG_",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON (otherwise human-readable console output)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept level names the stdlib logging module knows."""
        normalized = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return normalized


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Log at DEBUG level regardless of MYCOST_LOG_LEVEL"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def stats(self) -> StatsSettings:
        return StatsSettings()

    @property
    def calculator(self) -> CalculatorSettings:
        return CalculatorSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry with the message for each failure.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("stats", "calculator", "logging", "app"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
