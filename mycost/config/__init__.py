"""Configuration package."""

from mycost.config.settings import (
    AppSettings,
    CalculatorSettings,
    LoggingSettings,
    Settings,
    StatsSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "CalculatorSettings",
    "LoggingSettings",
    "Settings",
    "StatsSettings",
    "get_settings",
    "validate_all_settings",
]
