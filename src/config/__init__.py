"""
Configuration module for the outfit recommender.

This module provides centralized configuration management using pydantic-settings.
All environment variables and configuration values should be accessed through this module.

Usage:
    from config import get_settings

    settings = get_settings()
    level = settings.log_level
    json_logs = settings.json_logs
"""

from config.constants import (
    SELECTION_CONFIG,
    WEATHER_CONFIG,
    SelectionConfig,
    WeatherConfig,
)
from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = [
    "Settings",
    "get_settings",
    "get_settings_for_testing",
    "WeatherConfig",
    "WEATHER_CONFIG",
    "SelectionConfig",
    "SELECTION_CONFIG",
]
