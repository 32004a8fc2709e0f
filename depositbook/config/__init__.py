"""Configuration package."""

from depositbook.config.settings import (
    AppSettings,
    IdentifierSettings,
    PlanSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "IdentifierSettings",
    "PlanSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
