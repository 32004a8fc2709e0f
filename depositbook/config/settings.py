"""
Configuration Management for Depositbook

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Plan constants and identifier format live in one place and are
validated at startup.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Optional, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentifierSettings(BaseSettings):
    """Depositor identifier format and generation."""
    
    model_config = SettingsConfigDict(
        env_prefix="DEPOSITBOOK_ID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    prefix: str = Field(
        default="PZ",
        min_length=1,
        max_length=8,
        description="Letters placed before the numeric part of every ID"
    )
    min_value: int = Field(
        default=100000,
        ge=100000,
        le=999999,
        description="Smallest six-digit number drawn for an ID"
    )
    max_value: int = Field(
        default=999999,
        ge=100000,
        le=999999,
        description="Largest six-digit number drawn for an ID"
    )
    max_attempts: int = Field(
        default=5,
        ge=1,
        le=100,
        description="How many times to redraw an ID that is already taken"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the ID generator (None = OS entropy)"
    )
    
    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Prefix must be letters so it never blends into the digits."""
        if not v.isalpha():
            raise ValueError(f"ID prefix must contain letters only, got {v!r}")
        return v.upper()
    
    @model_validator(mode='after')
    def validate_range(self) -> 'IdentifierSettings':
        if self.min_value > self.max_value:
            raise ValueError("ID min_value cannot be greater than max_value")
        return self
    
    @property
    def pattern(self) -> str:
        """Regular expression matching a well-formed ID."""
        return rf"^{self.prefix}\d{{6}}$"


class PlanSettings(BaseSettings):
    """Constants of the Fixed deposit plan."""
    
    model_config = SettingsConfigDict(
        env_prefix="DEPOSITBOOK_FIXED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    bonus: Decimal = Field(
        default=Decimal("100"),
        ge=0,
        description="Amount added to every Fixed deposit"
    )
    ceiling: Decimal = Field(
        default=Decimal("1000000"),
        ge=0,
        description="Largest amount a Fixed plan accepts"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="DEPOSITBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level of log lines written to stderr"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


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
    
    @property
    def ids(self) -> IdentifierSettings:
        return IdentifierSettings()
    
    @property
    def plans(self) -> PlanSettings:
        return PlanSettings()
    
    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, Union[bool, str]]:
    """
    Validate all settings are properly configured.
    
    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for every section that failed.
    """
    results = {}
    settings = get_settings()
    
    for name in ("ids", "plans", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)
    
    return results
