"""
Configuration management using Pydantic Settings.
Supports environment variables with validation.
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eisenhower.domain.category import OrderingPolicy


class MatrixSettings(BaseSettings):
    """Defaults used when building matrices without explicit arguments."""

    kind: Literal["list", "set"] = Field(
        "list",
        description="Storage semantics: 'list' keeps duplicates, 'set' keeps tasks unique",
    )
    policy: OrderingPolicy = Field(
        OrderingPolicy.IMPORTANCE_OVER_URGENCY,
        description="Category ordering used for linearized views",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("policy", mode="before")
    @classmethod
    def parse_policy(cls, v: object) -> OrderingPolicy:
        return OrderingPolicy.parse(v)

    model_config = SettingsConfigDict(
        env_prefix="EISENHOWER_MATRIX_",
        case_sensitive=False,
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_output: bool = Field(True, description="Emit JSON log lines instead of plain text")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_prefix="EISENHOWER_LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """
    Library settings.

    Load from:
    1. Environment variables
    2. .env file (if exists)
    3. Default values

    Example .env file:
    ```
    EISENHOWER_MATRIX_KIND=set
    EISENHOWER_MATRIX_POLICY=urgency_over_importance

    EISENHOWER_LOG_LEVEL=DEBUG
    EISENHOWER_LOG_JSON_OUTPUT=false
    ```
    """

    matrix: MatrixSettings = Field(default_factory=MatrixSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get library settings, read fresh from the environment."""
    return Settings()
