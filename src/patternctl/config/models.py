"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, patternctl.toml only contains
overrides. A missing file means every scenario runs with these values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- patternctl.toml sections ---


class PizzaConfig(BaseModel):
    """[pizza] section."""

    model_config = {"frozen": True}

    default_kind: str = "cheese"


class GumballConfig(BaseModel):
    """[gumball] section."""

    model_config = {"frozen": True}

    initial_count: int = Field(default=10, ge=0)


class RemoteConfig(BaseModel):
    """[remote] section."""

    model_config = {"frozen": True}

    slot_count: int = Field(default=7, ge=1)
    history_limit: int | None = None

    @field_validator("history_limit")
    @classmethod
    def _positive_limit(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            msg = "history_limit must be positive or unset"
            raise ValueError(msg)
        return value


class TheaterConfig(BaseModel):
    """[theater] section."""

    model_config = {"frozen": True}

    dim_level: int = Field(default=10, ge=0, le=100)
    volume: int = Field(default=10, ge=0)


class ObserverConfig(BaseModel):
    """[observer] section."""

    model_config = {"frozen": True}

    weather_apps: int = Field(default=2, ge=0)
