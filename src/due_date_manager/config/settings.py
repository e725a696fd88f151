# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Package settings — environment-driven defaults via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from due_date_manager.datetimes import parse_zone


class Settings(BaseSettings):
    """Defaults used when a closed-library configuration leaves them out.

    Attributes:
        default_timezone:    Service point timezone (``DUE_DATE_DEFAULT_TIMEZONE``).
        search_horizon_days: How far rollover strategies search for an
                             open period (``DUE_DATE_SEARCH_HORIZON_DAYS``).
    """

    model_config = SettingsConfigDict(env_prefix="DUE_DATE_", env_file=".env", extra="ignore")

    default_timezone: str = "UTC"
    search_horizon_days: int = Field(default=365, gt=0)

    @field_validator("default_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        parse_zone(v)
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
