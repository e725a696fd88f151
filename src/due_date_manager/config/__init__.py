# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration: environment settings, policy schemas and the strategy factory.

Exports:
    Settings: Environment-driven package defaults
    ClosedLibraryConfigSchema: Per-policy closed-library configuration
    OpeningScheduleSchema: Opening schedule payload validation
    StrategyFactory: Creates strategy instances from configuration
"""

from .factory import StrategyFactory, StrategyFactoryError
from .schema import (
    ClosedLibraryConfigSchema,
    OpeningDaySchema,
    OpeningHourSchema,
    OpeningScheduleSchema,
)
from .settings import Settings, get_settings

__all__ = [
    "ClosedLibraryConfigSchema",
    "OpeningDaySchema",
    "OpeningHourSchema",
    "OpeningScheduleSchema",
    "Settings",
    "StrategyFactory",
    "StrategyFactoryError",
    "get_settings",
]
