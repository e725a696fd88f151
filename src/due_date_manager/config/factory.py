# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Strategy factory for creating closed-library strategies from configuration.

Uses a fixed registry mapping every :class:`DueDateManagement` member to
its strategy class.  The set of strategies is closed: there is no runtime
registration, so the mapping can be checked for exhaustiveness.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import ValidationError

from due_date_manager.exceptions import DueDateError
from due_date_manager.strategies import (
    BeginningOfNextOpenHoursStrategy,
    ClosedLibraryStrategy,
    DueDateManagement,
    EndOfCurrentHoursStrategy,
    EndOfNextOpenDayStrategy,
    EndOfPreviousOpenDayStrategy,
    KeepCurrentDateStrategy,
    KeepCurrentDateTimeStrategy,
)

from .schema import ClosedLibraryConfigSchema

if TYPE_CHECKING:
    from due_date_manager._internal.clock import Clock


class StrategyFactoryError(DueDateError):
    """Raised when strategy creation fails."""

    pass


class StrategyFactory:
    """Creates strategy instances from :class:`ClosedLibraryConfigSchema`.

    Example:
        factory = StrategyFactory()
        config = ClosedLibraryConfigSchema(
            due_date_management="MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY",
            timezone="America/New_York",
        )
        strategy = factory.create(config)
    """

    _registry: ClassVar[Mapping[DueDateManagement, type[ClosedLibraryStrategy]]] = MappingProxyType(
        {
            DueDateManagement.KEEP_THE_CURRENT_DUE_DATE: KeepCurrentDateStrategy,
            DueDateManagement.KEEP_THE_CURRENT_DUE_DATE_TIME: KeepCurrentDateTimeStrategy,
            DueDateManagement.MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY: EndOfPreviousOpenDayStrategy,
            DueDateManagement.MOVE_TO_THE_END_OF_THE_NEXT_OPEN_DAY: EndOfNextOpenDayStrategy,
            DueDateManagement.MOVE_TO_BEGINNING_OF_NEXT_OPEN_SERVICE_POINT_HOURS: (
                BeginningOfNextOpenHoursStrategy
            ),
            DueDateManagement.MOVE_TO_END_OF_CURRENT_SERVICE_POINT_HOURS: EndOfCurrentHoursStrategy,
        }
    )

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize factory.

        Args:
            clock: Clock handed to strategies that read the current time.
        """
        self._clock = clock

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered strategy type names."""
        return [t.value for t in cls._registry]

    @classmethod
    def strategy_class(cls, management: DueDateManagement) -> type[ClosedLibraryStrategy]:
        """Return the strategy class registered for *management*.

        Raises:
            StrategyFactoryError: If *management* has no registered strategy.
        """
        strategy_class = cls._registry.get(management)
        if strategy_class is None:
            available = ", ".join(sorted(cls.registered_types()))
            raise StrategyFactoryError(
                f"Unknown strategy type: '{management}'. Available types: {available}"
            )
        return strategy_class

    def create(self, config: ClosedLibraryConfigSchema | Mapping[str, Any]) -> ClosedLibraryStrategy:
        """Create the strategy selected by *config*.

        Args:
            config: Validated configuration or a plain mapping to validate.

        Returns:
            Strategy instance

        Raises:
            StrategyFactoryError: If the configuration is invalid or the
                strategy cannot be built.
        """
        config = self.validate(config)
        return self._build(config.due_date_management, config)

    def create_backward(
        self, config: ClosedLibraryConfigSchema | Mapping[str, Any]
    ) -> ClosedLibraryStrategy:
        """Create the strategy used to pull a due date back under a fixed limit.

        Short-term loans close at the end of the current service point
        hours; everything else moves to the end of the previous open day.
        """
        config = self.validate(config)
        management = (
            DueDateManagement.MOVE_TO_END_OF_CURRENT_SERVICE_POINT_HOURS
            if config.short_term
            else DueDateManagement.MOVE_TO_THE_END_OF_THE_PREVIOUS_OPEN_DAY
        )
        return self._build(management, config)

    @staticmethod
    def validate(config: ClosedLibraryConfigSchema | Mapping[str, Any]) -> ClosedLibraryConfigSchema:
        if isinstance(config, ClosedLibraryConfigSchema):
            return config
        try:
            return ClosedLibraryConfigSchema.model_validate(config)
        except ValidationError as e:
            raise StrategyFactoryError(f"Invalid closed library configuration: {e}") from e

    def _build(
        self, management: DueDateManagement, config: ClosedLibraryConfigSchema
    ) -> ClosedLibraryStrategy:
        strategy_class = self.strategy_class(management)

        try:
            if strategy_class is KeepCurrentDateTimeStrategy:
                return KeepCurrentDateTimeStrategy()
            if strategy_class is KeepCurrentDateStrategy:
                return KeepCurrentDateStrategy(config.zone)
            if strategy_class is EndOfCurrentHoursStrategy:
                return EndOfCurrentHoursStrategy(
                    config.zone, horizon=config.horizon, clock=self._clock
                )
            return strategy_class(config.zone, horizon=config.horizon)  # type: ignore[call-arg]
        except DueDateError as e:
            raise StrategyFactoryError(
                f"Failed to create strategy of type '{management.value}': {e}"
            ) from e
