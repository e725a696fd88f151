# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration schemas for closed-library policies and opening schedules.

These Pydantic models are the boundary between plain mappings handed
over by the calling layer (loan policy records, calendar payloads) and
the typed objects the strategies work on.
"""

from __future__ import annotations

from datetime import date, time, timedelta, tzinfo

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from due_date_manager.config.settings import get_settings
from due_date_manager.datetimes import parse_zone
from due_date_manager.schedule import OpeningDay, OpeningHour, OpeningSchedule
from due_date_manager.strategies.base import DueDateManagement


class ClosedLibraryConfigSchema(BaseModel):
    """How a loan policy treats due dates that land on closed periods.

    Attributes:
        due_date_management: Which strategy to apply.
        timezone:            Service point timezone (IANA name or offset).
        horizon_days:        Search window for rollover strategies.
        short_term:          Loan period counted in hours or minutes;
                             selects the hour-based backward strategy when
                             a fixed due-date limit is applied.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    due_date_management: DueDateManagement = Field(
        default=DueDateManagement.KEEP_THE_CURRENT_DUE_DATE,
        alias="closedLibraryDueDateManagementId",
    )
    timezone: str = Field(default_factory=lambda: get_settings().default_timezone)
    horizon_days: int = Field(default_factory=lambda: get_settings().search_horizon_days, gt=0)
    short_term: bool = False

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        parse_zone(v)
        return v

    @property
    def zone(self) -> tzinfo:
        return parse_zone(self.timezone)

    @property
    def horizon(self) -> timedelta:
        return timedelta(days=self.horizon_days)


class OpeningHourSchema(BaseModel):
    """Single opening hour, e.g. ``{"startTime": "08:00", "endTime": "17:00"}``."""

    model_config = ConfigDict(populate_by_name=True)

    start_time: time = Field(alias="startTime")
    end_time: time = Field(alias="endTime")

    @model_validator(mode="after")
    def check_order(self) -> OpeningHourSchema:
        if self.end_time <= self.start_time:
            raise ValueError(
                f"endTime {self.end_time} must be after startTime {self.start_time}"
            )
        return self

    def to_domain(self) -> OpeningHour:
        return OpeningHour(self.start_time, self.end_time)


class OpeningDaySchema(BaseModel):
    """Opening information for one date."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(alias="date")
    open: bool = True
    all_day: bool = Field(default=False, alias="allDay")
    opening_hours: list[OpeningHourSchema] = Field(default_factory=list, alias="openingHour")

    def to_domain(self) -> OpeningDay:
        return OpeningDay(
            date=self.day,
            open=self.open,
            all_day=self.all_day,
            opening_hours=tuple(h.to_domain() for h in self.opening_hours),
        )


class OpeningScheduleSchema(BaseModel):
    """Ordered list of opening days for one service point."""

    model_config = ConfigDict(populate_by_name=True)

    opening_days: list[OpeningDaySchema] = Field(default_factory=list, alias="openingDays")

    def to_schedule(self) -> OpeningSchedule:
        return OpeningSchedule(d.to_domain() for d in self.opening_days)
