# 📄 File: my_garden/modules/watering_calendar/presentation/api/schemas/calendar_schemas.py
# 🧭 Purpose (Layman Explanation):
# What a month page looks like over the API: the title, the weekday header, and
# every square with its number, a "today" flag and the droplet if it was watered.
# 🧪 Purpose (Technical Summary):
# Request/response schemas for the calendar endpoints. The month grid is sent both
# flat (``days``) and split into 7-day rows (``weeks``).
# 🔄 Connected Modules / Calls From:
# my_garden.modules.watering_calendar.presentation.api.v1.calendar

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from my_garden.modules.watering_calendar.domain.models.calendar import CalendarDay, CalendarMonth


class MarkWateredRequest(BaseModel):
    marker: Optional[str] = Field(default=None, min_length=1, max_length=8, examples=["💧"])


class CalendarDayResponse(BaseModel):
    date: datetime.date
    day: int
    label: str
    is_current_month: bool
    is_today: bool
    marker: Optional[str] = None

    @classmethod
    def from_domain(cls, day: CalendarDay) -> "CalendarDayResponse":
        return cls(
            date=day.date,
            day=day.day,
            label=day.label,
            is_current_month=day.is_current_month,
            is_today=day.is_today,
            marker=day.marker,
        )


class CalendarMonthResponse(BaseModel):
    reference_date: datetime.date
    title: str
    first_weekday: int
    weekday_labels: List[str]
    days: List[CalendarDayResponse]
    weeks: List[List[CalendarDayResponse]]

    @classmethod
    def from_domain(cls, month: CalendarMonth) -> "CalendarMonthResponse":
        return cls(
            reference_date=month.reference_date,
            title=month.title,
            first_weekday=month.first_weekday,
            weekday_labels=month.weekday_labels,
            days=[CalendarDayResponse.from_domain(day) for day in month.days],
            weeks=[[CalendarDayResponse.from_domain(day) for day in week] for week in month.weeks],
        )


class WateredMarkResponse(BaseModel):
    date: datetime.date
    marker: str
    persisted: bool
    warnings: List[str] = Field(default_factory=list)


class ClearWateredMarkResponse(BaseModel):
    date: datetime.date
    cleared: bool
    persisted: Optional[bool] = None
    warnings: List[str] = Field(default_factory=list)
