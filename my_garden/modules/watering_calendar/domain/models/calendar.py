# 📄 File: my_garden/modules/watering_calendar/domain/models/calendar.py
# 🧭 Purpose (Layman Explanation):
# The pieces of the watering calendar: a single day square, the "watered" droplet
# stuck on a day, and a full month page ready to draw.
# 🧪 Purpose (Technical Summary):
# Value objects for the calendar bounded context: CalendarCell (date + current-month
# flag), WateredMark (date -> marker) and the CalendarMonth presentation aggregate.
# 🔄 Connected Modules / Calls From:
# CalendarGridBuilder, watered-mark repository, calendar query handler, calendar API

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CalendarCell(BaseModel):
    """One grid position of the month view."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    is_current_month: bool

    @property
    def day(self) -> int:
        return self.date.day


class WateredMark(BaseModel):
    """A calendar day the user confirmed as watered."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    marker: str = Field(default="💧", min_length=1, max_length=8)


class CalendarDay(BaseModel):
    """A cell enriched with what the month view draws in it."""

    date: datetime.date
    day: int
    is_current_month: bool
    is_today: bool = False
    marker: Optional[str] = None

    @property
    def label(self) -> str:
        return self.marker or str(self.day)


class CalendarMonth(BaseModel):
    reference_date: datetime.date
    title: str
    first_weekday: int
    weekday_labels: List[str]
    days: List[CalendarDay]

    @property
    def weeks(self) -> List[List[CalendarDay]]:
        return [self.days[i:i + 7] for i in range(0, len(self.days), 7)]
