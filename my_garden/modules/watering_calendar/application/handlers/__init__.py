# 📄 File: my_garden/modules/watering_calendar/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers behind the calendar screen.

from .calendar_handlers import (
    ClearWateredMarkCommandHandler,
    GetCalendarMonthQueryHandler,
    MarkDayWateredCommandHandler,
)

__all__ = [
    "ClearWateredMarkCommandHandler",
    "GetCalendarMonthQueryHandler",
    "MarkDayWateredCommandHandler",
]
