# 📄 File: my_garden/modules/watering_calendar/presentation/api/schemas/__init__.py

from .calendar_schemas import (
    CalendarDayResponse,
    CalendarMonthResponse,
    ClearWateredMarkResponse,
    MarkWateredRequest,
    WateredMarkResponse,
)

__all__ = [
    "CalendarDayResponse",
    "CalendarMonthResponse",
    "ClearWateredMarkResponse",
    "MarkWateredRequest",
    "WateredMarkResponse",
]
