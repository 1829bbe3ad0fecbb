# 📄 File: my_garden/modules/watering_calendar/application/queries/__init__.py

from .calendar_queries import GetCalendarMonthQuery

__all__ = ["GetCalendarMonthQuery"]
