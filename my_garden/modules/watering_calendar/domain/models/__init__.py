# 📄 File: my_garden/modules/watering_calendar/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Calendar squares, watered marks and month pages.

from .calendar import CalendarCell, CalendarDay, CalendarMonth, WateredMark

__all__ = ["CalendarCell", "CalendarDay", "CalendarMonth", "WateredMark"]
