# 📄 File: my_garden/modules/watering_calendar/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Calendar layout rules.

from .calendar_grid_builder import CalendarGridBuilder, shift_month

__all__ = ["CalendarGridBuilder", "shift_month"]
