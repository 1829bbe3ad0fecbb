# 📄 File: my_garden/modules/watering_calendar/application/commands/__init__.py

from .watered_marks import ClearWateredMarkCommand, MarkDayWateredCommand

__all__ = ["ClearWateredMarkCommand", "MarkDayWateredCommand"]
