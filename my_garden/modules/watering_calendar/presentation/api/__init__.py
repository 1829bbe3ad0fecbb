# 📄 File: my_garden/modules/watering_calendar/presentation/api/__init__.py

from .v1.calendar import calendar_router

__all__ = ["calendar_router"]
