# 📄 File: my_garden/modules/watering_calendar/application/dto/__init__.py

from .calendar_dto import ClearWateredMarkResultDTO, WateredMarkResultDTO

__all__ = ["ClearWateredMarkResultDTO", "WateredMarkResultDTO"]
