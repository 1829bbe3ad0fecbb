# 📄 File: my_garden/modules/watering_calendar/application/dto/calendar_dto.py
# 🧭 Purpose (Layman Explanation):
# What the app reports back after marking or clearing a watered day.

import datetime
from typing import Optional

from pydantic import BaseModel


class WateredMarkResultDTO(BaseModel):
    date: datetime.date
    marker: str
    persisted: bool


class ClearWateredMarkResultDTO(BaseModel):
    date: datetime.date
    cleared: bool
    persisted: Optional[bool] = None
