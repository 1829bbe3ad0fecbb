# 📄 File: my_garden/modules/watering_calendar/application/commands/watered_marks.py
# 🧭 Purpose (Layman Explanation):
# "I watered on this day" and "undo that" as commands.
# 🧪 Purpose (Technical Summary):
# CQRS commands for setting and clearing the watered marker of a calendar day.
# A missing marker means the configured default (WATERED_MARKER).
# 🔄 Connected Modules / Calls From:
# MarkDayWateredCommandHandler, ClearWateredMarkCommandHandler, calendar API

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class MarkDayWateredCommand(BaseModel):
    day: date = Field(..., description="Calendar day to mark", examples=["2024-03-12"])
    marker: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=8,
        description="Emoji drawn on the day; defaults to 💧",
    )


class ClearWateredMarkCommand(BaseModel):
    day: date
