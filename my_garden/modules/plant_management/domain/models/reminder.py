# 📄 File: my_garden/modules/plant_management/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# Describes a single "time to water" alert: which plant it is for, what it says and
# on which day it should pop up.
# 🧪 Purpose (Technical Summary):
# Immutable ReminderRequest value object handed to the notification boundary.
# The id is the plant id so scheduling again for a plant replaces its pending alert.
# 🔄 Connected Modules / Calls From:
# WateringScheduler, ReminderNotifier implementations, reminder DTOs

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict


class ReminderRequest(BaseModel):
    """One-shot local reminder for a plant's watering due date."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    body: str
    fire_date: date

    def fire_at(self, reminder_time: time) -> datetime:
        """Local (naive) datetime the notification should be delivered at."""
        return datetime.combine(self.fire_date, reminder_time)
