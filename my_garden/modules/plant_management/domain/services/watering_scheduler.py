# 📄 File: my_garden/modules/plant_management/domain/services/watering_scheduler.py
# 🧭 Purpose (Layman Explanation):
# Works out when a plant next needs water and writes the reminder message for it.
# 🧪 Purpose (Technical Summary):
# Pure domain service computing the next one-shot ReminderRequest for a plant:
# fire_date = last_watered_date + watering_frequency_days, id = plant id.
# Input is assumed to be validated upstream (frequency within the allowed range).
# 🔗 Dependencies:
# datetime, domain models
# 🔄 Connected Modules / Calls From:
# AddPlantCommandHandler, GetNextReminderQueryHandler

from datetime import timedelta

from ..models.plant import Plant
from ..models.reminder import ReminderRequest

DEFAULT_TITLE_TEMPLATE = "Time to water 🌿 {name}"
DEFAULT_BODY_TEMPLATE = "Remember to water {name} today!"


class WateringScheduler:
    """
    Builds watering reminders.

    Only the next reminder is produced; nothing recurs. Callers that want a new
    reminder after a watering must ask again.
    """

    def __init__(
        self,
        title_template: str = DEFAULT_TITLE_TEMPLATE,
        body_template: str = DEFAULT_BODY_TEMPLATE,
    ):
        self.title_template = title_template
        self.body_template = body_template

    @staticmethod
    def reminder_id_for(plant_id: str) -> str:
        return str(plant_id)

    def next_reminder(self, plant: Plant) -> ReminderRequest:
        """
        Compute the reminder for a plant's next watering.

        Args:
            plant: Plant with a validated watering frequency

        Returns:
            ReminderRequest due watering_frequency_days after the last watering
        """
        fire_date = plant.last_watered_date + timedelta(days=plant.watering_frequency_days)
        return ReminderRequest(
            id=self.reminder_id_for(plant.plant_id),
            title=self.title_template.format(name=plant.name),
            body=self.body_template.format(name=plant.name),
            fire_date=fire_date,
        )
