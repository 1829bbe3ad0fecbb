# 📄 File: my_garden/modules/plant_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Plant rules that are not tied to storage: reminder timing and the reminder delivery contract.

from .reminder_notifier import ReminderNotifier
from .watering_scheduler import WateringScheduler

__all__ = ["ReminderNotifier", "WateringScheduler"]
