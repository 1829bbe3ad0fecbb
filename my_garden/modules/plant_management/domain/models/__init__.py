# 📄 File: my_garden/modules/plant_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core "things" of the plant module: plants and their watering reminders.

from .plant import Plant
from .reminder import ReminderRequest

__all__ = ["Plant", "ReminderRequest"]
