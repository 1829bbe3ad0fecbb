# 📄 File: my_garden/modules/plant_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections to services outside the garden app (the notification center).

from .local_notifier import LocalReminderNotifier, MAX_PENDING_REMINDERS

__all__ = ["LocalReminderNotifier", "MAX_PENDING_REMINDERS"]
