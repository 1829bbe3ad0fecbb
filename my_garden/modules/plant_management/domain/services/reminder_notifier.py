# 📄 File: my_garden/modules/plant_management/domain/services/reminder_notifier.py
# 🧭 Purpose (Layman Explanation):
# Describes the "alarm clock" the app hands watering reminders to. The garden app only
# asks for an alert; delivering it is the phone's (or server's) job.
# 🧪 Purpose (Technical Summary):
# Notification boundary port. Implementations keep at most one pending reminder per id
# and silently drop requests when permission was denied.
# 🔄 Connected Modules / Calls From:
# Plant command handlers, LocalReminderNotifier, application lifespan (authorization)

from abc import ABC, abstractmethod
from typing import List

from ..models.reminder import ReminderRequest


class ReminderNotifier(ABC):
    """Port to the platform notification service."""

    @abstractmethod
    async def request_authorization(self) -> bool:
        """Ask for permission to deliver alerts; returns whether it was granted."""
        pass

    @abstractmethod
    async def schedule(self, request: ReminderRequest) -> bool:
        """
        Hand a reminder over for delivery at its fire date.

        Returns:
            True if the reminder is pending, False if it was dropped because
            notifications are not authorized

        Raises:
            NotificationError: If the service refuses the request
        """
        pass

    @abstractmethod
    async def cancel(self, reminder_id: str) -> bool:
        """Withdraw a pending reminder; returns False when none was pending."""
        pass

    @abstractmethod
    async def pending(self) -> List[ReminderRequest]:
        """Reminders waiting to be delivered, ordered by fire date."""
        pass
