# 📄 File: my_garden/modules/plant_management/infrastructure/external/local_notifier.py
# 🧭 Purpose (Layman Explanation):
# A stand-in for the phone's local notification center: it remembers which watering
# alerts are waiting, replaces an alert when the same plant is scheduled again, and
# quietly ignores alerts when the user has not allowed notifications.
# 🧪 Purpose (Technical Summary):
# In-process ReminderNotifier keyed by reminder id (at most one pending per id),
# with an authorization flag and the platform's pending-request cap.
# 🔗 Dependencies:
# ReminderNotifier port, ReminderRequest, NotificationError
# 🔄 Connected Modules / Calls From:
# Application container, plant command handlers, reminder endpoints

from datetime import time
from typing import Dict, List, Optional

from my_garden.modules.plant_management.domain.models.reminder import ReminderRequest
from my_garden.modules.plant_management.domain.services.reminder_notifier import ReminderNotifier
from my_garden.shared.core.exceptions import NotificationError
from my_garden.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Pending local notification cap per app on the mobile platforms
MAX_PENDING_REMINDERS = 64


class LocalReminderNotifier(ReminderNotifier):
    """
    Pending reminders held in memory, replaced by id.
    """

    def __init__(
        self,
        permission_granted: bool = True,
        reminder_time: time = time(9, 0),
        max_pending: int = MAX_PENDING_REMINDERS,
    ):
        self._permission_granted = permission_granted
        self.reminder_time = reminder_time
        self.max_pending = max_pending
        self._pending: Dict[str, ReminderRequest] = {}

    @property
    def authorized(self) -> bool:
        return self._permission_granted

    async def request_authorization(self) -> bool:
        if self._permission_granted:
            logger.info("Notification permission granted")
        else:
            logger.warning("Notification permission denied; reminders will not be delivered")
        return self._permission_granted

    async def schedule(self, request: ReminderRequest) -> bool:
        if not self._permission_granted:
            logger.info(
                f"Dropped reminder {request.id}: notifications not authorized",
                reminder_id=request.id,
            )
            return False

        if request.id not in self._pending and len(self._pending) >= self.max_pending:
            raise NotificationError(
                f"Too many pending reminders (limit {self.max_pending})",
                reminder_id=request.id,
            )

        replaced = request.id in self._pending
        self._pending[request.id] = request
        logger.info(
            f"Scheduled reminder {request.id} for {request.fire_at(self.reminder_time).isoformat()}",
            reminder_id=request.id,
            fire_date=request.fire_date.isoformat(),
            replaced=replaced,
        )
        return True

    async def cancel(self, reminder_id: str) -> bool:
        removed = self._pending.pop(reminder_id, None)
        if removed is not None:
            logger.info(f"Cancelled reminder {reminder_id}", reminder_id=reminder_id)
        return removed is not None

    async def pending(self) -> List[ReminderRequest]:
        return sorted(self._pending.values(), key=lambda r: (r.fire_date, r.id))

    async def get(self, reminder_id: str) -> Optional[ReminderRequest]:
        return self._pending.get(reminder_id)
