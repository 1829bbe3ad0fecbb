from datetime import date

import pytest

from my_garden.modules.plant_management.domain.models.reminder import ReminderRequest
from my_garden.modules.plant_management.infrastructure.external.local_notifier import LocalReminderNotifier
from my_garden.shared.core.exceptions import NotificationError


def reminder(reminder_id: str, fire_date: date = date(2024, 1, 8), title: str = "Time to water 🌿 Fern") -> ReminderRequest:
    return ReminderRequest(id=reminder_id, title=title, body="Remember to water Fern today!", fire_date=fire_date)


async def test_rescheduling_same_id_replaces_pending_reminder():
    notifier = LocalReminderNotifier()

    assert await notifier.schedule(reminder("p1", date(2024, 1, 8)))
    assert await notifier.schedule(reminder("p1", date(2024, 1, 15)))

    pending = await notifier.pending()
    assert len(pending) == 1
    assert pending[0].fire_date == date(2024, 1, 15)


async def test_denied_permission_drops_reminders_silently():
    notifier = LocalReminderNotifier(permission_granted=False)

    assert not await notifier.request_authorization()
    assert not await notifier.schedule(reminder("p1"))
    assert await notifier.pending() == []


async def test_pending_is_ordered_by_fire_date():
    notifier = LocalReminderNotifier()
    await notifier.schedule(reminder("late", date(2024, 2, 1)))
    await notifier.schedule(reminder("early", date(2024, 1, 2)))

    assert [r.id for r in await notifier.pending()] == ["early", "late"]


async def test_cancel():
    notifier = LocalReminderNotifier()
    await notifier.schedule(reminder("p1"))

    assert await notifier.cancel("p1")
    assert not await notifier.cancel("p1")
    assert await notifier.get("p1") is None


async def test_pending_cap_rejects_new_ids_but_allows_replacement():
    notifier = LocalReminderNotifier(max_pending=2)
    await notifier.schedule(reminder("a"))
    await notifier.schedule(reminder("b"))

    with pytest.raises(NotificationError):
        await notifier.schedule(reminder("c"))

    assert await notifier.schedule(reminder("a", date(2024, 3, 1)))
    assert (await notifier.get("a")).fire_date == date(2024, 3, 1)
