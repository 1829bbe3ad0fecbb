# 📄 File: my_garden/container.py
#
# 🧭 Purpose (Layman Explanation):
# Puts the garden app together: picks the storage, creates the plant list and the
# watered-days list, the reminder center and all the workers that answer requests,
# then loads saved data when the app starts and tidies up when it stops.
#
# 🧪 Purpose (Technical Summary):
# Composition root. Builds repositories, domain services, notifier and handlers from
# Settings, shares one asyncio.Lock between every mutating handler (single writer),
# and owns the startup (load snapshots, request authorization, restore reminders)
# and shutdown (close storage) sequence used by the FastAPI lifespan.
#
# 🔗 Dependencies:
# - Settings
# - storage factory, ImageProcessor
# - plant_management and watering_calendar modules
#
# 🔄 Connected Modules / Calls From:
# - my_garden.main (lifespan, app.state.container)
# - presentation dependencies
# - tests

import asyncio
from datetime import date
from typing import Callable, Optional

from my_garden.modules.plant_management.application.handlers import (
    AddPlantCommandHandler,
    AddPlantImageCommandHandler,
    DeletePlantsCommandHandler,
    GetNextReminderQueryHandler,
    GetPlantImageQueryHandler,
    GetPlantQueryHandler,
    ListPlantsQueryHandler,
)
from my_garden.modules.plant_management.domain.services.reminder_notifier import ReminderNotifier
from my_garden.modules.plant_management.domain.services.watering_scheduler import WateringScheduler
from my_garden.modules.plant_management.infrastructure.external.local_notifier import LocalReminderNotifier
from my_garden.modules.plant_management.infrastructure.persistence.plant_repository_impl import (
    SnapshotPlantRepository,
)
from my_garden.modules.watering_calendar.application.handlers import (
    ClearWateredMarkCommandHandler,
    GetCalendarMonthQueryHandler,
    MarkDayWateredCommandHandler,
)
from my_garden.modules.watering_calendar.domain.services.calendar_grid_builder import CalendarGridBuilder
from my_garden.modules.watering_calendar.infrastructure.persistence.watered_mark_repository_impl import (
    SnapshotWateredMarkRepository,
)
from my_garden.shared.config.settings import Settings
from my_garden.shared.core.exceptions import NotificationError
from my_garden.shared.infrastructure.images.image_processor import ImageProcessor
from my_garden.shared.infrastructure.storage import KeyValueStorage, create_storage
from my_garden.shared.utils.logging import get_logger

logger = get_logger(__name__)


class AppContainer:
    """
    Wires every collaborator of the application from one Settings instance.

    Args:
        settings: Application settings
        storage: Storage backend; built from STORAGE_BACKEND when omitted
        notifier: Reminder notifier; a LocalReminderNotifier when omitted
        today: Clock used for new plants, the calendar and reminder restore
    """

    def __init__(
        self,
        settings: Settings,
        storage: Optional[KeyValueStorage] = None,
        notifier: Optional[ReminderNotifier] = None,
        today: Callable[[], date] = date.today,
    ):
        self.settings = settings
        self.today = today
        self.storage = storage or create_storage(settings)
        self.write_lock = asyncio.Lock()

        self.plant_repository = SnapshotPlantRepository(self.storage, key=settings.PLANTS_STORAGE_KEY)
        self.watered_mark_repository = SnapshotWateredMarkRepository(
            self.storage, key=settings.WATERED_MARKS_STORAGE_KEY
        )

        self.scheduler = WateringScheduler(
            title_template=settings.REMINDER_TITLE_TEMPLATE,
            body_template=settings.REMINDER_BODY_TEMPLATE,
        )
        self.notifier = notifier or LocalReminderNotifier(
            permission_granted=settings.NOTIFICATIONS_ENABLED,
            reminder_time=settings.REMINDER_TIME,
        )
        self.image_processor = ImageProcessor(
            jpeg_quality=settings.IMAGE_JPEG_QUALITY,
            max_size=settings.MAX_IMAGE_SIZE,
            max_pixels=settings.MAX_IMAGE_PIXELS,
        )
        self.grid_builder = CalendarGridBuilder(first_weekday=settings.FIRST_WEEKDAY)

        # Plant handlers
        self.add_plant_handler = AddPlantCommandHandler(
            self.plant_repository,
            self.scheduler,
            self.notifier,
            self.image_processor,
            today=today,
            reminder_time=settings.REMINDER_TIME,
            min_frequency=settings.WATERING_FREQUENCY_MIN,
            max_frequency=settings.WATERING_FREQUENCY_MAX,
            write_lock=self.write_lock,
        )
        self.add_plant_image_handler = AddPlantImageCommandHandler(
            self.plant_repository, self.image_processor, write_lock=self.write_lock
        )
        self.delete_plants_handler = DeletePlantsCommandHandler(
            self.plant_repository, self.notifier, write_lock=self.write_lock
        )
        self.list_plants_handler = ListPlantsQueryHandler(self.plant_repository)
        self.get_plant_handler = GetPlantQueryHandler(self.plant_repository)
        self.get_plant_image_handler = GetPlantImageQueryHandler(self.plant_repository)
        self.get_next_reminder_handler = GetNextReminderQueryHandler(
            self.plant_repository, self.scheduler, self.notifier, reminder_time=settings.REMINDER_TIME
        )

        # Calendar handlers
        self.get_calendar_month_handler = GetCalendarMonthQueryHandler(
            self.grid_builder,
            self.watered_mark_repository,
            today=today,
            title_format=settings.CALENDAR_TITLE_FORMAT,
        )
        self.mark_day_watered_handler = MarkDayWateredCommandHandler(
            self.watered_mark_repository,
            default_marker=settings.WATERED_MARKER,
            write_lock=self.write_lock,
        )
        self.clear_watered_mark_handler = ClearWateredMarkCommandHandler(
            self.watered_mark_repository, write_lock=self.write_lock
        )

    async def startup(self) -> None:
        """
        Load both snapshots, ask for notification permission and re-register the
        reminders of loaded plants that are still due.
        """
        plants = await self.plant_repository.load()
        if not plants.success:
            logger.warning("Plant data could not be read; starting with an empty garden")
        marks = await self.watered_mark_repository.load()
        if not marks.success:
            logger.warning("Watered marks could not be read; starting with an empty calendar")

        if await self.notifier.request_authorization():
            await self._restore_reminders()

        logger.info(
            "Container started",
            storage_backend=self.storage.backend_name,
            plants=len(plants.value),
            watered_marks=len(marks.value),
        )

    async def shutdown(self) -> None:
        await self.storage.close()
        logger.info("Container stopped", storage_backend=self.storage.backend_name)

    async def _restore_reminders(self) -> None:
        today = self.today()
        restored = 0
        for plant in await self.plant_repository.list_all():
            reminder = self.scheduler.next_reminder(plant)
            if reminder.fire_date < today:
                continue
            try:
                if await self.notifier.schedule(reminder):
                    restored += 1
            except NotificationError as e:
                logger.warning(f"Reminder {reminder.id} not restored: {e.message}", reminder_id=reminder.id)
        logger.info(f"Restored {restored} pending reminders")
