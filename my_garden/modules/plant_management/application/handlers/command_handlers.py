# 📄 File: my_garden/modules/plant_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action processors" for plants: they add a plant (and set up its watering reminder),
# add photos to a plant, and remove plants, reporting back what happened.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating validation, image processing, the plant repository,
# the watering scheduler and the notifier. Every handler returns a Result; recoverable
# problems (snapshot not persisted, notifications not authorized) become warnings.
#
# 🔗 Dependencies:
# - plant commands, DTOs
# - domain repository/service interfaces
# - shared ImageProcessor, validators, structured logging
#
# 🔄 Connected Modules / Calls From:
# - plants API endpoints
# - Application container (handler construction)

__all__ = [
    "AddPlantCommandHandler",
    "AddPlantImageCommandHandler",
    "DeletePlantsCommandHandler",
]

import asyncio
from datetime import date, time
from typing import Callable, List, Optional

from my_garden.modules.plant_management.application.commands.add_plant import AddPlantCommand
from my_garden.modules.plant_management.application.commands.add_plant_image import AddPlantImageCommand
from my_garden.modules.plant_management.application.commands.delete_plants import DeletePlantsCommand
from my_garden.modules.plant_management.application.dto.plant_dto import (
    AddPlantResultDTO,
    DeletePlantsResultDTO,
    PlantDTO,
    ReminderDTO,
)
from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.domain.models.reminder import ReminderRequest
from my_garden.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from my_garden.modules.plant_management.domain.services.reminder_notifier import ReminderNotifier
from my_garden.modules.plant_management.domain.services.watering_scheduler import WateringScheduler
from my_garden.shared.core.exceptions import (
    GardenException,
    InvalidImageError,
    NotificationError,
    ValidationError,
)
from my_garden.shared.core.result import PersistResult, Result
from my_garden.shared.infrastructure.images.image_processor import ImageProcessor
from my_garden.shared.utils.logging import get_logger
from my_garden.shared.utils.validators import (
    validate_plant_description,
    validate_plant_name,
    validate_watering_frequency,
)

logger = get_logger(__name__)

NOT_PERSISTED_WARNING = "Changes are kept for this session but could not be saved to storage"
NOT_AUTHORIZED_WARNING = "Notifications are not authorized; the watering reminder will not be delivered"


def _persist_warnings(persist: PersistResult) -> List[str]:
    return [] if persist.persisted else [NOT_PERSISTED_WARNING]


class AddPlantCommandHandler:
    """
    Handles plant creation: validation, optional photo, append, reminder scheduling.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        scheduler: WateringScheduler,
        notifier: ReminderNotifier,
        image_processor: ImageProcessor,
        today: Callable[[], date] = date.today,
        reminder_time: time = time(9, 0),
        min_frequency: int = 1,
        max_frequency: int = 30,
        write_lock: Optional[asyncio.Lock] = None,
    ):
        self._plant_repository = plant_repository
        self._scheduler = scheduler
        self._notifier = notifier
        self._image_processor = image_processor
        self._today = today
        self._reminder_time = reminder_time
        self._min_frequency = min_frequency
        self._max_frequency = max_frequency
        self._write_lock = write_lock or asyncio.Lock()

    async def handle(self, command: AddPlantCommand) -> Result[AddPlantResultDTO]:
        """
        Register a plant.

        An empty name or out-of-range frequency refuses the write: no plant is
        created and a failed Result is returned.
        """
        for validation, field in (
            (validate_plant_name(command.name), "name"),
            (validate_plant_description(command.description), "description"),
            (
                validate_watering_frequency(
                    command.watering_frequency_days, self._min_frequency, self._max_frequency
                ),
                "watering_frequency_days",
            ),
        ):
            if not validation.is_valid:
                logger.info(f"Add plant refused: {validation.error_message}", field=field)
                return Result.fail(ValidationError(validation.error_message, field=field))

        warnings: List[str] = []

        image: Optional[bytes] = None
        if command.image:
            try:
                image = self._image_processor.to_jpeg(command.image)
            except InvalidImageError as e:
                warnings.append(f"Photo was not attached: {e.message}")

        plant = Plant.create_new_plant(
            name=command.name,
            description=command.description,
            image=image,
            watering_frequency_days=command.watering_frequency_days,
            today=self._today(),
        )

        async with self._write_lock:
            persist = await self._plant_repository.append(plant)
        warnings.extend(_persist_warnings(persist))

        reminder = self._scheduler.next_reminder(plant)
        scheduled = await _schedule_reminder(self._notifier, reminder, warnings)

        logger.log_business_event(
            "plant_added",
            f"Plant {plant.name} added",
            entity_id=plant.plant_id,
            entity_type="plant",
            extra={"persisted": persist.persisted, "reminder_scheduled": scheduled},
        )

        return Result.ok(
            AddPlantResultDTO(
                plant=PlantDTO.from_domain(plant),
                reminder=ReminderDTO.from_domain(reminder, self._reminder_time, scheduled=scheduled),
                persisted=persist.persisted,
            ),
            warnings=warnings,
        )


class AddPlantImageCommandHandler:
    """
    Handles appending a photo to an existing plant.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        image_processor: ImageProcessor,
        write_lock: Optional[asyncio.Lock] = None,
    ):
        self._plant_repository = plant_repository
        self._image_processor = image_processor
        self._write_lock = write_lock or asyncio.Lock()

    async def handle(self, command: AddPlantImageCommand) -> Result[PlantDTO]:
        try:
            image = self._image_processor.to_jpeg(command.image)
            async with self._write_lock:
                plant, persist = await self._plant_repository.update_images(command.plant_id, image)
        except GardenException as e:
            logger.info(f"Add image refused for plant {command.plant_id}: {e.message}", error_code=e.error_code)
            return Result.fail(e)

        logger.log_business_event(
            "plant_image_added",
            f"Photo added to plant {plant.name}",
            entity_id=plant.plant_id,
            entity_type="plant",
            extra={"image_count": len(plant.images), "persisted": persist.persisted},
        )
        return Result.ok(PlantDTO.from_domain(plant), warnings=_persist_warnings(persist))


class DeletePlantsCommandHandler:
    """
    Handles removal of plants by position, cancelling their pending reminders.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        notifier: ReminderNotifier,
        write_lock: Optional[asyncio.Lock] = None,
    ):
        self._plant_repository = plant_repository
        self._notifier = notifier
        self._write_lock = write_lock or asyncio.Lock()

    async def handle(self, command: DeletePlantsCommand) -> Result[DeletePlantsResultDTO]:
        try:
            async with self._write_lock:
                removed, persist = await self._plant_repository.remove_at(command.indices)
        except ValidationError as e:
            logger.info(f"Delete refused: {e.message}", indices=command.indices)
            return Result.fail(e)

        cancelled = 0
        for plant in removed:
            if await self._notifier.cancel(WateringScheduler.reminder_id_for(plant.plant_id)):
                cancelled += 1

        logger.log_business_event(
            "plants_removed",
            f"Removed {len(removed)} plants",
            entity_type="plant",
            extra={
                "plant_ids": [plant.plant_id for plant in removed],
                "cancelled_reminders": cancelled,
                "persisted": persist.persisted,
            },
        )
        return Result.ok(
            DeletePlantsResultDTO(
                removed=[PlantDTO.from_domain(plant) for plant in removed],
                cancelled_reminders=cancelled,
                persisted=persist.persisted,
            ),
            warnings=_persist_warnings(persist),
        )


async def _schedule_reminder(notifier: ReminderNotifier, reminder: ReminderRequest, warnings: List[str]) -> bool:
    try:
        scheduled = await notifier.schedule(reminder)
    except NotificationError as e:
        logger.warning(f"Reminder {reminder.id} not scheduled: {e.message}", reminder_id=reminder.id)
        warnings.append(f"Reminder not scheduled: {e.message}")
        return False

    if not scheduled:
        warnings.append(NOT_AUTHORIZED_WARNING)
    return scheduled
