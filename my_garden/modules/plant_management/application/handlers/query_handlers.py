# 📄 File: my_garden/modules/plant_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers questions about the garden: which plants there are, what one plant looks like,
# its photos, and when its next watering reminder is due.
# 🧪 Purpose (Technical Summary):
# CQRS query handlers for plant read operations returning Result-wrapped DTOs.
# 🔄 Connected Modules / Calls From:
# plants API endpoints, application container

import logging
from datetime import time
from typing import List

from my_garden.modules.plant_management.application.dto.plant_dto import PlantDTO, ReminderDTO
from my_garden.modules.plant_management.application.queries.plant_queries import (
    GetNextReminderQuery,
    GetPlantImageQuery,
    GetPlantQuery,
    ListPlantsQuery,
)
from my_garden.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from my_garden.modules.plant_management.domain.services.reminder_notifier import ReminderNotifier
from my_garden.modules.plant_management.domain.services.watering_scheduler import WateringScheduler
from my_garden.shared.core.exceptions import NotFoundError, PlantNotFoundError
from my_garden.shared.core.result import Result

logger = logging.getLogger(__name__)


class ListPlantsQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: ListPlantsQuery) -> Result[List[PlantDTO]]:
        plants = await self._plant_repository.list_all()
        return Result.ok([PlantDTO.from_domain(p, include_images=query.include_images) for p in plants])


class GetPlantQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: GetPlantQuery) -> Result[PlantDTO]:
        plant = await self._plant_repository.get_by_id(query.plant_id)
        if plant is None:
            logger.debug(f"Plant not found: {query.plant_id}")
            return Result.fail(PlantNotFoundError(query.plant_id))
        return Result.ok(PlantDTO.from_domain(plant, include_images=query.include_images))


class GetPlantImageQueryHandler:
    """Returns the raw JPEG bytes of one photo."""

    def __init__(self, plant_repository: PlantRepository):
        self._plant_repository = plant_repository

    async def handle(self, query: GetPlantImageQuery) -> Result[bytes]:
        plant = await self._plant_repository.get_by_id(query.plant_id)
        if plant is None:
            return Result.fail(PlantNotFoundError(query.plant_id))
        if query.index >= len(plant.images):
            return Result.fail(
                NotFoundError(
                    f"Plant {query.plant_id} has no image {query.index}",
                    resource_type="plant_image",
                    resource_id=f"{query.plant_id}/{query.index}",
                )
            )
        return Result.ok(plant.images[query.index])


class GetNextReminderQueryHandler:
    """
    Computes the next reminder for a plant and reports whether it is pending
    with the notifier.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        scheduler: WateringScheduler,
        notifier: ReminderNotifier,
        reminder_time: time = time(9, 0),
    ):
        self._plant_repository = plant_repository
        self._scheduler = scheduler
        self._notifier = notifier
        self._reminder_time = reminder_time

    async def handle(self, query: GetNextReminderQuery) -> Result[ReminderDTO]:
        plant = await self._plant_repository.get_by_id(query.plant_id)
        if plant is None:
            return Result.fail(PlantNotFoundError(query.plant_id))

        reminder = self._scheduler.next_reminder(plant)
        pending = await self._notifier.pending()
        scheduled = any(p == reminder for p in pending)
        return Result.ok(ReminderDTO.from_domain(reminder, self._reminder_time, scheduled=scheduled))
