# 📄 File: my_garden/modules/plant_management/application/dto/plant_dto.py
# 🧭 Purpose (Layman Explanation):
# Read-friendly summaries of plants and reminders that the screens and the API show,
# without dragging raw photo bytes around unless they are asked for.
# 🧪 Purpose (Technical Summary):
# Data transfer objects mapping domain entities to presentation-safe structures.
# 🔄 Connected Modules / Calls From:
# Plant command/query handlers, plant API schemas

import base64
from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field

from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.domain.models.reminder import ReminderRequest


class PlantDTO(BaseModel):
    """Plant as shown in the garden list and detail screens."""

    plant_id: str
    name: str
    description: str
    image_count: int
    images: Optional[List[str]] = Field(default=None, description="Base64 JPEGs when requested")
    watering_frequency_days: int
    last_watered_date: date
    next_watering_date: date

    @classmethod
    def from_domain(cls, plant: Plant, include_images: bool = False) -> "PlantDTO":
        return cls(
            plant_id=plant.plant_id,
            name=plant.name,
            description=plant.description,
            image_count=len(plant.images),
            images=[base64.b64encode(img).decode("ascii") for img in plant.images] if include_images else None,
            watering_frequency_days=plant.watering_frequency_days,
            last_watered_date=plant.last_watered_date,
            next_watering_date=plant.next_watering_date,
        )


class ReminderDTO(BaseModel):
    id: str
    title: str
    body: str
    fire_date: date
    fire_at: datetime
    scheduled: bool = False

    @classmethod
    def from_domain(cls, request: ReminderRequest, reminder_time: time, scheduled: bool = False) -> "ReminderDTO":
        return cls(
            id=request.id,
            title=request.title,
            body=request.body,
            fire_date=request.fire_date,
            fire_at=request.fire_at(reminder_time),
            scheduled=scheduled,
        )


class AddPlantResultDTO(BaseModel):
    plant: PlantDTO
    reminder: ReminderDTO
    persisted: bool


class DeletePlantsResultDTO(BaseModel):
    removed: List[PlantDTO]
    cancelled_reminders: int
    persisted: bool
