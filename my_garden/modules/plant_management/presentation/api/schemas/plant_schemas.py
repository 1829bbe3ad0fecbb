# 📄 File: my_garden/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the plant answers the API sends back, including any soft warnings
# such as "saved for now but not on disk".
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the plants endpoints, built from application DTOs.
# 🔄 Connected Modules / Calls From:
# my_garden.modules.plant_management.presentation.api.v1.plants

"""
Plant API Schemas

Response Schemas:
- PlantResponse: one plant (images as base64 only when asked for)
- PlantListResponse: the ordered garden
- AddPlantResponse: new plant plus its first reminder
- PlantUpdateResponse: plant after a photo was added
- DeletePlantsResponse: removed plants and cancelled reminders
- ReminderResponse: next watering reminder of a plant
"""

from typing import List

from pydantic import BaseModel, Field

from my_garden.modules.plant_management.application.dto.plant_dto import PlantDTO, ReminderDTO

PlantResponse = PlantDTO
ReminderResponse = ReminderDTO


class PlantListResponse(BaseModel):
    plants: List[PlantResponse]
    count: int


class AddPlantResponse(BaseModel):
    plant: PlantResponse
    reminder: ReminderResponse
    persisted: bool
    warnings: List[str] = Field(default_factory=list)


class PlantUpdateResponse(BaseModel):
    plant: PlantResponse
    warnings: List[str] = Field(default_factory=list)


class DeletePlantsResponse(BaseModel):
    removed: List[PlantResponse]
    cancelled_reminders: int
    persisted: bool
    warnings: List[str] = Field(default_factory=list)
