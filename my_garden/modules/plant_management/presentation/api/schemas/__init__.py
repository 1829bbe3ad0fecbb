# 📄 File: my_garden/modules/plant_management/presentation/api/schemas/__init__.py

from .plant_schemas import (
    AddPlantResponse,
    DeletePlantsResponse,
    PlantListResponse,
    PlantResponse,
    PlantUpdateResponse,
    ReminderResponse,
)

__all__ = [
    "AddPlantResponse",
    "DeletePlantsResponse",
    "PlantListResponse",
    "PlantResponse",
    "PlantUpdateResponse",
    "ReminderResponse",
]
