# 📄 File: my_garden/modules/plant_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Summaries of plants and reminders handed back to callers.

from .plant_dto import PlantDTO, ReminderDTO, AddPlantResultDTO, DeletePlantsResultDTO

__all__ = [
    "PlantDTO",
    "ReminderDTO",
    "AddPlantResultDTO",
    "DeletePlantsResultDTO",
]
