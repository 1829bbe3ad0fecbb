# 📄 File: my_garden/modules/plant_management/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Read-only questions about plants.

from .plant_queries import (
    ListPlantsQuery,
    GetPlantQuery,
    GetPlantImageQuery,
    GetNextReminderQuery,
)

__all__ = [
    "ListPlantsQuery",
    "GetPlantQuery",
    "GetPlantImageQuery",
    "GetNextReminderQuery",
]
