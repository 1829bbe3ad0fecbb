# 📄 File: my_garden/modules/plant_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out plant commands and answer plant questions.

from .command_handlers import (
    AddPlantCommandHandler,
    AddPlantImageCommandHandler,
    DeletePlantsCommandHandler,
)
from .query_handlers import (
    ListPlantsQueryHandler,
    GetPlantQueryHandler,
    GetPlantImageQueryHandler,
    GetNextReminderQueryHandler,
)

__all__ = [
    "AddPlantCommandHandler",
    "AddPlantImageCommandHandler",
    "DeletePlantsCommandHandler",
    "ListPlantsQueryHandler",
    "GetPlantQueryHandler",
    "GetPlantImageQueryHandler",
    "GetNextReminderQueryHandler",
]
