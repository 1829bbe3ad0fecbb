# 📄 File: my_garden/modules/plant_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# The things a user can ask to change about their plants.

from .add_plant import AddPlantCommand
from .add_plant_image import AddPlantImageCommand
from .delete_plants import DeletePlantsCommand

__all__ = [
    "AddPlantCommand",
    "AddPlantImageCommand",
    "DeletePlantsCommand",
]
