# 📄 File: my_garden/modules/plant_management/infrastructure/persistence/__init__.py
# 🧭 Purpose (Layman Explanation):
# Saving and loading the plant list.

from .codec import PlantListCodec
from .plant_repository_impl import SnapshotPlantRepository

__all__ = ["PlantListCodec", "SnapshotPlantRepository"]
