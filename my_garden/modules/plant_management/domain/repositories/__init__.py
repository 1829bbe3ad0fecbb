# 📄 File: my_garden/modules/plant_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Contracts for storing plants.

from .plant_repository import PlantRepository

__all__ = ["PlantRepository"]
