# 📄 File: my_garden/modules/plant_management/presentation/api/__init__.py

from .v1.plants import plants_router

__all__ = ["plants_router"]
