# 📄 File: my_garden/shared/infrastructure/images/__init__.py
# 🧭 Purpose (Layman Explanation):
# Photo preparation tools for plant pictures.

from .image_processor import ImageProcessor

__all__ = ["ImageProcessor"]
