# 📄 File: my_garden/modules/watering_calendar/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Contracts for storing watered days.

from .watered_mark_repository import WateredMarkRepository

__all__ = ["WateredMarkRepository"]
