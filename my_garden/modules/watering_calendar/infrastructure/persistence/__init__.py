# 📄 File: my_garden/modules/watering_calendar/infrastructure/persistence/__init__.py
# 🧭 Purpose (Layman Explanation):
# Saving and loading watered days.

from .codec import WateredMarkCodec
from .watered_mark_repository_impl import SnapshotWateredMarkRepository

__all__ = ["SnapshotWateredMarkRepository", "WateredMarkCodec"]
