# 📄 File: my_garden/shared/infrastructure/storage/__init__.py
# 🧭 Purpose (Layman Explanation):
# Picks where the garden keeps its data (memory, a folder, or Redis) based on the settings.
# 🧪 Purpose (Technical Summary):
# Storage package exports and the backend factory driven by STORAGE_BACKEND.
# 🔄 Connected Modules / Calls From:
# my_garden.container (application wiring)

from my_garden.shared.config.settings import Settings

from .base import KeyValueStorage
from .file_storage import FileStorage
from .memory_storage import InMemoryStorage
from .redis_storage import RedisStorage
from .snapshot import SnapshotCodec, SnapshotSlot


def create_storage(settings: Settings) -> KeyValueStorage:
    """Build the storage backend named by ``settings.STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryStorage()
    if settings.STORAGE_BACKEND == "redis":
        return RedisStorage(settings.REDIS_URL, max_connections=settings.REDIS_MAX_CONNECTIONS)
    return FileStorage(settings.STORAGE_DIR)


__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "FileStorage",
    "RedisStorage",
    "SnapshotCodec",
    "SnapshotSlot",
    "create_storage",
]
