# 📄 File: my_garden/shared/infrastructure/storage/base.py

# 🧭 Purpose (Layman Explanation):
# Describes the app's "preferences drawer": named slots that each hold one packed-up blob
# of data, without caring whether the drawer is memory, a folder on disk or Redis.

# 🧪 Purpose (Technical Summary):
# Abstract key-value storage port used by snapshot repositories. Each key holds a single
# opaque byte blob that is read once at startup and overwritten on every mutation.

# 🔄 Connected Modules / Calls From:
# Snapshot plant and watered-mark repositories, storage factory, health endpoint

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """
    Storage port holding one opaque blob per named slot.

    Implementation Notes:
    - Backends raise StorageError for any I/O failure
    - get returns None for a slot that was never written
    - set replaces the previous blob entirely
    """

    backend_name = "abstract"

    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        """
        Read the blob stored under key.

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """
        Replace the blob stored under key.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove the slot; returns False when it did not exist."""
        pass

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        """Release backend resources."""
        return None
