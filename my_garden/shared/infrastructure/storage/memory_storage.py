# 📄 File: my_garden/shared/infrastructure/storage/memory_storage.py
# 🧭 Purpose (Layman Explanation):
# A storage drawer that only lives in memory; handy for tests and quick demos.
# 🧪 Purpose (Technical Summary):
# Dict-backed KeyValueStorage implementation. Values are copied on the way in
# so callers cannot mutate a stored blob.

from typing import Dict, Optional

from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._slots: Dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._slots[key] = bytes(value)

    async def delete(self, key: str) -> bool:
        return self._slots.pop(key, None) is not None

    def snapshot(self) -> Dict[str, bytes]:
        return dict(self._slots)
