# 📄 File: my_garden/shared/infrastructure/storage/snapshot.py

# 🧭 Purpose (Layman Explanation):
# Packs a whole collection into one blob and puts it in its storage slot, and unpacks it
# again at startup. If packing or saving fails, the old saved copy is left alone; if
# unpacking fails, the app simply starts with an empty collection.

# 🧪 Purpose (Technical Summary):
# Full-snapshot persistence helper shared by the plant and watered-mark repositories.
# Encode/write failures become failed PersistResult values; read/decode failures become
# failed Result values carrying the empty fallback. Neither raises.

# 🔄 Connected Modules / Calls From:
# SnapshotPlantRepository, SnapshotWateredMarkRepository

from typing import Callable, Generic, Protocol, TypeVar

from my_garden.shared.core.exceptions import GardenException
from my_garden.shared.core.result import PersistResult, Result
from my_garden.shared.utils.logging import get_logger

from .base import KeyValueStorage

logger = get_logger(__name__)

T = TypeVar("T")


class SnapshotCodec(Protocol[T]):
    def encode(self, value: T) -> bytes: ...

    def decode(self, blob: bytes) -> T: ...


class SnapshotSlot(Generic[T]):
    """
    One storage slot holding an encoded snapshot of a collection.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        codec: SnapshotCodec[T],
        empty: Callable[[], T],
    ):
        self.storage = storage
        self.key = key
        self.codec = codec
        self._empty = empty

    async def read(self) -> Result[T]:
        """
        Load and decode the slot.

        A missing slot is a successful empty load. Storage or decode failures
        return the empty value inside a failed Result.
        """
        try:
            blob = await self.storage.get(self.key)
            if blob is None:
                logger.info(f"Storage slot {self.key} is empty, starting fresh")
                return Result.ok(self._empty())
            value = self.codec.decode(blob)
        except GardenException as e:
            logger.warning(
                f"Could not load slot {self.key}, starting with no data: {e.message}",
                key=self.key,
                error_code=e.error_code,
            )
            return Result(False, value=self._empty(), error=e)

        return Result.ok(value)

    async def write(self, value: T) -> PersistResult:
        """
        Encode and store the complete snapshot.

        On failure the previously stored blob is untouched.
        """
        try:
            blob = self.codec.encode(value)
            await self.storage.set(self.key, blob)
        except GardenException as e:
            logger.warning(
                f"Snapshot for slot {self.key} was not persisted: {e.message}",
                key=self.key,
                error_code=e.error_code,
            )
            return PersistResult(False, error=e)

        logger.debug(f"Persisted snapshot for slot {self.key}", key=self.key, size=len(blob))
        return PersistResult(True)
