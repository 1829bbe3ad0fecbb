# 📄 File: my_garden/modules/plant_management/infrastructure/persistence/plant_repository_impl.py
#
# 🧭 Purpose (Layman Explanation):
# Keeps the plant list in memory and saves the whole list to its storage slot
# every time something changes, like the phone app saving to its preferences.
#
# 🧪 Purpose (Technical Summary):
# Concrete PlantRepository with full-snapshot semantics: one in-memory ordered list,
# one writer, whole-collection re-serialization after each mutation through SnapshotSlot.
#
# 🔗 Dependencies:
# - PlantRepository interface, Plant model
# - SnapshotSlot / KeyValueStorage (persistence boundary)
# - PlantListCodec
#
# 🔄 Connected Modules / Calls From:
# - Plant command and query handlers
# - Application container (startup load)

"""
Snapshot Plant Repository

Mutations never raise on persistence problems: the in-memory collection keeps
the change and the caller receives a PersistResult saying whether the snapshot
reached storage. Loading an unreadable slot yields an empty garden.
"""

from typing import List, Optional, Sequence, Tuple

from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from my_garden.shared.core.exceptions import PlantNotFoundError, ValidationError
from my_garden.shared.core.result import PersistResult, Result
from my_garden.shared.infrastructure.storage.base import KeyValueStorage
from my_garden.shared.infrastructure.storage.snapshot import SnapshotSlot
from my_garden.shared.utils.logging import get_logger

from .codec import PlantListCodec

logger = get_logger(__name__)

DEFAULT_PLANTS_KEY = "plants_key"


class SnapshotPlantRepository(PlantRepository):
    """
    In-memory plant list persisted as one encoded blob.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_PLANTS_KEY,
        codec: Optional[PlantListCodec] = None,
    ):
        self._slot: SnapshotSlot[List[Plant]] = SnapshotSlot(
            storage, key, codec or PlantListCodec(), empty=list
        )
        self._plants: List[Plant] = []

    async def load(self) -> Result[List[Plant]]:
        result = await self._slot.read()
        self._plants = list(result.value)
        logger.info(f"Loaded {len(self._plants)} plants", key=self._slot.key, recovered=not result.success)
        return Result(
            result.success,
            value=[plant.model_copy() for plant in self._plants],
            error=result.error,
        )

    async def list_all(self) -> List[Plant]:
        return [plant.model_copy() for plant in self._plants]

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        index = self._index_of(plant_id)
        if index is None:
            return None
        return self._plants[index].model_copy()

    async def append(self, plant: Plant) -> PersistResult:
        self._plants.append(plant.model_copy())
        logger.debug(f"Appended plant {plant.plant_id}", count=len(self._plants))
        return await self._persist()

    async def update_images(self, plant_id: str, new_image: bytes) -> Tuple[Plant, PersistResult]:
        index = self._index_of(plant_id)
        if index is None:
            raise PlantNotFoundError(plant_id)

        plant = self._plants[index]
        plant.add_image(new_image)
        logger.debug(f"Added image to plant {plant_id}", image_count=len(plant.images))
        return plant.model_copy(), await self._persist()

    async def remove_at(self, indices: Sequence[int]) -> Tuple[List[Plant], PersistResult]:
        positions = set(indices)
        invalid = sorted(i for i in positions if i < 0 or i >= len(self._plants))
        if invalid:
            raise ValidationError(
                "Plant index out of range",
                field="indices",
                value=invalid,
                constraint=f"0 <= index < {len(self._plants)}",
            )

        removed = [plant for i, plant in enumerate(self._plants) if i in positions]
        self._plants = [plant for i, plant in enumerate(self._plants) if i not in positions]
        logger.debug(f"Removed {len(removed)} plants", remaining=len(self._plants))
        return removed, await self._persist()

    def _index_of(self, plant_id: str) -> Optional[int]:
        for index, plant in enumerate(self._plants):
            if plant.plant_id == plant_id:
                return index
        return None

    async def _persist(self) -> PersistResult:
        return await self._slot.write(self._plants)
