# 📄 File: my_garden/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for keeping the list of plants: adding one, adding a photo,
# removing some, and reading them back, without saying where they are stored.
# 🧪 Purpose (Technical Summary):
# Repository interface for the ordered Plant collection following the Repository
# pattern and dependency inversion. Mutations return PersistResult values describing
# whether the full snapshot reached storage.
# 🔗 Dependencies:
# Domain models (Plant), shared result types, abc
# 🔄 Connected Modules / Calls From:
# Plant command/query handlers, SnapshotPlantRepository, application container

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from my_garden.shared.core.result import PersistResult, Result

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for the user's ordered plant collection.

    Implementation Notes:
    - The collection is held in memory and written as one snapshot on every change
    - There is exactly one writer; no locking or delta persistence
    - A failed write never raises: it is reported through PersistResult and the
      previously persisted snapshot stays in place
    """

    @abstractmethod
    async def load(self) -> Result[List[Plant]]:
        """
        Read the persisted collection into memory.

        Returns:
            Result with the loaded plants. An unreadable or undecodable slot
            yields an empty collection and a failed Result carrying the error.
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Plant]:
        """Return the plants in collection order."""
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        """
        Get plant by ID.

        Returns:
            Plant if found, None otherwise
        """
        pass

    @abstractmethod
    async def append(self, plant: Plant) -> PersistResult:
        """
        Add a plant at the end of the collection.
        """
        pass

    @abstractmethod
    async def update_images(self, plant_id: str, new_image: bytes) -> Tuple[Plant, PersistResult]:
        """
        Append an image to a plant's image list.

        Returns:
            The updated plant and the persistence outcome

        Raises:
            PlantNotFoundError: If no plant has this id
        """
        pass

    @abstractmethod
    async def remove_at(self, indices: Sequence[int]) -> Tuple[List[Plant], PersistResult]:
        """
        Remove the plants at the given positions.

        Remaining plants keep their relative order.

        Returns:
            The removed plants (in collection order) and the persistence outcome

        Raises:
            ValidationError: If any index is out of range; nothing is removed
        """
        pass
