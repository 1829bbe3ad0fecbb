# 📄 File: my_garden/modules/watering_calendar/domain/repositories/watered_mark_repository.py
# 🧭 Purpose (Layman Explanation):
# The contract for remembering which calendar days were marked as watered.
# 🧪 Purpose (Technical Summary):
# Repository interface for WateredMark values keyed by date, with the same
# full-snapshot persistence semantics as the plant collection.
# 🔄 Connected Modules / Calls From:
# Calendar command/query handlers, SnapshotWateredMarkRepository

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional

from my_garden.shared.core.result import PersistResult, Result

from ..models.calendar import WateredMark


class WateredMarkRepository(ABC):
    """Repository interface for watered calendar days."""

    @abstractmethod
    async def load(self) -> Result[List[WateredMark]]:
        """Read persisted marks; undecodable data yields no marks and a failed Result."""
        pass

    @abstractmethod
    async def mark(self, mark: WateredMark) -> PersistResult:
        """Set (or replace) the marker for a day."""
        pass

    @abstractmethod
    async def clear(self, day: date) -> Optional[PersistResult]:
        """Remove the mark for a day; None when the day was not marked."""
        pass

    @abstractmethod
    async def get(self, day: date) -> Optional[WateredMark]:
        pass

    @abstractmethod
    async def between(self, start: date, end: date) -> Dict[date, WateredMark]:
        """Marks with start <= date <= end, keyed by date."""
        pass
