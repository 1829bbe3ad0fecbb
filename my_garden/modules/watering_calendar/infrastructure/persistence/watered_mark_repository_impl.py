# 📄 File: my_garden/modules/watering_calendar/infrastructure/persistence/watered_mark_repository_impl.py
#
# 🧭 Purpose (Layman Explanation):
# Remembers which days carry a droplet and saves the whole set after every change.
#
# 🧪 Purpose (Technical Summary):
# Concrete WateredMarkRepository: date-keyed dict in memory, snapshot persisted
# (sorted by date) through SnapshotSlot in its own storage slot.
#
# 🔄 Connected Modules / Calls From:
# - Calendar command and query handlers
# - Application container (startup load)

from datetime import date
from typing import Dict, List, Optional

from my_garden.modules.watering_calendar.domain.models.calendar import WateredMark
from my_garden.modules.watering_calendar.domain.repositories.watered_mark_repository import (
    WateredMarkRepository,
)
from my_garden.shared.core.result import PersistResult, Result
from my_garden.shared.infrastructure.storage.base import KeyValueStorage
from my_garden.shared.infrastructure.storage.snapshot import SnapshotSlot
from my_garden.shared.utils.logging import get_logger

from .codec import WateredMarkCodec

logger = get_logger(__name__)

DEFAULT_WATERED_MARKS_KEY = "watered_marks_key"


class SnapshotWateredMarkRepository(WateredMarkRepository):
    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_WATERED_MARKS_KEY,
        codec: Optional[WateredMarkCodec] = None,
    ):
        self._slot: SnapshotSlot[List[WateredMark]] = SnapshotSlot(
            storage, key, codec or WateredMarkCodec(), empty=list
        )
        self._marks: Dict[date, WateredMark] = {}

    async def load(self) -> Result[List[WateredMark]]:
        result = await self._slot.read()
        self._marks = {mark.date: mark for mark in result.value}
        logger.info(f"Loaded {len(self._marks)} watered marks", key=self._slot.key, recovered=not result.success)
        return Result(result.success, value=self._sorted(), error=result.error)

    async def mark(self, mark: WateredMark) -> PersistResult:
        self._marks[mark.date] = mark
        logger.debug(f"Marked {mark.date.isoformat()} as watered", marker=mark.marker)
        return await self._persist()

    async def clear(self, day: date) -> Optional[PersistResult]:
        if self._marks.pop(day, None) is None:
            return None
        logger.debug(f"Cleared watered mark on {day.isoformat()}")
        return await self._persist()

    async def get(self, day: date) -> Optional[WateredMark]:
        return self._marks.get(day)

    async def between(self, start: date, end: date) -> Dict[date, WateredMark]:
        return {day: mark for day, mark in self._marks.items() if start <= day <= end}

    def _sorted(self) -> List[WateredMark]:
        return [self._marks[day] for day in sorted(self._marks)]

    async def _persist(self) -> PersistResult:
        return await self._slot.write(self._sorted())
