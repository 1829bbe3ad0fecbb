# 📄 File: my_garden/modules/watering_calendar/application/handlers/calendar_handlers.py
#
# 🧭 Purpose (Layman Explanation):
# Draws the month page (with droplets on watered days and today highlighted) and
# records or removes the droplet when the user confirms "I watered today".
#
# 🧪 Purpose (Technical Summary):
# Command/query handlers for the calendar bounded context. The month query combines
# CalendarGridBuilder cells with stored WateredMarks; commands mutate the mark
# repository under the shared write lock and report persistence as warnings.
#
# 🔗 Dependencies:
# - CalendarGridBuilder, shift_month
# - WateredMarkRepository
# - structured logging
#
# 🔄 Connected Modules / Calls From:
# - calendar API endpoints
# - Application container

import asyncio
from datetime import date
from typing import Callable, Optional

from my_garden.modules.watering_calendar.application.commands.watered_marks import (
    ClearWateredMarkCommand,
    MarkDayWateredCommand,
)
from my_garden.modules.watering_calendar.application.dto.calendar_dto import (
    ClearWateredMarkResultDTO,
    WateredMarkResultDTO,
)
from my_garden.modules.watering_calendar.application.queries.calendar_queries import GetCalendarMonthQuery
from my_garden.modules.watering_calendar.domain.models.calendar import (
    CalendarDay,
    CalendarMonth,
    WateredMark,
)
from my_garden.modules.watering_calendar.domain.repositories.watered_mark_repository import (
    WateredMarkRepository,
)
from my_garden.modules.watering_calendar.domain.services.calendar_grid_builder import (
    CalendarGridBuilder,
    shift_month,
)
from my_garden.shared.core.exceptions import ValidationError
from my_garden.shared.core.result import Result
from my_garden.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WATERED_MARKER = "💧"
DEFAULT_TITLE_FORMAT = "%B %Y"
NOT_PERSISTED_WARNING = "Changes are kept for this session but could not be saved to storage"


class GetCalendarMonthQueryHandler:
    """
    Builds the month view for a reference date, with watered markers and today flagged.
    """

    def __init__(
        self,
        grid_builder: CalendarGridBuilder,
        watered_marks: WateredMarkRepository,
        today: Callable[[], date] = date.today,
        title_format: str = DEFAULT_TITLE_FORMAT,
    ):
        self._grid_builder = grid_builder
        self._watered_marks = watered_marks
        self._today = today
        self._title_format = title_format

    async def handle(self, query: GetCalendarMonthQuery) -> Result[CalendarMonth]:
        today = self._today()
        try:
            reference = shift_month(query.reference_date or today, query.month_offset)
            cells = self._grid_builder.build(reference)
        except ValidationError as e:
            return Result.fail(e)
        except (ValueError, OverflowError) as e:
            return Result.fail(
                ValidationError(
                    f"Month is out of range: {e}",
                    field="month_offset",
                    value=query.month_offset,
                )
            )

        marks = await self._watered_marks.between(cells[0].date, cells[-1].date)

        days = []
        for cell in cells:
            mark = marks.get(cell.date)
            days.append(
                CalendarDay(
                    date=cell.date,
                    day=cell.day,
                    is_current_month=cell.is_current_month,
                    is_today=cell.date == today,
                    marker=mark.marker if mark else None,
                )
            )

        return Result.ok(
            CalendarMonth(
                reference_date=reference,
                title=reference.strftime(self._title_format),
                first_weekday=self._grid_builder.first_weekday,
                weekday_labels=self._grid_builder.weekday_labels(),
                days=days,
            )
        )


class MarkDayWateredCommandHandler:
    def __init__(
        self,
        watered_marks: WateredMarkRepository,
        default_marker: str = DEFAULT_WATERED_MARKER,
        write_lock: Optional[asyncio.Lock] = None,
    ):
        self._watered_marks = watered_marks
        self._default_marker = default_marker
        self._write_lock = write_lock or asyncio.Lock()

    async def handle(self, command: MarkDayWateredCommand) -> Result[WateredMarkResultDTO]:
        mark = WateredMark(date=command.day, marker=command.marker or self._default_marker)

        async with self._write_lock:
            persist = await self._watered_marks.mark(mark)

        logger.log_business_event(
            "day_marked_watered",
            f"Marked {mark.date.isoformat()} as watered",
            entity_id=mark.date.isoformat(),
            entity_type="watered_mark",
            extra={"marker": mark.marker, "persisted": persist.persisted},
        )
        return Result.ok(
            WateredMarkResultDTO(date=mark.date, marker=mark.marker, persisted=persist.persisted),
            warnings=[] if persist.persisted else [NOT_PERSISTED_WARNING],
        )


class ClearWateredMarkCommandHandler:
    def __init__(
        self,
        watered_marks: WateredMarkRepository,
        write_lock: Optional[asyncio.Lock] = None,
    ):
        self._watered_marks = watered_marks
        self._write_lock = write_lock or asyncio.Lock()

    async def handle(self, command: ClearWateredMarkCommand) -> Result[ClearWateredMarkResultDTO]:
        async with self._write_lock:
            persist = await self._watered_marks.clear(command.day)

        if persist is None:
            logger.debug(f"No watered mark on {command.day.isoformat()}")
            return Result.ok(ClearWateredMarkResultDTO(date=command.day, cleared=False))

        logger.log_business_event(
            "watered_mark_cleared",
            f"Cleared watered mark on {command.day.isoformat()}",
            entity_id=command.day.isoformat(),
            entity_type="watered_mark",
            extra={"persisted": persist.persisted},
        )
        return Result.ok(
            ClearWateredMarkResultDTO(date=command.day, cleared=True, persisted=persist.persisted),
            warnings=[] if persist.persisted else [NOT_PERSISTED_WARNING],
        )
