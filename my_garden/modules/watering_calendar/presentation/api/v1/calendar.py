# 📄 File: my_garden/modules/watering_calendar/presentation/api/v1/calendar.py
#
# 🧭 Purpose (Layman Explanation):
# The calendar screen over the web: show a month (flipping back and forth with an
# offset), put a droplet on a day, or take it off again.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for the watering calendar. Month navigation is the ``offset`` query
# parameter applied to the reference date; day marks are keyed by ISO date.
#
# 🔄 Connected Modules / Calls From:
# - my_garden.api.v1.router (mounted under /calendar)

import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from my_garden.container import AppContainer
from my_garden.modules.watering_calendar.application.commands import (
    ClearWateredMarkCommand,
    MarkDayWateredCommand,
)
from my_garden.modules.watering_calendar.application.queries import GetCalendarMonthQuery
from my_garden.modules.watering_calendar.presentation.api.schemas.calendar_schemas import (
    CalendarMonthResponse,
    ClearWateredMarkResponse,
    MarkWateredRequest,
    WateredMarkResponse,
)
from my_garden.shared.core.dependencies import get_container

calendar_router = APIRouter()


@calendar_router.get(
    "",
    response_model=CalendarMonthResponse,
    summary="Month view",
    description="Grid of the month containing `date` (default today), moved by `offset` months",
)
async def get_calendar_month(
    reference_date: Optional[datetime.date] = Query(None, alias="date", description="Any day of the month"),
    offset: int = Query(0, ge=-1200, le=1200, description="Months before (-) or after (+)"),
    container: AppContainer = Depends(get_container),
) -> CalendarMonthResponse:
    result = await container.get_calendar_month_handler.handle(
        GetCalendarMonthQuery(reference_date=reference_date, month_offset=offset)
    )
    return CalendarMonthResponse.from_domain(result.unwrap())


@calendar_router.post("/{day}/watered", response_model=WateredMarkResponse, summary="Mark a day as watered")
async def mark_day_watered(
    day: datetime.date,
    payload: Optional[MarkWateredRequest] = Body(None),
    container: AppContainer = Depends(get_container),
) -> WateredMarkResponse:
    marker = payload.marker if payload else None
    result = await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=day, marker=marker))
    mark = result.unwrap()
    return WateredMarkResponse(
        date=mark.date,
        marker=mark.marker,
        persisted=mark.persisted,
        warnings=result.warnings,
    )


@calendar_router.delete("/{day}/watered", response_model=ClearWateredMarkResponse, summary="Clear a watered mark")
async def clear_watered_mark(
    day: datetime.date,
    container: AppContainer = Depends(get_container),
) -> ClearWateredMarkResponse:
    result = await container.clear_watered_mark_handler.handle(ClearWateredMarkCommand(day=day))
    cleared = result.unwrap()
    return ClearWateredMarkResponse(
        date=cleared.date,
        cleared=cleared.cleared,
        persisted=cleared.persisted,
        warnings=result.warnings,
    )
