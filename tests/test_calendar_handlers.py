from datetime import date

from conftest import FlakyStorage
from my_garden.modules.watering_calendar.application.commands import (
    ClearWateredMarkCommand,
    MarkDayWateredCommand,
)
from my_garden.modules.watering_calendar.application.queries import GetCalendarMonthQuery
from my_garden.modules.watering_calendar.domain.models.calendar import WateredMark
from my_garden.modules.watering_calendar.infrastructure.persistence import SnapshotWateredMarkRepository
from my_garden.shared.core.exceptions import DecodingError, ValidationError


def by_date(month):
    return {day.date: day for day in month.days}


async def test_month_view_shows_markers_and_today(container_factory):
    container = container_factory(today_value=date(2024, 3, 12))
    await container.startup()
    await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 3, 10)))

    month = (await container.get_calendar_month_handler.handle(GetCalendarMonthQuery())).value

    assert month.title == "March 2024"
    assert month.reference_date == date(2024, 3, 12)
    assert len(month.days) == 42
    assert len(month.weeks) == 6
    days = by_date(month)
    assert days[date(2024, 3, 10)].marker == "💧"
    assert days[date(2024, 3, 10)].label == "💧"
    assert days[date(2024, 3, 11)].label == "11"
    assert days[date(2024, 3, 12)].is_today
    assert sum(d.is_today for d in month.days) == 1


async def test_month_offset_navigates_and_clamps(container):
    month = (
        await container.get_calendar_month_handler.handle(
            GetCalendarMonthQuery(reference_date=date(2024, 1, 31), month_offset=1)
        )
    ).value

    assert month.reference_date == date(2024, 2, 29)
    assert month.title == "February 2024"
    assert month.weekday_labels[0] == "Sun"


async def test_marks_on_spill_over_days_are_shown(container):
    await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 2, 26)))

    month = (
        await container.get_calendar_month_handler.handle(GetCalendarMonthQuery(reference_date=date(2024, 3, 1)))
    ).value

    cell = by_date(month)[date(2024, 2, 26)]
    assert not cell.is_current_month
    assert cell.marker == "💧"


async def test_out_of_range_month_is_refused(container):
    result = await container.get_calendar_month_handler.handle(
        GetCalendarMonthQuery(reference_date=date(9999, 12, 1), month_offset=1)
    )

    assert not result.success
    assert isinstance(result.error, ValidationError)


async def test_last_supported_month_is_refused_without_raising(container):
    result = await container.get_calendar_month_handler.handle(
        GetCalendarMonthQuery(reference_date=date(9999, 12, 1))
    )

    assert not result.success
    assert isinstance(result.error, ValidationError)
    assert result.error.details["field"] == "reference_date"


async def test_marking_twice_overwrites_marker(container):
    await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 1, 5)))
    result = await container.mark_day_watered_handler.handle(
        MarkDayWateredCommand(day=date(2024, 1, 5), marker="🌱")
    )

    assert result.value.marker == "🌱"
    assert await container.watered_mark_repository.get(date(2024, 1, 5)) == WateredMark(
        date=date(2024, 1, 5), marker="🌱"
    )


async def test_marking_does_not_touch_plants(container):
    await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 1, 1)))

    assert await container.plant_repository.list_all() == []


async def test_clear_mark(container):
    await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 1, 5)))

    first = await container.clear_watered_mark_handler.handle(ClearWateredMarkCommand(day=date(2024, 1, 5)))
    second = await container.clear_watered_mark_handler.handle(ClearWateredMarkCommand(day=date(2024, 1, 5)))

    assert first.value.cleared and first.value.persisted
    assert not second.value.cleared
    assert second.value.persisted is None


async def test_marks_survive_restart(storage):
    repo = SnapshotWateredMarkRepository(storage)
    await repo.load()
    await repo.mark(WateredMark(date=date(2024, 1, 7)))
    await repo.mark(WateredMark(date=date(2024, 1, 2)))

    reloaded = SnapshotWateredMarkRepository(storage)
    result = await reloaded.load()

    assert result.success
    assert [m.date for m in result.value] == [date(2024, 1, 2), date(2024, 1, 7)]
    assert list(await reloaded.between(date(2024, 1, 1), date(2024, 1, 3))) == [date(2024, 1, 2)]


async def test_unpersisted_mark_is_a_warning(container, storage):
    storage.fail_writes = True

    result = await container.mark_day_watered_handler.handle(MarkDayWateredCommand(day=date(2024, 1, 5)))

    assert result.success
    assert not result.value.persisted
    assert result.warnings


async def test_corrupt_marks_load_as_empty():
    repo = SnapshotWateredMarkRepository(FlakyStorage({"watered_marks_key": b"[{]"}))

    result = await repo.load()

    assert not result.success
    assert isinstance(result.error, DecodingError)
    assert result.value == []
