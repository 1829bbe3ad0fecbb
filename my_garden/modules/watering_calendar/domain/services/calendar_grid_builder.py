# 📄 File: my_garden/modules/watering_calendar/domain/services/calendar_grid_builder.py
# 🧭 Purpose (Layman Explanation):
# Lays out a month like a wall calendar: seven columns, with the last days of the
# previous month and the first days of the next month filling the empty squares.
# 🧪 Purpose (Technical Summary):
# Pure month-grid generator. Weekday indexes are 1..7 relative to the configured first
# day of the week; leading and trailing spill-over days pad the grid to full weeks.
# Total over every valid date, including year boundaries and leap Februaries, except
# the first and last months of the date range whose padding cannot be represented.
# 🔗 Dependencies:
# calendar, datetime (standard library)
# 🔄 Connected Modules / Calls From:
# GetCalendarMonthQueryHandler, calendar API

import calendar
from datetime import date, timedelta
from typing import List

from my_garden.shared.core.exceptions import ValidationError

from ..models.calendar import CalendarCell

DAYS_PER_WEEK = 7


class CalendarGridBuilder:
    """
    Builds the ordered cells of a 7-column month grid.

    Args:
        first_weekday: First column of the grid, using the ``calendar`` module
            convention (0=Monday ... 6=Sunday). Defaults to Sunday.
    """

    def __init__(self, first_weekday: int = calendar.SUNDAY):
        if not 0 <= first_weekday <= 6:
            raise ValueError("first_weekday must be between 0 (Monday) and 6 (Sunday)")
        self.first_weekday = first_weekday

    def weekday_index(self, day: date) -> int:
        """Column of ``day`` in the grid, 1 for the first day of the week up to 7."""
        return (day.weekday() - self.first_weekday) % DAYS_PER_WEEK + 1

    def weekday_labels(self) -> List[str]:
        return [
            calendar.day_abbr[(self.first_weekday + offset) % DAYS_PER_WEEK]
            for offset in range(DAYS_PER_WEEK)
        ]

    def build(self, reference_date: date) -> List[CalendarCell]:
        """
        Produce the grid cells for the month containing ``reference_date``.

        Returns:
            Cells in display order; the length is always a positive multiple of 7

        Raises:
            ValidationError: If the padding days fall outside the supported date
                range (January of year 1, December of year 9999)
        """
        first_day = reference_date.replace(day=1)
        days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
        last_day = first_day.replace(day=days_in_month)

        leading = self.weekday_index(first_day) - 1
        trailing = DAYS_PER_WEEK - self.weekday_index(last_day)

        if (leading and first_day == date.min) or (trailing and last_day == date.max):
            raise ValidationError(
                "Month cannot be laid out within the supported date range",
                field="reference_date",
                value=reference_date,
            )

        cells = [
            CalendarCell(date=first_day - timedelta(days=offset), is_current_month=False)
            for offset in range(leading, 0, -1)
        ]
        cells.extend(
            CalendarCell(date=first_day + timedelta(days=offset), is_current_month=True)
            for offset in range(days_in_month)
        )
        # trailing is 0 when the month ends on the last column
        if trailing > 0:
            cells.extend(
                CalendarCell(date=last_day + timedelta(days=offset), is_current_month=False)
                for offset in range(1, trailing + 1)
            )

        return cells


def shift_month(reference_date: date, months: int) -> date:
    """
    Move ``reference_date`` by a number of months, clamping the day to the
    length of the target month (31 January + 1 month -> 29 February 2024).
    """
    month_index = reference_date.year * 12 + (reference_date.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(reference_date.day, last_day))
