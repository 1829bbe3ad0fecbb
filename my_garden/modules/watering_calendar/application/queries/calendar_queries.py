# 📄 File: my_garden/modules/watering_calendar/application/queries/calendar_queries.py
# 🧭 Purpose (Layman Explanation):
# "Show me the month around this date", optionally a few months before or after.

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class GetCalendarMonthQuery(BaseModel):
    reference_date: Optional[date] = Field(default=None, description="Any day in the month; today when omitted")
    month_offset: int = Field(default=0, ge=-1200, le=1200, description="Months to move from the reference date")
