# 📄 File: my_garden/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Sends each request to the right part of the app: plant requests to the plant module,
# calendar requests to the calendar module.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation with module prefixes and tags.
# 🔄 Connected Modules / Calls From:
# my_garden.main

from fastapi import APIRouter

from my_garden.modules.plant_management.presentation.api import plants_router
from my_garden.modules.watering_calendar.presentation.api import calendar_router

from . import API_TAGS, ROUTE_PREFIXES
from .health import health_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=[API_TAGS["health"]])
api_v1_router.include_router(
    plants_router,
    prefix=ROUTE_PREFIXES["plants"],
    tags=[API_TAGS["plants"]],
)
api_v1_router.include_router(
    calendar_router,
    prefix=ROUTE_PREFIXES["calendar"],
    tags=[API_TAGS["calendar"]],
)
