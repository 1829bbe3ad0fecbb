# 📄 File: my_garden/shared/core/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web endpoint the already-assembled garden app (plant list, calendar, reminders).
# 🧪 Purpose (Technical Summary):
# FastAPI dependency returning the AppContainer stored on app.state during lifespan startup.
# 🔄 Connected Modules / Calls From:
# plants API, calendar API, health endpoint

from typing import TYPE_CHECKING

from fastapi import Request

from .exceptions import GardenException

if TYPE_CHECKING:
    from my_garden.container import AppContainer


def get_container(request: Request) -> "AppContainer":
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise GardenException("Application is not started", status_code=503, error_code="NOT_READY")
    return container
