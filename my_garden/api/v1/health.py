# 📄 File: my_garden/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check, plus whether the place the garden is saved to answers.
# 🧪 Purpose (Technical Summary):
# Health endpoint reporting service version, uptime and storage backend reachability.
# 🔗 Dependencies:
# FastAPI, AppContainer
# 🔄 Connected Modules / Calls From:
# my_garden.api.v1.router, monitoring

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from my_garden.container import AppContainer
from my_garden.shared.core.dependencies import get_container
from my_garden.shared.utils.logging import get_logger

logger = get_logger(__name__)

health_router = APIRouter()

_app_start_time = datetime.now()


@health_router.get(
    "/health",
    summary="Health Check",
    description="Service status and storage backend reachability",
)
async def health_check(container: AppContainer = Depends(get_container)) -> JSONResponse:
    storage_ok = await container.storage.health_check()
    if not storage_ok:
        logger.warning("Storage health check failed", storage_backend=container.storage.backend_name)

    return JSONResponse(
        status_code=200 if storage_ok else 503,
        content={
            "status": "healthy" if storage_ok else "degraded",
            "timestamp": datetime.now().isoformat(),
            "service": "my-garden-api",
            "version": container.settings.APP_VERSION,
            "uptime_seconds": round((datetime.now() - _app_start_time).total_seconds(), 1),
            "storage": {
                "backend": container.storage.backend_name,
                "healthy": storage_ok,
            },
        },
    )
