# 📄 File: my_garden/modules/plant_management/presentation/api/v1/plants.py
#
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the garden screens: list plants, add a plant with a photo,
# add more photos, remove plants, fetch a photo and see the next watering reminder.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router translating HTTP requests into plant commands/queries and handler
# Results into responses. Failed Results are raised as their GardenException and
# rendered by the application exception handler.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File/UploadFile, Query
# - plant commands, queries and handlers (through the AppContainer)
# - plant response schemas
#
# 🔄 Connected Modules / Calls From:
# - my_garden.api.v1.router (mounted under /plants)

"""
Plants API Endpoints

Endpoints:
- GET /: List plants in garden order
- POST /: Add a plant (multipart form with optional photo)
- DELETE /?indices=0&indices=2: Remove plants by position
- GET /{plant_id}: Get one plant
- POST /{plant_id}/images: Add a photo
- GET /{plant_id}/images/{index}: Download a photo (JPEG)
- GET /{plant_id}/reminder: Next watering reminder
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from pydantic import ValidationError as PydanticValidationError

from my_garden.container import AppContainer
from my_garden.modules.plant_management.application.commands import (
    AddPlantCommand,
    AddPlantImageCommand,
    DeletePlantsCommand,
)
from my_garden.modules.plant_management.application.queries import (
    GetNextReminderQuery,
    GetPlantImageQuery,
    GetPlantQuery,
    ListPlantsQuery,
)
from my_garden.modules.plant_management.presentation.api.schemas.plant_schemas import (
    AddPlantResponse,
    DeletePlantsResponse,
    PlantListResponse,
    PlantResponse,
    PlantUpdateResponse,
    ReminderResponse,
)
from my_garden.shared.core.dependencies import get_container
from my_garden.shared.core.exceptions import ValidationError
from my_garden.shared.utils.logging import get_logger

logger = get_logger(__name__)

plants_router = APIRouter()


async def _read_upload(upload: Optional[UploadFile]) -> Optional[bytes]:
    if upload is None:
        return None
    data = await upload.read()
    return data or None


@plants_router.get(
    "",
    response_model=PlantListResponse,
    summary="List plants",
    description="All plants in the order they were added",
)
async def list_plants(
    include_images: bool = Query(False, description="Embed base64 photos"),
    container: AppContainer = Depends(get_container),
) -> PlantListResponse:
    result = await container.list_plants_handler.handle(ListPlantsQuery(include_images=include_images))
    plants = result.unwrap()
    return PlantListResponse(plants=plants, count=len(plants))


@plants_router.post(
    "",
    response_model=AddPlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    responses={
        201: {"description": "Plant added, reminder computed"},
        422: {"description": "Empty name or frequency outside 1..30 days"},
    },
)
async def add_plant(
    name: str = Form("", description="Plant name"),
    description: str = Form("", description="Free text description"),
    watering_frequency_days: int = Form(1, description="Days between waterings"),
    image: Optional[UploadFile] = File(None, description="Optional photo"),
    container: AppContainer = Depends(get_container),
) -> AddPlantResponse:
    """
    Add a plant from the add-plant form.

    A photo that cannot be read does not block the plant; it is reported in
    ``warnings`` instead, as is a snapshot that could not be saved.
    """
    try:
        command = AddPlantCommand(
            name=name,
            description=description,
            image=await _read_upload(image),
            watering_frequency_days=watering_frequency_days,
        )
    except PydanticValidationError as e:
        raise ValidationError.from_errors(e.errors(), message="Invalid plant data")

    result = await container.add_plant_handler.handle(command)
    added = result.unwrap()
    return AddPlantResponse(
        plant=added.plant,
        reminder=added.reminder,
        persisted=added.persisted,
        warnings=result.warnings,
    )


@plants_router.delete(
    "",
    response_model=DeletePlantsResponse,
    summary="Remove plants",
    description="Remove the plants at the given positions and cancel their reminders",
)
async def delete_plants(
    indices: List[int] = Query(..., description="Positions in the garden list"),
    container: AppContainer = Depends(get_container),
) -> DeletePlantsResponse:
    result = await container.delete_plants_handler.handle(DeletePlantsCommand(indices=indices))
    deleted = result.unwrap()
    return DeletePlantsResponse(
        removed=deleted.removed,
        cancelled_reminders=deleted.cancelled_reminders,
        persisted=deleted.persisted,
        warnings=result.warnings,
    )


@plants_router.get("/{plant_id}", response_model=PlantResponse, summary="Get a plant")
async def get_plant(
    plant_id: str,
    include_images: bool = Query(False),
    container: AppContainer = Depends(get_container),
) -> PlantResponse:
    result = await container.get_plant_handler.handle(
        GetPlantQuery(plant_id=plant_id, include_images=include_images)
    )
    return result.unwrap()


@plants_router.post(
    "/{plant_id}/images",
    response_model=PlantUpdateResponse,
    summary="Add a photo",
    responses={
        404: {"description": "Plant not found"},
        422: {"description": "Payload is not a readable image"},
    },
)
async def add_plant_image(
    plant_id: str,
    image: UploadFile = File(..., description="Photo from library or camera"),
    container: AppContainer = Depends(get_container),
) -> PlantUpdateResponse:
    data = await image.read()
    logger.debug(f"Photo upload for plant {plant_id}", size=len(data), content_type=image.content_type)

    result = await container.add_plant_image_handler.handle(AddPlantImageCommand(plant_id=plant_id, image=data))
    return PlantUpdateResponse(plant=result.unwrap(), warnings=result.warnings)


@plants_router.get(
    "/{plant_id}/images/{index}",
    response_class=Response,
    summary="Download a photo",
    responses={200: {"content": {"image/jpeg": {}}}},
)
async def get_plant_image(
    plant_id: str,
    index: int,
    container: AppContainer = Depends(get_container),
) -> Response:
    try:
        query = GetPlantImageQuery(plant_id=plant_id, index=index)
    except PydanticValidationError as e:
        raise ValidationError.from_errors(e.errors(), message="Invalid image index")

    result = await container.get_plant_image_handler.handle(query)
    return Response(content=result.unwrap(), media_type="image/jpeg")


@plants_router.get("/{plant_id}/reminder", response_model=ReminderResponse, summary="Next watering reminder")
async def get_next_reminder(
    plant_id: str,
    container: AppContainer = Depends(get_container),
) -> ReminderResponse:
    result = await container.get_next_reminder_handler.handle(GetNextReminderQuery(plant_id=plant_id))
    return result.unwrap()
