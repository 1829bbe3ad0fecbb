# 📄 File: my_garden/modules/plant_management/application/queries/plant_queries.py
# 🧭 Purpose (Layman Explanation):
# The questions the app can ask about plants: all of them, one of them, and
# when its next watering reminder is due.
# 🧪 Purpose (Technical Summary):
# CQRS query definitions for plant read operations.

from pydantic import BaseModel, Field


class ListPlantsQuery(BaseModel):
    include_images: bool = Field(default=False, description="Embed base64 images in the result")


class GetPlantQuery(BaseModel):
    plant_id: str = Field(..., min_length=1)
    include_images: bool = False


class GetPlantImageQuery(BaseModel):
    plant_id: str = Field(..., min_length=1)
    index: int = Field(..., ge=0)


class GetNextReminderQuery(BaseModel):
    plant_id: str = Field(..., min_length=1)
