# 📄 File: my_garden/modules/plant_management/application/commands/add_plant_image.py
# 🧭 Purpose (Layman Explanation):
# "Add this photo to that plant."
# 🧪 Purpose (Technical Summary):
# CQRS command appending an image to an existing plant's image list.

from pydantic import BaseModel, Field


class AddPlantImageCommand(BaseModel):
    plant_id: str = Field(..., min_length=1, description="Target plant id")
    image: bytes = Field(..., description="Raw photo bytes from the library or camera")
