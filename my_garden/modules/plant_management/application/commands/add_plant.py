# 📄 File: my_garden/modules/plant_management/application/commands/add_plant.py
# 🧭 Purpose (Layman Explanation):
# The "add plant" form in command form: a name, a description, an optional photo and
# how many days between waterings.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for plant creation. Field constraints mirror the add-plant form
# (frequency stepper 1..30 days); the name check itself lives in the handler so an
# empty name is refused as a result value rather than an exception.
#
# 🔄 Connected Modules / Calls From:
# - AddPlantCommandHandler
# - plants API endpoint (form submission)

from typing import Optional

from pydantic import BaseModel, Field


class AddPlantCommand(BaseModel):
    """Command for registering a new plant."""

    name: str = Field(
        ...,
        max_length=100,
        description="Plant name (required, non-blank)",
        examples=["Monstera"],
    )
    description: str = Field(
        default="",
        max_length=500,
        description="Free text description",
        examples=["Living room, next to the window"],
    )
    image: Optional[bytes] = Field(
        default=None,
        description="Raw photo bytes from the library or camera",
    )
    watering_frequency_days: int = Field(
        default=1,
        ge=1,
        le=30,
        description="Days between waterings",
        examples=[7],
    )
