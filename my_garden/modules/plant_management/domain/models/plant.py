# 📄 File: my_garden/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "plant" is in the garden: its name, a description, its photos,
# how often it needs water and when it was last watered.
# 🧪 Purpose (Technical Summary):
# Domain model for the Plant entity with field validation, creation factory and the
# append-only image operation. Bytes are (de)serialized as base64 in JSON so the whole
# collection round-trips through the storage slot.
# 🔗 Dependencies:
# pydantic, datetime, uuid
# 🔄 Connected Modules / Calls From:
# WateringScheduler, PlantRepository, PlantListCodec, plant command handlers, DTOs

import uuid
from datetime import date, timedelta
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Plant(BaseModel):
    """
    A house plant in the user's garden.

    Fields:
    - plant_id: Opaque unique identifier
    - name: Display name (non-empty)
    - description: Free text, may be empty
    - images: Ordered JPEG blobs, possibly empty; append only
    - watering_frequency_days: Interval between waterings, at least 1 day
    - last_watered_date: Set once at creation; no time-of-day significance
    """

    model_config = ConfigDict(
        validate_assignment=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    plant_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    description: str = ""
    images: List[bytes] = Field(default_factory=list)
    watering_frequency_days: int = Field(..., ge=1)
    last_watered_date: date

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are stored stripped and must not be blank"""
        if not v or not v.strip():
            raise ValueError("Plant name is required")
        return v.strip()

    @classmethod
    def create_new_plant(
        cls,
        name: str,
        watering_frequency_days: int,
        today: date,
        description: str = "",
        image: Optional[bytes] = None,
    ) -> "Plant":
        """
        Create a plant from the add-plant form.

        Args:
            name: Plant name
            watering_frequency_days: Days between waterings
            today: Creation date, recorded as the last watering
            description: Optional description
            image: Optional first photo (already processed)

        Returns:
            New Plant instance
        """
        return cls(
            name=name,
            description=description or "",
            images=[image] if image else [],
            watering_frequency_days=watering_frequency_days,
            last_watered_date=today,
        )

    def add_image(self, image: bytes) -> None:
        """Append a photo; existing photos are never removed individually."""
        self.images = [*self.images, image]

    @property
    def next_watering_date(self) -> date:
        return self.last_watered_date + timedelta(days=self.watering_frequency_days)

    @property
    def cover_image(self) -> Optional[bytes]:
        return self.images[0] if self.images else None
