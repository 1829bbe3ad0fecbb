# 📄 File: my_garden/modules/plant_management/application/commands/delete_plants.py
# 🧭 Purpose (Layman Explanation):
# "Remove the plants at these positions in my list" (the swipe-to-delete gesture).
# 🧪 Purpose (Technical Summary):
# CQRS command removing plants by list position; duplicates are collapsed.

from typing import List

from pydantic import BaseModel, Field, field_validator


class DeletePlantsCommand(BaseModel):
    """Command for removing plants by their position in the collection."""

    indices: List[int] = Field(..., min_length=1, description="Positions to remove")

    @field_validator("indices")
    @classmethod
    def deduplicate(cls, v: List[int]) -> List[int]:
        return sorted(set(v))
