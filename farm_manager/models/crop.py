"""
Crop record types

Defines the persisted crop record and the separate form draft used while a
record is being created or edited.
"""
from datetime import date
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

CROP_TYPES = ("Vegetable", "Grain", "Fruit", "Herb", "Legume")
CROP_STATUSES = ("planted", "growing", "ready", "harvested")

HARVESTED = "harvested"

CropType = Literal["Vegetable", "Grain", "Fruit", "Herb", "Legume"]


class Crop(BaseModel):
    """A crop record as held by the external store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, validation_alias=AliasChoices("id", "_id"))
    name: str = ""
    type: CropType
    # Not a Literal: a status outside the lifecycle must still load and render
    status: str = ""
    planted_date: Optional[date] = Field(None, alias="plantedDate")
    harvest_date: Optional[date] = Field(None, alias="harvestDate")
    quantity: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    @field_validator("planted_date", "harvest_date", "quantity", "notes", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Crop":
        """
        Build a record from the wire shape.

        Raises:
            pydantic.ValidationError (a ValueError): not an object, no
            identifier, unknown type, or a quantity that is not a whole
            number of zero or more
        """
        return cls.model_validate(payload)

    def to_fields(self) -> Dict[str, Any]:
        """Wire field set without the identifier; absent optionals are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})

    @property
    def is_harvested(self) -> bool:
        return self.status == HARVESTED


class CropDraft(BaseModel):
    """Editable form values; dates hold the date picker's native value."""

    name: str = ""
    type: str = ""
    status: str = ""
    planted_date: Optional[date] = None
    harvest_date: Optional[date] = None
    quantity: str = ""
    notes: str = ""
