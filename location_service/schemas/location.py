from datetime import datetime

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, Field, field_validator


class Point(BaseModel):
    """GeoJSON point; coordinates are [longitude, latitude]."""

    type: str = "Point"
    coordinates: list[float] = Field(min_length=2)


class LocationRequest(BaseModel):
    name: str
    description: str | None = None
    location: Point


class Location(BaseModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="id")
    name: str
    description: str | None = None
    location: Point
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    class Config:
        from_attributes = True

    @field_validator("id", mode="before")
    @classmethod
    def convert_object_id_to_str(cls, value):
        if isinstance(value, ObjectId):
            return str(value)
        return value


class StatusMessage(BaseModel):
    status: str
    message: str
