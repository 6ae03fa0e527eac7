"""
Geo Location Schemas for request/response validation
"""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GeoLocationUpsert(BaseModel):
    """Body of POST /geo-locations; `location_name` is accepted for older clients"""
    name: str = Field(validation_alias=AliasChoices("name", "location_name"))
    latitude: float
    longitude: float
    radius_meters: int


class GeoLocation(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: str = Field(validation_alias="gl_name")
    latitude: float = Field(validation_alias="gl_latitude")
    longitude: float = Field(validation_alias="gl_longitude")
    radius_meters: int = Field(validation_alias="gl_radius_meters")
    set_by: str = Field(validation_alias="gl_set_by")
    set_at: datetime = Field(validation_alias="gl_set_at")
