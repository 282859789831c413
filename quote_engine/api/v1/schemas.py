from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AddOnSchema(BaseModel):
    name: str
    price: float
    description: str | None = None


class ServiceTypeSchema(BaseModel):
    id: str
    display_name: str
    description: str | None = None
    base_multiplier: float
    min_duration: int
    max_duration: int
    weekend_premium_applies: bool
    add_ons: list[AddOnSchema] = Field(default_factory=list)


class QuoteRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Free-form so unknown ids yield an empty quote instead of a 422.
    service_type: str | None = None
    duration: int | str | None = None
    guest_count: int | str | None = None
    event_date: date | datetime | str | None = Field(default=None, alias="date")
    add_ons: list[str] = Field(default_factory=list)
    price_per_hour: float | None = None


class PriceBreakdownSchema(BaseModel):
    computable: bool
    service_type: str | None = None
    base_rate: float
    duration: int
    raw_duration: int | None = None
    guest_multiplier: float
    weekend_premium: float
    base_total: float
    add_on_total: float
    subtotal: float
    total: int


class GeoPointSchema(BaseModel):
    lat: float
    lon: float


class ChefInSchema(BaseModel):
    id: str
    name: str | None = None
    rating_average: float | None = None
    location_coords: dict[str, Any] | list[float] | None = None
    service_locations: list[dict[str, Any] | list[float]] = Field(default_factory=list)
    price_per_hour: float | None = None


class RankRequestSchema(BaseModel):
    origin: GeoPointSchema | list[float] | None = None
    chefs: list[ChefInSchema] = Field(default_factory=list)


class RankedChefSchema(BaseModel):
    id: str
    name: str | None = None
    rating_average: float | None = None
    location_coords: GeoPointSchema | None = None
    price_per_hour: float | None = None
    distance_meters: int | None = None
    distance_label: str | None = None


class RankResponseSchema(BaseModel):
    origin: GeoPointSchema | None = None
    location_found: bool
    chefs: list[RankedChefSchema]


class GeocodeResponseSchema(BaseModel):
    found: bool
    lat: float | None = None
    lon: float | None = None
