from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from quote_engine.api.v1.schemas import (
    GeocodeResponseSchema,
    GeoPointSchema,
    RankedChefSchema,
    RankRequestSchema,
    RankResponseSchema,
)
from quote_engine.application.exceptions import ChefDirectoryError
from quote_engine.application.ports.geocoder import GeocoderPort
from quote_engine.application.use_cases.rank_chefs import rank_by_proximity
from quote_engine.application.use_cases.search_chefs import SearchChefsUseCase
from quote_engine.application.utils.geo_distance import format_distance_km
from quote_engine.domain.entities.chef import ChefSummary
from quote_engine.domain.entities.geo import GeoPoint
from quote_engine.wiring.dependencies import get_geocoder, get_search_chefs_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _point_schema(point: GeoPoint | None) -> GeoPointSchema | None:
    if point is None:
        return None
    return GeoPointSchema(lat=point.lat, lon=point.lon)


def _ranked(chefs: list[ChefSummary]) -> list[RankedChefSchema]:
    return [
        RankedChefSchema(
            id=c.id,
            name=c.name,
            rating_average=c.rating_average,
            location_coords=_point_schema(c.location_coords),
            price_per_hour=float(c.price_per_hour) if c.price_per_hour is not None else None,
            distance_meters=c.distance_meters,
            distance_label=format_distance_km(c.distance_meters),
        )
        for c in chefs
    ]


@router.post("/chefs/rank", response_model=RankResponseSchema)
def rank_chefs(req: RankRequestSchema):
    raw_origin = req.origin.model_dump() if isinstance(req.origin, GeoPointSchema) else req.origin
    origin = GeoPoint.from_payload(raw_origin)
    if req.origin is not None and origin is None:
        raise HTTPException(status_code=400, detail="origin must be {lat, lon} or [lat, lon]")
    if origin is not None and not origin.is_valid:
        raise HTTPException(status_code=400, detail="origin lat must be within ±90 and lon within ±180")

    chefs = [ChefSummary.from_payload(c.model_dump()) for c in req.chefs]
    ranked = rank_by_proximity(origin, chefs)
    return RankResponseSchema(
        origin=_point_schema(origin),
        location_found=origin is not None,
        chefs=_ranked(ranked),
    )


@router.get("/chefs/search", response_model=RankResponseSchema)
async def search_chefs(
    location: str | None = Query(None),
    uc: SearchChefsUseCase = Depends(get_search_chefs_use_case),
):
    try:
        result = await uc.search(location)
    except ChefDirectoryError as e:
        logger.exception("Chef directory unavailable", extra={"error": str(e)})
        raise HTTPException(status_code=502, detail=str(e))

    return RankResponseSchema(
        origin=_point_schema(result.origin),
        location_found=result.location_found,
        chefs=_ranked(result.chefs),
    )


@router.get("/geocode", response_model=GeocodeResponseSchema)
async def geocode(
    address: str = Query(""),
    geocoder: GeocoderPort = Depends(get_geocoder),
):
    point = await geocoder.geocode(address)
    if point is None:
        return GeocodeResponseSchema(found=False)
    return GeocodeResponseSchema(found=True, lat=point.lat, lon=point.lon)
