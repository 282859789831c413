from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from quote_engine.api.v1.schemas import (
    AddOnSchema,
    PriceBreakdownSchema,
    QuoteRequestSchema,
    ServiceTypeSchema,
)
from quote_engine.application.ports.service_catalog import ServiceCatalogPort
from quote_engine.application.use_cases.compute_quote import ComputeQuoteUseCase
from quote_engine.domain.entities.booking_request import BookingRequest, ChefRate
from quote_engine.wiring.dependencies import get_compute_quote_use_case, get_service_catalog, get_timezone

router = APIRouter()


@router.get("/services", response_model=list[ServiceTypeSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [
        ServiceTypeSchema(
            id=s.id,
            display_name=s.display_name,
            description=s.description,
            base_multiplier=float(s.base_multiplier),
            min_duration=s.min_duration,
            max_duration=s.max_duration,
            weekend_premium_applies=s.weekend_premium_applies,
            add_ons=[
                AddOnSchema(name=a.name, price=float(a.price), description=a.description)
                for a in catalog.get_add_ons(s.id)
            ],
        )
        for s in catalog.get_catalog().services
    ]


@router.post("/quotes", response_model=PriceBreakdownSchema)
def create_quote(
    req: QuoteRequestSchema,
    uc: ComputeQuoteUseCase = Depends(get_compute_quote_use_case),
    timezone: ZoneInfo = Depends(get_timezone),
):
    request = BookingRequest.from_payload(
        service_type=req.service_type,
        duration=req.duration,
        guest_count=req.guest_count,
        event_date=req.event_date,
        add_ons=req.add_ons,
        timezone=timezone,
    )
    breakdown = uc.execute(ChefRate.from_value(req.price_per_hour), request)

    return PriceBreakdownSchema(
        computable=not breakdown.is_empty,
        service_type=breakdown.service_type,
        base_rate=float(breakdown.base_rate),
        duration=breakdown.duration,
        raw_duration=breakdown.raw_duration,
        guest_multiplier=float(breakdown.guest_multiplier),
        weekend_premium=float(breakdown.weekend_premium),
        base_total=float(breakdown.base_total),
        add_on_total=float(breakdown.add_on_total),
        subtotal=float(breakdown.subtotal),
        total=breakdown.total,
    )
