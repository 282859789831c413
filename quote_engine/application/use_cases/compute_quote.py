from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from quote_engine.domain.entities.booking_request import BookingRequest, ChefRate
from quote_engine.domain.entities.price_breakdown import ONE, PriceBreakdown
from quote_engine.domain.entities.service_catalog import ServiceCatalog, ServiceType

DEFAULT_FALLBACK_RATE = Decimal("1200")
DEFAULT_WEEKEND_PREMIUM = Decimal("1.2")

logger = logging.getLogger(__name__)


def resolve_guest_multiplier(service: ServiceType, guest_count: int) -> Decimal:
    """Step function over guest tiers: highest tier whose threshold is strictly below the count."""
    for tier in reversed(service.guest_tiers):
        if tier.threshold < guest_count:
            return tier.multiplier
    return ONE


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_quote(
    chef_rate: ChefRate | None,
    request: BookingRequest,
    catalog: ServiceCatalog,
    fallback_rate: Decimal = DEFAULT_FALLBACK_RATE,
    weekend_premium: Decimal = DEFAULT_WEEKEND_PREMIUM,
) -> PriceBreakdown:
    """
    Price a booking request for one chef.

    Returns an empty breakdown instead of raising when the service type is
    unknown or no chef rate was supplied; a partially-filled form is normal.
    Intermediate values stay unrounded Decimals; only ``total`` is rounded.
    """
    service = catalog.get_service(request.service_type)
    if service is None or chef_rate is None:
        return PriceBreakdown.empty(raw_duration=request.duration)

    duration = service.clamp_duration(request.duration)
    base_rate = (chef_rate.price_per_hour or fallback_rate) * service.base_multiplier
    guest_multiplier = resolve_guest_multiplier(service, request.guest_count)
    base_total = base_rate * duration * guest_multiplier

    premium = ONE
    # weekday(): Saturday == 5, Sunday == 6
    if service.weekend_premium_applies and request.event_date and request.event_date.weekday() >= 5:
        premium = weekend_premium
        base_total *= premium

    prices = catalog.add_on_prices(service.id)
    add_on_total = Decimal("0")
    for name in sorted(request.selected_add_ons):
        price = prices.get(name)
        if price is None:
            logger.warning(
                "Ignoring unknown add-on",
                extra={"service_type": service.id, "add_on": name},
            )
            continue
        add_on_total += price

    subtotal = base_total + add_on_total
    return PriceBreakdown(
        base_rate=base_rate,
        duration=duration,
        guest_multiplier=guest_multiplier,
        base_total=base_total,
        add_on_total=add_on_total,
        subtotal=subtotal,
        total=round_half_up(subtotal),
        weekend_premium=premium,
        raw_duration=request.duration,
        service_type=service.id,
    )


def compute_total(
    chef_rate: ChefRate | None,
    request: BookingRequest,
    catalog: ServiceCatalog,
    fallback_rate: Decimal = DEFAULT_FALLBACK_RATE,
    weekend_premium: Decimal = DEFAULT_WEEKEND_PREMIUM,
) -> int:
    return compute_quote(chef_rate, request, catalog, fallback_rate, weekend_premium).total


@dataclass
class ComputeQuoteUseCase:
    catalog: ServiceCatalog
    fallback_rate: Decimal = DEFAULT_FALLBACK_RATE
    weekend_premium: Decimal = DEFAULT_WEEKEND_PREMIUM

    def execute(self, chef_rate: ChefRate | None, request: BookingRequest) -> PriceBreakdown:
        breakdown = compute_quote(
            chef_rate,
            request,
            self.catalog,
            fallback_rate=self.fallback_rate,
            weekend_premium=self.weekend_premium,
        )
        logger.debug(
            "Quote computed",
            extra={"service_type": request.service_type, "total": breakdown.total},
        )
        return breakdown
