"""
Tests for the quote calculator.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from quote_engine.application.use_cases.compute_quote import (
    ComputeQuoteUseCase,
    compute_quote,
    compute_total,
    resolve_guest_multiplier,
)
from quote_engine.domain.entities.booking_request import BookingRequest, ChefRate
from quote_engine.domain.entities.service_catalog import AddOn, GuestTier, ServiceCatalog, ServiceType
from quote_engine.infrastructure.catalog.catalog_data import SERVICE_CATALOG

SATURDAY = date(2024, 6, 15)
SUNDAY = date(2024, 6, 16)
TUESDAY = date(2024, 6, 18)


def _rate(value: str) -> ChefRate:
    return ChefRate(price_per_hour=Decimal(value))


def test_birthday_weekend_scenario():
    """Birthday, 4h, 15 guests on a Saturday with Cleanup at 1000/h totals 8430."""
    request = BookingRequest(
        service_type="birthday",
        duration=4,
        guest_count=15,
        event_date=SATURDAY,
        selected_add_ons=frozenset({"Cleanup"}),
    )

    breakdown = compute_quote(_rate("1000"), request, SERVICE_CATALOG)

    assert breakdown.base_rate == Decimal("1500")
    assert breakdown.duration == 4
    assert breakdown.guest_multiplier == Decimal("1.15")
    assert breakdown.weekend_premium == Decimal("1.2")
    assert breakdown.base_total == Decimal("8280")
    assert breakdown.add_on_total == Decimal("150")
    assert breakdown.subtotal == Decimal("8430")
    assert breakdown.total == 8430


def test_daily_scenario_without_premium():
    """Daily, 2h, 1 guest at 1200/h totals 1920 on any date."""
    for event_date in (TUESDAY, SATURDAY, SUNDAY, None):
        request = BookingRequest(service_type="daily", duration=2, guest_count=1, event_date=event_date)
        breakdown = compute_quote(_rate("1200"), request, SERVICE_CATALOG)

        assert breakdown.base_rate == Decimal("960")
        assert breakdown.guest_multiplier == Decimal("1")
        assert breakdown.base_total == Decimal("1920")
        assert breakdown.weekend_premium == Decimal("1")
        assert breakdown.total == 1920


def test_weekend_premium_only_for_event_services_on_weekends():
    tuesday_marriage = compute_quote(
        _rate("1000"),
        BookingRequest(service_type="marriage", duration=6, guest_count=10, event_date=TUESDAY),
        SERVICE_CATALOG,
    )
    assert tuesday_marriage.weekend_premium == Decimal("1")
    assert tuesday_marriage.total == 15000

    sunday_marriage = compute_quote(
        _rate("1000"),
        BookingRequest(service_type="marriage", duration=6, guest_count=10, event_date=SUNDAY),
        SERVICE_CATALOG,
    )
    assert sunday_marriage.weekend_premium == Decimal("1.2")
    assert sunday_marriage.total == 18000

    saturday_daily = compute_quote(
        _rate("1000"),
        BookingRequest(service_type="daily", duration=2, guest_count=1, event_date=SATURDAY),
        SERVICE_CATALOG,
    )
    assert saturday_daily.weekend_premium == Decimal("1")
    assert saturday_daily.total == 1600


def test_unknown_service_returns_empty_breakdown():
    breakdown = compute_quote(_rate("1000"), BookingRequest(service_type="brunch", duration=3), SERVICE_CATALOG)

    assert breakdown.is_empty
    assert breakdown.total == 0
    assert breakdown.raw_duration == 3


def test_missing_chef_rate_returns_empty_breakdown():
    breakdown = compute_quote(None, BookingRequest(service_type="birthday", duration=3), SERVICE_CATALOG)

    assert breakdown.is_empty
    assert breakdown.total == 0


def test_absent_price_uses_fallback_rate():
    request = BookingRequest(service_type="daily", duration=1, guest_count=1, event_date=TUESDAY)

    assert compute_quote(ChefRate(), request, SERVICE_CATALOG).base_rate == Decimal("960")
    assert compute_quote(ChefRate.from_value(0), request, SERVICE_CATALOG).base_rate == Decimal("960")
    assert compute_quote(
        ChefRate(), request, SERVICE_CATALOG, fallback_rate=Decimal("1000")
    ).base_rate == Decimal("800")


@pytest.mark.parametrize("raw", [-5, 0, 1, 4, 100, 10**9, None])
def test_effective_duration_stays_within_bounds(raw):
    for service in SERVICE_CATALOG.services:
        request = BookingRequest(service_type=service.id, duration=raw, guest_count=1)
        breakdown = compute_quote(_rate("1000"), request, SERVICE_CATALOG)

        assert service.min_duration <= breakdown.duration <= service.max_duration
        assert breakdown.raw_duration == raw


def test_missing_duration_defaults_to_minimum():
    breakdown = compute_quote(_rate("1000"), BookingRequest(service_type="marriage"), SERVICE_CATALOG)
    assert breakdown.duration == 6


def test_guest_multiplier_is_monotonic():
    for service in SERVICE_CATALOG.services:
        multipliers = [resolve_guest_multiplier(service, n) for n in range(1, 250)]
        assert multipliers == sorted(multipliers)


def test_guest_tier_threshold_is_strict():
    birthday = SERVICE_CATALOG.get_service("birthday")

    assert resolve_guest_multiplier(birthday, 10) == Decimal("1")
    assert resolve_guest_multiplier(birthday, 11) == Decimal("1.15")
    assert resolve_guest_multiplier(birthday, 20) == Decimal("1.15")
    assert resolve_guest_multiplier(birthday, 21) == Decimal("1.3")

    marriage = SERVICE_CATALOG.get_service("marriage")
    assert resolve_guest_multiplier(marriage, 101) == Decimal("2.0")


def test_unknown_add_on_is_ignored_with_warning(caplog):
    """Unknown names contribute zero; the permissive contract stays until product says otherwise."""
    request = BookingRequest(
        service_type="birthday",
        duration=3,
        guest_count=1,
        event_date=TUESDAY,
        selected_add_ons=frozenset({"Cleanup", "Fireworks", "Wedding Decor"}),
    )

    with caplog.at_level(logging.WARNING, logger="quote_engine.application.use_cases.compute_quote"):
        breakdown = compute_quote(_rate("1000"), request, SERVICE_CATALOG)

    assert breakdown.add_on_total == Decimal("150")
    ignored = sorted(r.add_on for r in caplog.records if r.getMessage() == "Ignoring unknown add-on")
    assert ignored == ["Fireworks", "Wedding Decor"]


def test_quote_is_deterministic():
    request = BookingRequest(
        service_type="marriage",
        duration=9,
        guest_count=77,
        event_date=SATURDAY,
        selected_add_ons=frozenset({"Cleanup", "Catering Staff", "Wedding Decor"}),
    )

    first = compute_quote(_rate("1337.5"), request, SERVICE_CATALOG)
    second = compute_quote(_rate("1337.5"), request, SERVICE_CATALOG)

    assert first == second
    assert repr(first) == repr(second)
    assert compute_total(_rate("1337.5"), request, SERVICE_CATALOG) == first.total


def test_total_rounds_half_up_with_synthetic_catalog():
    catalog = ServiceCatalog(
        services=(
            ServiceType(
                id="tasting",
                display_name="Tasting",
                base_multiplier=Decimal("1"),
                min_duration=1,
                max_duration=4,
            ),
        ),
    )
    request = BookingRequest(service_type="tasting", duration=2)

    breakdown = compute_quote(_rate("100.25"), request, catalog)

    assert breakdown.subtotal == Decimal("200.50")
    assert breakdown.total == 201
    assert compute_quote(_rate("100.2"), request, catalog).total == 200


def test_synthetic_catalog_drives_add_ons_and_premium():
    catalog = ServiceCatalog(
        services=(
            ServiceType(
                id="brunch",
                display_name="Brunch",
                base_multiplier=Decimal("2"),
                min_duration=2,
                max_duration=2,
                guest_tiers=(GuestTier(threshold=4, multiplier=Decimal("1.5")),),
                weekend_premium_applies=True,
                add_ons=(AddOn("Mimosas", Decimal("99")),),
            ),
        ),
        base_add_ons=(AddOn("Cleanup", Decimal("1")),),
    )
    uc = ComputeQuoteUseCase(catalog=catalog, weekend_premium=Decimal("2"))
    request = BookingRequest(
        service_type="brunch",
        duration=5,
        guest_count=5,
        event_date=SUNDAY,
        selected_add_ons=frozenset({"Mimosas", "Cleanup"}),
    )

    breakdown = uc.execute(_rate("10"), request)

    # 10 * 2 * 2h * 1.5 * 2 + 99 + 1
    assert breakdown.total == 220


def test_from_payload_defaulting_rules():
    request = BookingRequest.from_payload(
        service_type=" Birthday ",
        duration="4",
        guest_count=None,
        event_date="2024-06-15",
        add_ons=["Cleanup", " ", ""],
    )

    assert request.service_type == "birthday"
    assert request.duration == 4
    assert request.guest_count == 1
    assert request.event_date == SATURDAY
    assert request.selected_add_ons == frozenset({"Cleanup"})

    assert BookingRequest.from_payload("daily", duration="abc", guest_count="0").duration is None
    assert BookingRequest.from_payload("daily", guest_count="0").guest_count == 1
    assert BookingRequest.from_payload("daily", guest_count="12").guest_count == 12
    assert BookingRequest.from_payload("daily", event_date="not a date").event_date is None


def test_from_payload_uses_local_calendar_date():
    """Friday evening UTC is already Saturday in India, so the premium applies."""
    friday_evening_utc = datetime(2024, 6, 14, 20, 0, tzinfo=timezone.utc)

    request = BookingRequest.from_payload(
        "birthday",
        duration=3,
        event_date=friday_evening_utc,
        timezone=ZoneInfo("Asia/Kolkata"),
    )

    assert request.event_date == SATURDAY
    assert compute_quote(_rate("1000"), request, SERVICE_CATALOG).weekend_premium == Decimal("1.2")


def test_service_type_rejects_inconsistent_configuration():
    with pytest.raises(ValueError):
        ServiceType(id="x", display_name="X", base_multiplier=Decimal("1"), min_duration=5, max_duration=2)

    with pytest.raises(ValueError):
        ServiceType(
            id="x",
            display_name="X",
            base_multiplier=Decimal("1"),
            min_duration=1,
            max_duration=2,
            guest_tiers=(
                GuestTier(threshold=10, multiplier=Decimal("1.5")),
                GuestTier(threshold=20, multiplier=Decimal("1.2")),
            ),
        )


def test_catalog_add_ons_include_cleanup_everywhere():
    for service in SERVICE_CATALOG.services:
        names = [a.name for a in SERVICE_CATALOG.add_ons_for(service.id)]
        assert names[0] == "Cleanup"
        assert len(names) == len(set(names))

    assert [a.name for a in SERVICE_CATALOG.add_ons_for("unknown")] == ["Cleanup"]
