from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any
from zoneinfo import ZoneInfo


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        pass
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return None


def _to_date(value: Any, timezone: ZoneInfo | None) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and timezone is not None:
            value = value.astimezone(timezone)
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return _to_date(datetime.fromisoformat(text.replace("Z", "+00:00")), timezone)
    except ValueError:
        return None


@dataclass(frozen=True)
class BookingRequest:
    service_type: str | None
    duration: int | None = None  # raw value, clamped only when pricing
    guest_count: int = 1
    event_date: date | None = None
    selected_add_ons: frozenset[str] = frozenset()

    @staticmethod
    def from_payload(
        service_type: str | None,
        duration: Any = None,
        guest_count: Any = None,
        event_date: Any = None,
        add_ons: Iterable[str] | None = None,
        timezone: ZoneInfo | None = None,
    ) -> "BookingRequest":
        """
        Build a request from loosely-typed form input.

        Defaulting rules: a missing or unparseable guest count becomes 1 and
        counts below 1 are raised to 1; a missing or unparseable duration stays
        None and is replaced by the service minimum at pricing time. Aware
        datetimes are converted to ``timezone`` before taking the calendar date.
        """
        guests = _to_int(guest_count)
        names = frozenset(n.strip() for n in (add_ons or []) if n and n.strip())
        return BookingRequest(
            service_type=(service_type or "").strip().lower() or None,
            duration=_to_int(duration),
            guest_count=max(1, guests or 1),
            event_date=_to_date(event_date, timezone),
            selected_add_ons=names,
        )


@dataclass(frozen=True)
class ChefRate:
    price_per_hour: Decimal | None = None

    @staticmethod
    def from_value(value: Any) -> "ChefRate":
        if value is None or value == "":
            return ChefRate()
        try:
            price = Decimal(str(value))
        except InvalidOperation:
            return ChefRate()
        if not price.is_finite() or price <= 0:
            return ChefRate()
        return ChefRate(price_per_hour=price)
