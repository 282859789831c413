from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class GuestTier:
    threshold: int
    multiplier: Decimal


@dataclass(frozen=True)
class AddOn:
    name: str
    price: Decimal
    description: str | None = None


@dataclass(frozen=True)
class ServiceType:
    id: str
    display_name: str
    base_multiplier: Decimal
    min_duration: int
    max_duration: int
    guest_tiers: tuple[GuestTier, ...] = ()
    weekend_premium_applies: bool = False
    add_ons: tuple[AddOn, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        if self.base_multiplier < 0:
            raise ValueError(f"base_multiplier must be >= 0 for {self.id!r}")
        if self.min_duration > self.max_duration:
            raise ValueError(f"min_duration > max_duration for {self.id!r}")
        previous: GuestTier | None = None
        for tier in self.guest_tiers:
            if previous is not None:
                if tier.threshold <= previous.threshold:
                    raise ValueError(f"guest tiers must ascend by threshold for {self.id!r}")
                if tier.multiplier < previous.multiplier:
                    raise ValueError(f"guest tier multipliers must not decrease for {self.id!r}")
            previous = tier

    def clamp_duration(self, duration: int | None) -> int:
        """Clamp a requested duration into the service bounds; missing or zero means the minimum."""
        value = duration or self.min_duration
        return max(self.min_duration, min(self.max_duration, value))


@dataclass(frozen=True)
class ServiceCatalog:
    services: tuple[ServiceType, ...]
    base_add_ons: tuple[AddOn, ...] = ()
    _index: dict[str, ServiceType] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {s.id: s for s in self.services})

    def get_service(self, service_id: str | None) -> ServiceType | None:
        if not service_id:
            return None
        return self._index.get(service_id.lower().strip())

    def add_ons_for(self, service_id: str | None) -> tuple[AddOn, ...]:
        service = self.get_service(service_id)
        if service is None:
            return self.base_add_ons
        return self.base_add_ons + service.add_ons

    def add_on_prices(self, service_id: str | None) -> dict[str, Decimal]:
        # Service-specific entries win over base entries with the same name.
        return {a.name: a.price for a in self.add_ons_for(service_id)}
