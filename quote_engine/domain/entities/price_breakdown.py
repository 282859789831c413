from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")
ONE = Decimal("1")


@dataclass(frozen=True)
class PriceBreakdown:
    base_rate: Decimal = ZERO
    duration: int = 0
    guest_multiplier: Decimal = ONE
    base_total: Decimal = ZERO
    add_on_total: Decimal = ZERO
    subtotal: Decimal = ZERO
    total: int = 0
    weekend_premium: Decimal = ONE
    raw_duration: int | None = None
    service_type: str | None = None

    @staticmethod
    def empty(raw_duration: int | None = None) -> "PriceBreakdown":
        """A zero breakdown meaning "not yet computable", never a free quote."""
        return PriceBreakdown(raw_duration=raw_duration)

    @property
    def is_empty(self) -> bool:
        return self.service_type is None
