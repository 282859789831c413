from __future__ import annotations

from decimal import Decimal

from quote_engine.domain.entities.service_catalog import AddOn, GuestTier, ServiceCatalog, ServiceType

BASE_ADD_ONS = (
    AddOn("Cleanup", Decimal("150"), "Complete post-meal cleanup service"),
)

SERVICE_TYPES = (
    ServiceType(
        id="birthday",
        display_name="Birthday Party",
        description="Celebrate special birthdays with custom menus and party atmosphere",
        base_multiplier=Decimal("1.5"),
        min_duration=3,
        max_duration=8,
        guest_tiers=(
            GuestTier(threshold=10, multiplier=Decimal("1.15")),
            GuestTier(threshold=20, multiplier=Decimal("1.3")),
        ),
        weekend_premium_applies=True,
        add_ons=(
            AddOn("Party Decor", Decimal("500"), "Birthday party table decoration"),
            AddOn("Birthday Cake", Decimal("800"), "Custom birthday cake"),
            AddOn("Photography", Decimal("1200"), "Party photography service"),
        ),
    ),
    ServiceType(
        id="marriage",
        display_name="Marriage Ceremony",
        description="Grand wedding celebrations with multi-course traditional meals",
        base_multiplier=Decimal("2.5"),
        min_duration=6,
        max_duration=12,
        guest_tiers=(
            GuestTier(threshold=25, multiplier=Decimal("1.2")),
            GuestTier(threshold=50, multiplier=Decimal("1.5")),
            GuestTier(threshold=100, multiplier=Decimal("2.0")),
        ),
        weekend_premium_applies=True,
        add_ons=(
            AddOn("Wedding Decor", Decimal("2000"), "Elegant wedding decoration"),
            AddOn("Traditional Setup", Decimal("1500"), "Traditional ceremony setup"),
            AddOn("Catering Staff", Decimal("3000"), "Additional serving staff"),
            AddOn("Premium Ingredients", Decimal("2500"), "Premium quality ingredients"),
        ),
    ),
    ServiceType(
        id="daily",
        display_name="Daily Cook",
        description="Regular home cooking for daily meals and weekly meal prep",
        base_multiplier=Decimal("0.8"),
        min_duration=1,
        max_duration=3,
        guest_tiers=(GuestTier(threshold=6, multiplier=Decimal("1.1")),),
        weekend_premium_applies=False,
        add_ons=(
            AddOn("Grocery Shopping", Decimal("200"), "Weekly grocery shopping"),
            AddOn("Meal Planning", Decimal("300"), "Weekly meal planning service"),
            AddOn("Utensils Care", Decimal("150"), "Kitchen utensils maintenance"),
        ),
    ),
)

SERVICE_CATALOG = ServiceCatalog(services=SERVICE_TYPES, base_add_ons=BASE_ADD_ONS)
