"""
Price Catalog — the single source of truth for every pricing constant.

The catalog is immutable at runtime. Two one-time schedules are carried side
by side: the standard one used by the total-price, financed, monthly-plan and
distributor paths, and the independently defined promotional one used only by
the Special Promotion option.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from laundromat_quotes.models.enums import KioskType

logger = logging.getLogger(__name__)

_FROZEN = {"frozen": True}


# ── Price tables ─────────────────────────────────────────

class MonthlyPrices(BaseModel):
    """Monthly recurring unit prices."""
    washer: float = Field(5.0, ge=0)
    dryer: float = Field(5.0, ge=0)
    wdf_software: float = Field(100.0, ge=0)
    pickup_delivery: float = Field(100.0, ge=0)
    ai_attendant: float = Field(50.0, ge=0)
    ai_integration: float = Field(100.0, ge=0)

    model_config = _FROZEN

    def scaled(self, factor: float) -> "MonthlyPrices":
        return MonthlyPrices(
            washer=self.washer * factor,
            dryer=self.dryer * factor,
            wdf_software=self.wdf_software * factor,
            pickup_delivery=self.pickup_delivery * factor,
            ai_attendant=self.ai_attendant * factor,
            ai_integration=self.ai_integration * factor,
        )


class InstallationTier(BaseModel):
    """Full-service installation price for up to ``max_machines`` machines."""
    max_machines: Optional[int] = Field(None, ge=0)  # None = no upper bound
    price: float = Field(ge=0)

    model_config = _FROZEN


def _tiers(*pairs: tuple[Optional[int], float]) -> tuple[InstallationTier, ...]:
    return tuple(InstallationTier(max_machines=m, price=p) for m, p in pairs)


STANDARD_INSTALLATION_TIERS = _tiers(
    (10, 1500.0), (20, 2500.0), (40, 3000.0), (60, 3500.0),
    (80, 4500.0), (100, 5500.0), (120, 7000.0), (None, 8000.0),
)

PROMOTIONAL_INSTALLATION_TIERS = _tiers(
    (10, 1000.0), (20, 1750.0), (40, 2100.0), (60, 2450.0),
    (80, 3150.0), (100, 3850.0), (120, 4900.0), (None, 5600.0),
)


class OneTimePrices(BaseModel):
    """One-time charges, excluding kiosks."""
    harness_per_machine: float = Field(25.0, ge=0)
    qr_code_per_sheet: float = Field(110.0, ge=0)
    machines_per_qr_sheet: int = Field(20, gt=0)
    sign_package: float = Field(140.0, ge=0)
    matterport_scan: float = Field(350.0, ge=0)
    network_package: float = Field(1875.0, ge=0)
    pos_system: float = Field(3125.0, ge=0)
    self_install: float = Field(500.0, ge=0)
    installation_tiers: tuple[InstallationTier, ...] = STANDARD_INSTALLATION_TIERS

    model_config = _FROZEN

    def installation_price(self, total_machines: int, self_install: bool) -> float:
        """Self-install assistance is flat; full service is tiered by machine count."""
        if self_install:
            return self.self_install
        for tier in self.installation_tiers:
            if tier.max_machines is None or total_machines <= tier.max_machines:
                return tier.price
        # Tables without an open-ended tier fall back to the largest one
        return self.installation_tiers[-1].price if self.installation_tiers else 0.0


def _promotional_one_time() -> OneTimePrices:
    return OneTimePrices(
        sign_package=100.0,
        matterport_scan=250.0,
        network_package=1300.0,
        pos_system=2200.0,
        self_install=350.0,
        installation_tiers=PROMOTIONAL_INSTALLATION_TIERS,
    )


class KioskPrices(BaseModel):
    """Per-unit kiosk prices."""
    rear_load: float = Field(9925.0, ge=0)
    front_load: float = Field(13500.0, ge=0)
    credit_bill: float = Field(6250.0, ge=0)
    credit_only: float = Field(2295.0, ge=0)

    model_config = _FROZEN

    def price_for(self, kiosk_type: KioskType) -> float:
        return getattr(self, kiosk_type.value)


class DiscountFactors(BaseModel):
    """Multipliers applied by the distributor / promotion regime."""
    monthly: float = Field(0.8, ge=0)
    kiosk: float = Field(0.7, ge=0)

    model_config = _FROZEN


class FinancingTerms(BaseModel):
    term_months: int = Field(48, gt=0)
    present_value_discount_rate: float = Field(0.125, ge=0)  # annual

    model_config = _FROZEN


class RevenueAssumptions(BaseModel):
    """Assumptions behind the revenue-impact projection."""
    uplift_rate: float = Field(0.153, ge=0)
    weeks_per_month: float = Field(4.33, gt=0)
    annual_savings_reference: float = Field(5500.0, ge=0)
    savings_reference_machines: int = Field(30, gt=0)

    model_config = _FROZEN

    @property
    def annual_savings_per_machine(self) -> float:
        return self.annual_savings_reference / self.savings_reference_machines


# ── Catalog ──────────────────────────────────────────────

class ResolvedPrices(BaseModel):
    """Unit prices after the discount regime has been applied."""
    monthly: MonthlyPrices
    one_time: OneTimePrices
    kiosks: KioskPrices
    kiosk_factor: float = 1.0

    model_config = _FROZEN


class PriceCatalog(BaseModel):
    """Complete, read-only price list."""
    monthly: MonthlyPrices = Field(default_factory=MonthlyPrices)
    one_time: OneTimePrices = Field(default_factory=OneTimePrices)
    promotional_one_time: OneTimePrices = Field(default_factory=_promotional_one_time)
    kiosks: KioskPrices = Field(default_factory=KioskPrices)
    discounts: DiscountFactors = Field(default_factory=DiscountFactors)
    financing: FinancingTerms = Field(default_factory=FinancingTerms)
    revenue: RevenueAssumptions = Field(default_factory=RevenueAssumptions)

    model_config = _FROZEN

    def resolve(self, discounted: bool, promotional: bool = False) -> ResolvedPrices:
        """
        Return the unit prices for one pricing regime.

        ``discounted`` scales the monthly prices by the monthly factor and
        sets the kiosk factor; ``promotional`` swaps in the promotional
        one-time schedule. Kiosk unit prices are left as listed so the
        factor is applied after ``unit × quantity``.
        """
        return ResolvedPrices(
            monthly=self.monthly.scaled(self.discounts.monthly) if discounted else self.monthly,
            one_time=self.promotional_one_time if promotional else self.one_time,
            kiosks=self.kiosks,
            kiosk_factor=self.discounts.kiosk if discounted else 1.0,
        )


def load_catalog(path: str | Path) -> PriceCatalog:
    """Load a catalog from a JSON file; missing sections keep their defaults."""
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Price catalog not found: {catalog_path}")

    catalog = PriceCatalog.model_validate_json(catalog_path.read_text(encoding="utf-8"))
    logger.info(f"Loaded price catalog from {catalog_path}")
    return catalog
