"""
Data schemas for quote inputs and pricing outputs.

QuoteConfiguration is what the questionnaire produces; PricingResult is what
the engine derives from it. Results are never edited in place; a change to
any priced input produces a fresh result.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field, field_validator

from laundromat_quotes.config import get_settings

from .enums import KioskType, PricingOptionName, PricingRegime

logger = logging.getLogger(__name__)


def _clamp_number(value: Any, field_name: str) -> float:
    """Negative, non-finite or unparsable numbers become 0."""
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Unparsable value for {field_name}: {value!r} → 0")
        return 0.0
    if not math.isfinite(number) or number < 0:
        logger.warning(f"Out-of-range value for {field_name}: {value!r} → 0")
        return 0.0
    return number


# ── Kiosks ───────────────────────────────────────────────


class KioskSelection(BaseModel):
    selected: bool = False
    quantity: int = 0

    @field_validator("selected", mode="before")
    @classmethod
    def _none_to_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("quantity", mode="before")
    @classmethod
    def _clamp_quantity(cls, v: Any) -> int:
        return int(_clamp_number(v, "kiosk quantity"))

    @property
    def units(self) -> int:
        """Units that are actually priced."""
        return self.quantity if self.selected else 0


class KioskSelections(BaseModel):
    """The four independent kiosk choices."""
    rear_load: KioskSelection = Field(default_factory=KioskSelection, alias="rearLoad")
    front_load: KioskSelection = Field(default_factory=KioskSelection, alias="frontLoad")
    credit_bill: KioskSelection = Field(default_factory=KioskSelection, alias="creditBill")
    credit_only: KioskSelection = Field(default_factory=KioskSelection, alias="creditOnly")

    model_config = {"populate_by_name": True}

    def items(self) -> Iterator[tuple[KioskType, KioskSelection]]:
        for kiosk_type in KioskType:
            yield kiosk_type, getattr(self, kiosk_type.value)


# ── Input ────────────────────────────────────────────────


class QuoteConfiguration(BaseModel):
    """Store configuration collected by the questionnaire."""

    # Identity (not priced)
    prospect_name: str = Field("", alias="prospectName")
    owner_name: str = Field("", alias="ownerName")
    customer_email: str = Field("", alias="customerEmail")
    distributor_name: str = Field("", alias="distributorName")
    store_size: int = Field(0, alias="storeSize")
    accepts_cash: bool = Field(False, alias="acceptsCash")
    accepts_cards: bool = Field(False, alias="acceptsCards")
    has_wdf: bool = Field(False, alias="hasWashDryFold")
    wdf_provider: str = Field("", alias="wdfProvider")
    has_payment_vendor: bool = Field(False, alias="hasPaymentVendor")
    current_vendor: str = Field("", alias="currentVendor")
    additional_notes: str = Field("", alias="additionalNotes")
    expected_close_date: Optional[str] = Field(None, alias="expectedCloseDate")

    # Priced inputs
    num_washers: int = Field(0, alias="numWashers")
    num_dryers: int = Field(0, alias="numDryers")
    wants_wdf: bool = Field(False, alias="wantsWashDryFold")
    wants_pickup_delivery: bool = Field(False, alias="wantsPickupDelivery")
    has_ai_attendant: bool = Field(False, alias="hasAiAttendant")
    has_ai_attendant_with_integration: bool = Field(False, alias="hasAiAttendantWithIntegration")
    self_install: bool = Field(False, alias="selfInstall")
    kiosks: KioskSelections = Field(default_factory=KioskSelections, alias="kioskOptions")
    is_special_promotion: bool = Field(False, alias="isSpecialPromotion")
    financing_interest_rate_percent: float = Field(
        default_factory=lambda: get_settings().default_interest_rate_percent,
        alias="financingInterestRatePercent",
    )
    monthly_base_revenue: float = Field(0.0, alias="monthlyRevenue")

    model_config = {"populate_by_name": True}

    @field_validator(
        "prospect_name", "owner_name", "customer_email", "distributor_name",
        "wdf_provider", "current_vendor", "additional_notes",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator(
        "accepts_cash", "accepts_cards", "has_wdf", "has_payment_vendor",
        "wants_wdf", "wants_pickup_delivery", "has_ai_attendant",
        "has_ai_attendant_with_integration", "self_install", "is_special_promotion",
        mode="before",
    )
    @classmethod
    def _none_to_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("num_washers", "num_dryers", "store_size", mode="before")
    @classmethod
    def _clamp_count(cls, v: Any, info) -> int:
        return int(_clamp_number(v, info.field_name))

    @field_validator("monthly_base_revenue", mode="before")
    @classmethod
    def _clamp_amount(cls, v: Any, info) -> float:
        return _clamp_number(v, info.field_name)

    @field_validator("financing_interest_rate_percent", mode="before")
    @classmethod
    def _clamp_rate(cls, v: Any, info) -> float:
        # A blank rate means "not given", not 0%
        if v is None or (isinstance(v, str) and not v.strip()):
            return get_settings().default_interest_rate_percent
        return _clamp_number(v, info.field_name)

    @field_validator("kiosks", mode="before")
    @classmethod
    def _decode_kiosks(cls, v: Any) -> Any:
        # Stored quote rows keep kiosks as a JSON string
        if v is None or v == "":
            return {}
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                logger.warning(f"Unreadable kiosk selection {v!r} → none selected")
                return {}
        return v

    @property
    def is_distributor(self) -> bool:
        return self.distributor_name.strip() != ""

    @property
    def is_discounted(self) -> bool:
        return self.is_distributor or self.is_special_promotion

    @property
    def total_machines(self) -> int:
        return self.num_washers + self.num_dryers


# ── Output ───────────────────────────────────────────────


class LineItem(BaseModel):
    name: str
    amount: float
    quantity: Optional[int] = None
    unit_price: Optional[float] = None


class ChargeSection(BaseModel):
    """An ordered list of line items and their exact sum."""
    items: list[LineItem] = []
    total: float = 0.0

    @classmethod
    def from_items(cls, items: list[LineItem]) -> "ChargeSection":
        return cls(items=items, total=sum(item.amount for item in items))


class ChargeBreakdown(BaseModel):
    monthly: ChargeSection = Field(default_factory=ChargeSection)
    one_time: ChargeSection = Field(default_factory=ChargeSection)


class FinancingSummary(BaseModel):
    """Option 2 figures: recurring stream as a lump sum, financed with setup costs."""
    term_months: int
    annual_rate_percent: float
    discount_rate: float
    present_value: float
    total_to_finance: float
    monthly_payment: float
    total_of_payments: float
    total_interest: float


class PricingOption(BaseModel):
    """
    One user-facing way to buy.

    ``total`` is the headline figure: the full price for Total Price, Special
    Promotion and Distributor; the monthly payment for Financed and Monthly
    Plan.
    """
    name: PricingOptionName
    label: str
    total: float
    monthly_payment: Optional[float] = None
    upfront_payment: float = 0.0
    term_cost: float = 0.0
    line_items: list[LineItem] = []
    charges: ChargeBreakdown = Field(default_factory=ChargeBreakdown)


class RevenueImpact(BaseModel):
    baseline_monthly: float = 0.0
    added_monthly: float = 0.0
    added_weekly: float = 0.0
    added_annual: float = 0.0
    projected_weekly: float = 0.0
    projected_monthly: float = 0.0
    projected_annual: float = 0.0
    savings_weekly: float = 0.0
    savings_monthly: float = 0.0
    savings_annual: float = 0.0


class PricingResult(BaseModel):
    """Everything a view, a printout or a stored quote needs."""
    regime: PricingRegime = PricingRegime.STANDARD
    selected_option: PricingOptionName = PricingOptionName.TOTAL_PRICE
    interest_rate_percent: float = 0.0
    monthly_recurring_total: float = 0.0
    one_time_charges_total: float = 0.0
    charges: ChargeBreakdown = Field(default_factory=ChargeBreakdown)
    options: list[PricingOption] = []
    financing: Optional[FinancingSummary] = None
    revenue_impact: RevenueImpact = Field(default_factory=RevenueImpact)

    @property
    def is_distributor(self) -> bool:
        return self.regime == PricingRegime.DISTRIBUTOR

    def option(self, name: PricingOptionName) -> Optional[PricingOption]:
        for option in self.options:
            if option.name == name:
                return option
        return None
