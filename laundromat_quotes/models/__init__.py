"""Models — enums and pydantic schemas for quote inputs and outputs."""

from .enums import KioskType, PricingOptionName, PricingRegime
from .schemas import (
    ChargeBreakdown,
    ChargeSection,
    FinancingSummary,
    KioskSelection,
    KioskSelections,
    LineItem,
    PricingOption,
    PricingResult,
    QuoteConfiguration,
    RevenueImpact,
)

__all__ = [
    "KioskType",
    "PricingOptionName",
    "PricingRegime",
    "ChargeBreakdown",
    "ChargeSection",
    "FinancingSummary",
    "KioskSelection",
    "KioskSelections",
    "LineItem",
    "PricingOption",
    "PricingResult",
    "QuoteConfiguration",
    "RevenueImpact",
]
