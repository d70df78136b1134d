"""
Intake Service — turns a questionnaire submission into a QuoteConfiguration.

Handles the form's loose inputs: currency strings for revenue, the "Other"
payment vendor, and the kiosk layout suggested from store size and payment
methods.
"""

from __future__ import annotations

import logging
from typing import Any

from laundromat_quotes.config import get_settings
from laundromat_quotes.models.schemas import KioskSelection, KioskSelections, QuoteConfiguration
from laundromat_quotes.utils.currency import parse_currency_string

logger = logging.getLogger(__name__)


def suggest_kiosks(store_size: int, accepts_cash: bool, accepts_cards: bool) -> KioskSelections:
    """Recommended kiosk mix for a store of ``store_size`` square feet."""
    rear_load = credit_only = 0

    if accepts_cash:
        if store_size < 1500:
            rear_load = 1
        elif store_size < 3000:
            rear_load, credit_only = 1, 1
        elif store_size < 5000:
            rear_load, credit_only = 2, 2
        else:
            rear_load, credit_only = 2, 3
    elif accepts_cards:
        if store_size < 2000:
            credit_only = 1
        elif store_size < 4000:
            credit_only = 2
        else:
            credit_only = 3

    return KioskSelections(
        rear_load=KioskSelection(selected=rear_load > 0, quantity=rear_load),
        credit_only=KioskSelection(selected=credit_only > 0, quantity=credit_only),
    )


class IntakeService:
    """Normalizes questionnaire payloads before pricing."""

    def __init__(self, default_interest_rate_percent: float | None = None):
        if default_interest_rate_percent is None:
            default_interest_rate_percent = get_settings().default_interest_rate_percent
        self.default_interest_rate_percent = default_interest_rate_percent

    def build_configuration(
        self,
        payload: dict[str, Any],
        apply_kiosk_suggestions: bool = False,
    ) -> QuoteConfiguration:
        """
        Validate a questionnaire payload (camelCase or snake_case keys).

        With ``apply_kiosk_suggestions`` the kiosk choices are replaced by the
        suggested layout whenever a store size was given, as the form does.
        """
        data = dict(payload)

        revenue_key = "monthlyRevenue" if "monthlyRevenue" in data else "monthly_base_revenue"
        if isinstance(data.get(revenue_key), str):
            data[revenue_key] = parse_currency_string(data[revenue_key])

        other_vendor = (data.pop("currentVendorOther", None) or "").strip()
        vendor_key = "currentVendor" if "currentVendor" in data else "current_vendor"
        if data.get(vendor_key) == "Other":
            data[vendor_key] = other_vendor or "Other"
        data.pop("wdfOtherProvider", None)

        rate_keys = ("financingInterestRatePercent", "financing_interest_rate_percent")
        if not _has_any(data, *rate_keys):
            for key in rate_keys:
                data.pop(key, None)
            data["financing_interest_rate_percent"] = self.default_interest_rate_percent

        config = QuoteConfiguration.model_validate(data)

        if apply_kiosk_suggestions and config.store_size > 0:
            suggested = suggest_kiosks(config.store_size, config.accepts_cash, config.accepts_cards)
            config = config.model_copy(update={"kiosks": suggested})
            logger.debug(f"Kiosk suggestions applied for {config.store_size} sq ft")

        logger.info(
            f"Intake for '{config.prospect_name}': {config.num_washers} washers, "
            f"{config.num_dryers} dryers, distributor={config.is_distributor}"
        )
        return config


def _has_any(data: dict[str, Any], *keys: str) -> bool:
    """True when any key holds a value; blank form fields count as missing."""
    return any(data.get(k) is not None and str(data[k]).strip() != "" for k in keys)
