"""
Quote Service — builds stored quote records and applies admin edits.

A record is a flat dict: the configuration columns, the priced columns and
bookkeeping (id, timestamps, status). Storing it is the caller's job. Every
edit recomputes the whole PricingResult and rewrites every priced column, so
a record never mixes figures from two different configurations.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from laundromat_quotes.config import get_catalog, get_settings
from laundromat_quotes.models.enums import PricingOptionName
from laundromat_quotes.models.schemas import PricingResult, QuoteConfiguration
from laundromat_quotes.pricing.catalog import PriceCatalog
from laundromat_quotes.pricing.engine import compute_pricing
from laundromat_quotes.services.intake_service import IntakeService

logger = logging.getLogger(__name__)

# record column → QuoteConfiguration field
CONFIG_COLUMNS: dict[str, str] = {
    "prospect_name": "prospect_name",
    "owner_name": "owner_name",
    "customer_email": "customer_email",
    "distributor_name": "distributor_name",
    "store_size": "store_size",
    "num_washers": "num_washers",
    "num_dryers": "num_dryers",
    "accepts_cash": "accepts_cash",
    "accepts_cards": "accepts_cards",
    "has_wdf": "has_wdf",
    "wdf_provider": "wdf_provider",
    "wants_wdf": "wants_wdf",
    "wants_pickup_delivery": "wants_pickup_delivery",
    "has_payment_vendor": "has_payment_vendor",
    "current_vendor": "current_vendor",
    "self_install": "self_install",
    "ai_attendant": "has_ai_attendant",
    "ai_integration": "has_ai_attendant_with_integration",
    "kiosks": "kiosks",
    "additional_notes": "additional_notes",
    "monthly_base_revenue": "monthly_base_revenue",
    "expected_close_date": "expected_close_date",
    "special_promotion": "is_special_promotion",
    "option2_interest_rate": "financing_interest_rate_percent",
}

# Columns that only carry bookkeeping; editable without touching prices
BOOKKEEPING_COLUMNS = {"status"}


def priced_columns(result: PricingResult, term_months: int = 48) -> dict[str, Any]:
    """Flatten a PricingResult into the stored priced columns."""
    total_price = result.option(PricingOptionName.TOTAL_PRICE)
    promotion = result.option(PricingOptionName.SPECIAL_PROMOTION)
    distributor = result.option(PricingOptionName.DISTRIBUTOR)
    financing = result.financing

    return {
        "monthly_recurring": result.monthly_recurring_total,
        "one_time_charges": result.one_time_charges_total,
        "total_price_option1": total_price.total if total_price else None,
        "distributor_total_price": distributor.total if distributor else None,
        "promotion_total_price": promotion.total if promotion else None,
        "monthly_total_48": result.monthly_recurring_total * term_months,
        "present_value": financing.present_value if financing else None,
        "total_to_finance": financing.total_to_finance if financing else None,
        "financed_monthly_payment": financing.monthly_payment if financing else None,
    }


def configuration_columns(config: QuoteConfiguration) -> dict[str, Any]:
    values = config.model_dump()
    columns = {column: values[field] for column, field in CONFIG_COLUMNS.items()}
    columns["kiosks"] = json.dumps(config.kiosks.model_dump(by_alias=True))
    columns["distributor_name"] = config.distributor_name or None
    return columns


class QuoteService:
    """Creates and edits quote records; pricing is always delegated to the engine."""

    def __init__(self, catalog: Optional[PriceCatalog] = None, intake: Optional[IntakeService] = None):
        self.settings = get_settings()
        self.catalog = catalog or get_catalog()
        self.intake = intake or IntakeService()

    def price(self, config: QuoteConfiguration) -> PricingResult:
        return compute_pricing(config, self.catalog)

    # ── Create ───────────────────────────────────────────

    def create_quote(
        self,
        payload: dict[str, Any],
        quote_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """Price a questionnaire submission and return the record to store."""
        config = self.intake.build_configuration(payload)
        result = self.price(config)
        now = now or datetime.now(timezone.utc)

        record: dict[str, Any] = {
            "id": quote_id or str(uuid.uuid4()),
            "created_at": now.isoformat(),
            "expires_at": (now + timedelta(days=self.settings.quote_validity_days)).isoformat(),
            "status": self.settings.default_quote_status,
        }
        record.update(configuration_columns(config))
        record.update(priced_columns(result, self.catalog.financing.term_months))

        logger.info(
            f"Quote {record['id']} created for '{config.prospect_name}' "
            f"(monthly={result.monthly_recurring_total:.2f}, one_time={result.one_time_charges_total:.2f})"
        )
        return record

    # ── Read ─────────────────────────────────────────────

    def configuration_from_record(self, record: dict[str, Any]) -> QuoteConfiguration:
        data = {field: record[column] for column, field in CONFIG_COLUMNS.items() if column in record}
        return QuoteConfiguration.model_validate(data)

    def result_from_record(self, record: dict[str, Any]) -> PricingResult:
        """Recompute the full result for a stored record (views never trust stale columns)."""
        return self.price(self.configuration_from_record(record))

    # ── Update ───────────────────────────────────────────

    def update_quote(
        self,
        record: dict[str, Any],
        changes: dict[str, Any],
        note: str = "",
        now: Optional[datetime] = None,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """
        Apply an admin edit and recompute every priced column.

        Returns the updated record and a revision entry holding the previous
        snapshot. Unknown columns are ignored; an edit with nothing to apply
        raises ValueError.
        """
        editable = set(CONFIG_COLUMNS) | BOOKKEEPING_COLUMNS
        applied = {k: v for k, v in changes.items() if k in editable}
        ignored = sorted(set(changes) - editable)
        if ignored:
            logger.warning(f"Ignoring non-editable quote fields: {ignored}")
        if not applied:
            raise ValueError("No fields to update")

        merged = {**record, **applied}
        config = self.configuration_from_record(merged)
        result = self.price(config)

        updated = dict(merged)
        updated.update(configuration_columns(config))
        updated.update(priced_columns(result, self.catalog.financing.term_months))

        now = now or datetime.now(timezone.utc)
        revision = {
            "quote_id": record.get("id"),
            "note": note or "Quote updated via admin",
            "data": dict(record),
            "created_at": now.isoformat(),
        }

        logger.info(
            f"Quote {record.get('id')} updated ({', '.join(sorted(applied))}); "
            f"financed payment now {updated['financed_monthly_payment']}"
        )
        return updated, revision

    def update_interest_rate(
        self,
        record: dict[str, Any],
        annual_rate_percent: float,
        now: Optional[datetime] = None,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """Change the financing rate; still a full recompute, not a patch."""
        return self.update_quote(
            record,
            {"option2_interest_rate": annual_rate_percent},
            note="Financing rate updated via admin",
            now=now,
        )
