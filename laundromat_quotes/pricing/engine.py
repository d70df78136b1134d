"""
Pricing Engine — assembles every pricing option for a quote in one call.

compute_pricing() is pure: no I/O, no clock, no shared state. The same
(configuration, catalog) pair always yields an identical PricingResult.
"""

from __future__ import annotations

import logging
from typing import Optional

from laundromat_quotes.config import get_catalog
from laundromat_quotes.models.enums import PricingOptionName, PricingRegime
from laundromat_quotes.models.schemas import (
    ChargeBreakdown,
    FinancingSummary,
    LineItem,
    PricingOption,
    PricingResult,
    QuoteConfiguration,
    RevenueImpact,
)
from laundromat_quotes.pricing.catalog import PriceCatalog, RevenueAssumptions
from laundromat_quotes.pricing.charges import monthly_charges, one_time_charges
from laundromat_quotes.pricing.financing import finance

logger = logging.getLogger(__name__)


def price_charges(
    config: QuoteConfiguration,
    catalog: PriceCatalog,
    discounted: bool = False,
    promotional: bool = False,
) -> ChargeBreakdown:
    """Monthly and one-time line items under one pricing regime."""
    prices = catalog.resolve(discounted=discounted, promotional=promotional)
    return ChargeBreakdown(
        monthly=monthly_charges(config, prices),
        one_time=one_time_charges(config, prices),
    )


def compute_pricing(
    config: QuoteConfiguration,
    catalog: Optional[PriceCatalog] = None,
) -> PricingResult:
    """Compute the complete pricing result for a quote configuration."""
    catalog = catalog or get_catalog()
    term = catalog.financing.term_months
    rate = config.financing_interest_rate_percent
    revenue = project_revenue(config, catalog.revenue)

    if config.is_distributor:
        charges = price_charges(config, catalog, discounted=True)
        result = PricingResult(
            regime=PricingRegime.DISTRIBUTOR,
            selected_option=PricingOptionName.DISTRIBUTOR,
            interest_rate_percent=rate,
            monthly_recurring_total=charges.monthly.total,
            one_time_charges_total=charges.one_time.total,
            charges=charges,
            options=[_term_price_option(PricingOptionName.DISTRIBUTOR, "Distributor Total Price", charges, term)],
            revenue_impact=revenue,
        )
        logger.debug(f"Distributor quote priced: {result.options[0].total:.2f}")
        return result

    standard = price_charges(config, catalog)
    promotion = price_charges(config, catalog, discounted=True, promotional=True)
    financing = finance(standard.monthly.total, standard.one_time.total, rate, catalog.financing)

    options = [
        _term_price_option(PricingOptionName.TOTAL_PRICE, "Option 1: Total Price", standard, term),
        _financed_option(standard, financing),
        _monthly_plan_option(standard, term),
        _term_price_option(PricingOptionName.SPECIAL_PROMOTION, "Option 4: Special Promotion", promotion, term),
    ]

    if config.is_special_promotion:
        regime, selected, charges = PricingRegime.PROMOTION, PricingOptionName.SPECIAL_PROMOTION, promotion
    else:
        regime, selected, charges = PricingRegime.STANDARD, PricingOptionName.TOTAL_PRICE, standard

    result = PricingResult(
        regime=regime,
        selected_option=selected,
        interest_rate_percent=rate,
        monthly_recurring_total=charges.monthly.total,
        one_time_charges_total=charges.one_time.total,
        charges=charges,
        options=options,
        financing=financing,
        revenue_impact=revenue,
    )
    logger.debug(
        f"Quote priced ({regime.value}): monthly={result.monthly_recurring_total:.2f} "
        f"one_time={result.one_time_charges_total:.2f} financed={financing.monthly_payment:.2f}"
    )
    return result


# ── Option builders ──────────────────────────────────────


def _term_price_option(
    name: PricingOptionName,
    label: str,
    charges: ChargeBreakdown,
    term: int,
) -> PricingOption:
    """Full term of monthly service plus setup, paid as one price."""
    services = charges.monthly.total * term
    total = services + charges.one_time.total
    return PricingOption(
        name=name,
        label=label,
        total=total,
        upfront_payment=total,
        term_cost=total,
        line_items=[
            LineItem(name=f"Monthly Services ({term} months)", amount=services),
            LineItem(name="One-Time Charges", amount=charges.one_time.total),
        ],
        charges=charges,
    )


def _financed_option(charges: ChargeBreakdown, financing: FinancingSummary) -> PricingOption:
    return PricingOption(
        name=PricingOptionName.FINANCED,
        label="Option 2: Financed Solution",
        total=financing.monthly_payment,
        monthly_payment=financing.monthly_payment,
        term_cost=financing.total_of_payments,
        line_items=[
            LineItem(name="Present Value of Monthly Services", amount=financing.present_value),
            LineItem(name="One-Time Charges", amount=charges.one_time.total),
        ],
        charges=charges,
    )


def _monthly_plan_option(charges: ChargeBreakdown, term: int) -> PricingOption:
    monthly = charges.monthly.total
    return PricingOption(
        name=PricingOptionName.MONTHLY_PLAN,
        label="Option 3: Monthly Payment Plan",
        total=monthly,
        monthly_payment=monthly,
        upfront_payment=charges.one_time.total,
        term_cost=monthly * term + charges.one_time.total,
        line_items=charges.monthly.items + charges.one_time.items,
        charges=charges,
    )


# ── Revenue impact ───────────────────────────────────────


def project_revenue(config: QuoteConfiguration, assumptions: RevenueAssumptions) -> RevenueImpact:
    """Projected revenue uplift and operational savings for the store."""
    baseline = config.monthly_base_revenue
    added = baseline * assumptions.uplift_rate
    projected = baseline + added
    savings_annual = assumptions.annual_savings_per_machine * config.total_machines

    return RevenueImpact(
        baseline_monthly=baseline,
        added_monthly=added,
        added_weekly=added / assumptions.weeks_per_month,
        added_annual=added * 12,
        projected_weekly=projected / assumptions.weeks_per_month,
        projected_monthly=projected,
        projected_annual=projected * 12,
        savings_weekly=savings_annual / 52,
        savings_monthly=savings_annual / 12,
        savings_annual=savings_annual,
    )
