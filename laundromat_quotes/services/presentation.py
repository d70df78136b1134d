"""
Presentation helpers shared by the quote views and the printed summary.

Everything here reads from a PricingResult; nothing recomputes prices.
"""

from __future__ import annotations

from laundromat_quotes.models.enums import KioskType, PricingOptionName
from laundromat_quotes.models.schemas import ChargeSection, PricingResult, QuoteConfiguration
from laundromat_quotes.utils.currency import format_currency

KIOSK_SHORT_NAMES: dict[KioskType, str] = {
    KioskType.REAR_LOAD: "Rear Load",
    KioskType.FRONT_LOAD: "Front Load",
    KioskType.CREDIT_BILL: "EBT",
    KioskType.CREDIT_ONLY: "Credit Card Only",
}


def describe_kiosks(config: QuoteConfiguration) -> str:
    """e.g. ``"1 Rear Load, 2 Credit Card Only"``; ``"None"`` when no kiosk is priced."""
    parts = [
        f"{selection.quantity} {KIOSK_SHORT_NAMES[kiosk_type]}"
        for kiosk_type, selection in config.kiosks.items()
        if selection.units > 0
    ]
    return ", ".join(parts) if parts else "None"


def describe_services(config: QuoteConfiguration) -> str:
    services = []
    if config.has_wdf:
        services.append(f"Current WDF ({config.wdf_provider})")
    if config.wants_wdf:
        services.append("Laundry Boss Wash Dry Fold")
    if config.wants_pickup_delivery:
        services.append("Laundry Boss Pickup & Delivery")
    if config.has_ai_attendant_with_integration:
        services.append("AI Attendant with Integration")
    elif config.has_ai_attendant:
        services.append("AI Attendant")
    return ", ".join(services) if services else "Self-service only"


def _section_lines(title: str, section: ChargeSection) -> list[str]:
    lines = [f"  {title}"]
    for item in section.items:
        label = item.name
        if item.quantity is not None and item.unit_price is not None:
            label = f"{item.name} ({item.quantity} × {format_currency(item.unit_price)})"
        lines.append(f"    {label:<48} {format_currency(item.amount):>14}")
    lines.append(f"    {'Total':<48} {format_currency(section.total):>14}")
    return lines


def render_summary(config: QuoteConfiguration, result: PricingResult) -> list[str]:
    """Plain-text quote summary, one string per line."""
    heading = "Distributor Pricing Quote" if result.is_distributor else "Pricing Quote"
    lines = [
        f"{heading} for {config.prospect_name or 'Prospect'}",
        f"  Machines:  {config.total_machines} ({config.num_washers} washers, {config.num_dryers} dryers)",
        f"  Services:  {describe_services(config)}",
        f"  Kiosks:    {describe_kiosks(config)}",
    ]
    if result.is_distributor:
        lines.append(f"  Distributor: {config.distributor_name}")

    lines.append("")
    lines.extend(_section_lines("Monthly Recurring", result.charges.monthly))
    lines.extend(_section_lines("One-Time Charges", result.charges.one_time))
    lines.append("")

    for option in result.options:
        lines.append(f"  {option.label:<50} {format_currency(option.total):>14}")
        if option.name == PricingOptionName.FINANCED and result.financing:
            financing = result.financing
            lines.append(
                f"    {financing.term_months} months at {financing.annual_rate_percent:g}% APR; "
                f"total of payments {format_currency(financing.total_of_payments)}, "
                f"interest {format_currency(financing.total_interest)}"
            )
        elif option.name == PricingOptionName.MONTHLY_PLAN:
            lines.append(f"    plus {format_currency(option.upfront_payment)} one-time setup")

    revenue = result.revenue_impact
    if revenue.baseline_monthly > 0:
        lines.append("")
        lines.append(
            f"  Revenue: {format_currency(revenue.baseline_monthly)}/mo → "
            f"{format_currency(revenue.projected_monthly)}/mo "
            f"(+{format_currency(revenue.added_annual)}/yr)"
        )
    return lines
