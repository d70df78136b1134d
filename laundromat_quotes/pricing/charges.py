"""
Line-item calculators for monthly recurring fees and one-time charges.

Both take already-resolved unit prices, so the same code serves the standard,
distributor and promotional regimes. Totals are always the plain sum of the
returned line items.
"""

from __future__ import annotations

import math

from laundromat_quotes.models.enums import KioskType
from laundromat_quotes.models.schemas import ChargeSection, LineItem, QuoteConfiguration
from laundromat_quotes.pricing.catalog import ResolvedPrices

KIOSK_LABELS: dict[KioskType, str] = {
    KioskType.REAR_LOAD: "Rear Load Kiosk",
    KioskType.FRONT_LOAD: "Front Load Kiosk",
    KioskType.CREDIT_BILL: "EBT Kiosk",
    KioskType.CREDIT_ONLY: "Credit Card Only Kiosk",
}


def monthly_charges(config: QuoteConfiguration, prices: ResolvedPrices) -> ChargeSection:
    """Washers, dryers, then the optional software and AI services."""
    monthly = prices.monthly
    items = [
        LineItem(
            name="Washers",
            amount=config.num_washers * monthly.washer,
            quantity=config.num_washers,
            unit_price=monthly.washer,
        ),
        LineItem(
            name="Dryers",
            amount=config.num_dryers * monthly.dryer,
            quantity=config.num_dryers,
            unit_price=monthly.dryer,
        ),
    ]

    if config.wants_wdf:
        items.append(LineItem(name="WDF Software License", amount=monthly.wdf_software))
    if config.wants_pickup_delivery:
        items.append(LineItem(name="Pick Up & Delivery License", amount=monthly.pickup_delivery))

    # Integration includes the base attendant service
    if config.has_ai_attendant_with_integration:
        items.append(LineItem(name="AI Attendant Service", amount=monthly.ai_attendant))
        items.append(LineItem(name="AI Integration Service", amount=monthly.ai_integration))
    elif config.has_ai_attendant:
        items.append(LineItem(name="AI Attendant Service", amount=monthly.ai_attendant))

    return ChargeSection.from_items(items)


def qr_code_sheets(total_machines: int, machines_per_sheet: int) -> int:
    return math.ceil(total_machines / machines_per_sheet)


def one_time_charges(config: QuoteConfiguration, prices: ResolvedPrices) -> ChargeSection:
    """Setup hardware, services, installation and kiosks."""
    fees = prices.one_time
    machines = config.total_machines
    sheets = qr_code_sheets(machines, fees.machines_per_qr_sheet)

    items = [
        LineItem(
            name="Harnesses",
            amount=machines * fees.harness_per_machine,
            quantity=machines,
            unit_price=fees.harness_per_machine,
        ),
        LineItem(
            name="QR Codes",
            amount=sheets * fees.qr_code_per_sheet,
            quantity=sheets,
            unit_price=fees.qr_code_per_sheet,
        ),
        LineItem(name="Sign Package", amount=fees.sign_package),
        LineItem(name="Matterport 3D Scan", amount=fees.matterport_scan),
        LineItem(name="Full Network Package", amount=fees.network_package),
    ]

    if config.wants_wdf or config.wants_pickup_delivery:
        items.append(LineItem(name="Point of Sale System", amount=fees.pos_system))

    items.append(
        LineItem(
            name="Installation Assistance (Self-Install)" if config.self_install else "Installation",
            amount=fees.installation_price(machines, config.self_install),
        )
    )

    for kiosk_type, selection in config.kiosks.items():
        if selection.units <= 0:
            continue
        unit_price = prices.kiosks.price_for(kiosk_type)
        items.append(
            LineItem(
                name=KIOSK_LABELS[kiosk_type],
                amount=unit_price * selection.units * prices.kiosk_factor,
                quantity=selection.units,
                unit_price=unit_price,
            )
        )

    return ChargeSection.from_items(items)
