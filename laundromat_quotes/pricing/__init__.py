"""Pricing — catalog, line-item calculators, financing math and the option assembler."""

from laundromat_quotes.pricing.catalog import PriceCatalog, load_catalog
from laundromat_quotes.pricing.charges import monthly_charges, one_time_charges
from laundromat_quotes.pricing.financing import finance, loan_payment, present_value
from laundromat_quotes.pricing.engine import compute_pricing, price_charges, project_revenue

__all__ = [
    "PriceCatalog",
    "load_catalog",
    "monthly_charges",
    "one_time_charges",
    "finance",
    "loan_payment",
    "present_value",
    "compute_pricing",
    "price_charges",
    "project_revenue",
]
