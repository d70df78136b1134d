"""
Financing math for the Financed option.

The monthly recurring stream is turned into a lump sum with a present-value
annuity, added to the one-time charges, and amortized with a standard PMT.
"""

from __future__ import annotations

from laundromat_quotes.models.schemas import FinancingSummary
from laundromat_quotes.pricing.catalog import FinancingTerms


def present_value(monthly_payment: float, months: int = 48, discount_rate: float = 0.125) -> float:
    """Present value of ``months`` equal payments at an annual discount rate."""
    months = max(int(months), 1)
    monthly_rate = discount_rate / 12
    if monthly_rate == 0:
        return monthly_payment * months
    return monthly_payment * (1 - (1 + monthly_rate) ** -months) / monthly_rate


def loan_payment(principal: float, annual_rate_percent: float, months: int = 48) -> float:
    """Level monthly payment that amortizes ``principal`` over ``months``."""
    months = max(int(months), 1)
    monthly_rate = annual_rate_percent / 100 / 12
    if monthly_rate == 0:
        return principal / months
    growth = (1 + monthly_rate) ** months
    return principal * monthly_rate * growth / (growth - 1)


def finance(
    monthly_recurring: float,
    one_time_charges: float,
    annual_rate_percent: float,
    terms: FinancingTerms,
) -> FinancingSummary:
    months = terms.term_months
    pv = present_value(monthly_recurring, months, terms.present_value_discount_rate)
    total_to_finance = pv + one_time_charges
    payment = loan_payment(total_to_finance, annual_rate_percent, months)
    total_of_payments = payment * months

    return FinancingSummary(
        term_months=months,
        annual_rate_percent=annual_rate_percent,
        discount_rate=terms.present_value_discount_rate,
        present_value=pv,
        total_to_finance=total_to_finance,
        monthly_payment=payment,
        total_of_payments=total_of_payments,
        total_interest=total_of_payments - total_to_finance,
    )
