"""Laundromat Quote Engine — pricing and financing for laundromat-equipment quotes."""

from laundromat_quotes.models.schemas import PricingResult, QuoteConfiguration
from laundromat_quotes.pricing.engine import compute_pricing

__all__ = ["compute_pricing", "PricingResult", "QuoteConfiguration"]
