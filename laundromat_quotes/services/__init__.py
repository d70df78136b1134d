"""Services — IntakeService, QuoteService, metrics and presentation helpers."""

from laundromat_quotes.services.intake_service import IntakeService, suggest_kiosks
from laundromat_quotes.services.quote_service import QuoteService
from laundromat_quotes.services.metrics_service import QuoteMetrics, summarize_quotes
from laundromat_quotes.services.presentation import describe_kiosks, describe_services, render_summary

__all__ = [
    "IntakeService",
    "suggest_kiosks",
    "QuoteService",
    "QuoteMetrics",
    "summarize_quotes",
    "describe_kiosks",
    "describe_services",
    "render_summary",
]
