from .logger import setup_logging
from .currency import format_currency, parse_currency_string, round_cents

__all__ = ["setup_logging", "format_currency", "parse_currency_string", "round_cents"]
