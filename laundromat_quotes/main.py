"""
Laundromat Quote Engine — Main Entry Point

Price a questionnaire submission from the command line:
    python -m laundromat_quotes path/to/questionnaire.json

With no file a small sample store is priced.

Or import and run programmatically:
    from laundromat_quotes.main import run
    result = run("path/to/questionnaire.json")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from laundromat_quotes.config import get_settings
from laundromat_quotes.models.schemas import PricingResult, QuoteConfiguration
from laundromat_quotes.pricing.engine import compute_pricing
from laundromat_quotes.services.intake_service import IntakeService
from laundromat_quotes.services.presentation import render_summary
from laundromat_quotes.utils.logger import setup_logging

SAMPLE_QUESTIONNAIRE: dict[str, Any] = {
    "prospectName": "Sample Laundromat",
    "storeSize": 2400,
    "numWashers": 20,
    "numDryers": 20,
    "acceptsCash": True,
    "acceptsCards": True,
    "wantsWashDryFold": True,
    "monthlyRevenue": "$25,000",
}


def run(file_path: str = "") -> PricingResult:
    """Price one questionnaire and log the quote summary."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"  {settings.app_name.upper()}")
    logger.info(f"  Started: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    payload = load_questionnaire(file_path) if file_path else dict(SAMPLE_QUESTIONNAIRE)
    config = IntakeService().build_configuration(payload, apply_kiosk_suggestions=not file_path)
    result = compute_pricing(config)

    _print_summary(config, result)
    return result


def load_questionnaire(file_path: str) -> dict[str, Any]:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Questionnaire not found: {file_path}")
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Questionnaire must be a JSON object: {file_path}")
    return data


def _print_summary(config: QuoteConfiguration, result: PricingResult) -> None:
    logger = logging.getLogger(__name__)
    logger.info("")
    logger.info("-" * 60)
    for line in render_summary(config, result):
        logger.info(line)
    logger.info("-" * 60)


if __name__ == "__main__":
    file_arg = sys.argv[1] if len(sys.argv) > 1 else ""
    run(file_arg)
