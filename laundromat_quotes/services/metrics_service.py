"""
Metrics Service — dashboard aggregates over stored quote records.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from laundromat_quotes.models.enums import KioskType

logger = logging.getLogger(__name__)


class QuoteMetrics(BaseModel):
    total_quotes: int = 0
    avg_days_to_close: Optional[float] = None
    total_mrr: float = 0.0
    total_one_time: float = 0.0
    total_price: float = 0.0
    total_machines: int = 0
    kiosks: dict[KioskType, int] = Field(default_factory=lambda: {k: 0 for k in KioskType})


def summarize_quotes(records: Iterable[dict[str, Any]]) -> QuoteMetrics:
    """Aggregate totals, machine counts and kiosk counts across quotes."""
    metrics = QuoteMetrics()
    close_days: list[float] = []

    for record in records:
        metrics.total_quotes += 1
        metrics.total_mrr += _number(record.get("monthly_recurring"))
        metrics.total_one_time += _number(record.get("one_time_charges"))
        metrics.total_price += _number(record.get("total_price_option1"))
        metrics.total_machines += int(_number(record.get("num_washers"))) + int(_number(record.get("num_dryers")))

        for kiosk_type, quantity in _kiosk_counts(record).items():
            metrics.kiosks[kiosk_type] += quantity

        days = _days_to_close(record)
        if days is not None:
            close_days.append(days)

    if close_days:
        metrics.avg_days_to_close = sum(close_days) / len(close_days)

    return metrics


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _kiosk_counts(record: dict[str, Any]) -> dict[KioskType, int]:
    """Quantities of selected kiosks; unreadable kiosk data counts as none."""
    raw = record.get("kiosks") or {}
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse kiosks for quote {record.get('id')}")
            return {}
    if not isinstance(raw, dict):
        return {}

    aliases = {
        KioskType.REAR_LOAD: "rearLoad",
        KioskType.FRONT_LOAD: "frontLoad",
        KioskType.CREDIT_BILL: "creditBill",
        KioskType.CREDIT_ONLY: "creditOnly",
    }
    counts: dict[KioskType, int] = {}
    for kiosk_type, alias in aliases.items():
        entry = raw.get(alias) or raw.get(kiosk_type.value) or {}
        if isinstance(entry, dict) and entry.get("selected"):
            counts[kiosk_type] = int(_number(entry.get("quantity")))
    return counts


def _days_to_close(record: dict[str, Any]) -> Optional[float]:
    close, created = record.get("expected_close_date"), record.get("created_at")
    if not close or not created:
        return None
    try:
        close_at = _parse_datetime(close)
        created_at = _parse_datetime(created)
    except ValueError:
        logger.warning(f"Unreadable dates on quote {record.get('id')}: {close!r}, {created!r}")
        return None
    return (close_at - created_at).total_seconds() / 86400


def _parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    # Compare as naive UTC; date-only close dates count from midnight
    return parsed.astimezone(timezone.utc).replace(tzinfo=None) if parsed.tzinfo else parsed
