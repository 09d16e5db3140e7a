from __future__ import annotations

from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List

from .schemas import ComparisonResult


def format_currency(amount: float) -> str:
    """Whole-dollar USD string, e.g. ``$1,234`` or ``-$50``."""
    rounded = round(amount)
    if rounded < 0:
        return f"-${-rounded:,.0f}"
    return f"${rounded:,.0f}"


def format_percentage(rate: float) -> str:
    return f"{rate:.1f}%"


def year_labels(years: int) -> List[str]:
    return [f"Year {year}" for year in range(years + 1)]


def result_to_dict(result: ComparisonResult) -> Dict[str, Any]:
    """JSON-ready view of a comparison, enums flattened to their values."""
    payload = asdict(result)
    payload["user_wins"] = result.user_wins
    payload["difference_percent"] = result.difference_percent
    return _plain(payload)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
