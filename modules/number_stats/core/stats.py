from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from modules.number_stats.core.parse import (
    DEFAULT_MAX_ITEMS,
    EmptyInput,
    Parsed,
    parse_numbers,
)

logger = logging.getLogger(__name__)

DEFAULT_DECIMALS = 6
MAX_DECIMALS = 12


@dataclass(frozen=True)
class StatisticsResult:
    numbers: Tuple[float, ...]
    count: int
    mean: float
    median: float
    stdev: float


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _median(sorted_values: Sequence[float]) -> float:
    count = len(sorted_values)
    mid = count // 2
    if count % 2 == 1:
        return sorted_values[mid]
    return (sorted_values[mid] + sorted_values[mid - 1]) / 2


def _sample_stdev(values: Sequence[float], mean: float) -> float:
    count = len(values)
    if count < 2:
        return 0.0
    squares = sum((value - mean) * (value - mean) for value in values)
    return math.sqrt(squares / (count - 1))


def compute_statistics(numbers: Iterable[float]) -> StatisticsResult:
    """Count, mean, median and sample standard deviation of ``numbers``.

    The result carries an ascending copy of the input. Callers must only pass
    a non-empty list; an empty one raises ``ValueError``.
    """
    values = sorted(float(value) for value in numbers)
    if not values:
        raise ValueError("compute_statistics requires at least one number.")

    mean = _mean(values)
    return StatisticsResult(
        numbers=tuple(values),
        count=len(values),
        mean=mean,
        median=_median(values),
        stdev=_sample_stdev(values, mean),
    )


def _special_text(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return None


def format_fixed(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    return _special_text(value) or f"{value:.{decimals}f}"


def format_number(value: float) -> str:
    special = _special_text(value)
    if special:
        return special
    # Whole numbers print as plain digits below 1e21, exponent form above.
    if value.is_integer() and abs(value) < 1e21:
        return format(Decimal(repr(value)).to_integral_value(), "f")
    return repr(value)


def statistics_rows(
    result: StatisticsResult, decimals: int = DEFAULT_DECIMALS
) -> List[Tuple[str, str]]:
    numbers = " ".join(format_number(value) for value in result.numbers)
    return [
        ("Numbers", f"[{numbers}]"),
        ("Count", str(result.count)),
        ("Mean", format_fixed(result.mean, decimals)),
        ("Median", format_fixed(result.median, decimals)),
        ("σ", format_fixed(result.stdev, decimals)),
    ]


def summarize_numbers(
    raw: str | None,
    decimals: int = DEFAULT_DECIMALS,
    *,
    max_items: int | None = DEFAULT_MAX_ITEMS,
) -> Tuple[Dict[str, Any] | None, str | None]:
    if decimals < 0 or decimals > MAX_DECIMALS:
        return None, f"Decimals must be between 0 and {MAX_DECIMALS}."

    outcome = parse_numbers(raw, max_items=max_items)
    if isinstance(outcome, EmptyInput):
        return None, "Numbers are required."
    if not isinstance(outcome, Parsed):
        return None, outcome.message

    result = compute_statistics(outcome.numbers)
    logger.debug("Summarized %d numbers.", result.count)
    return {
        "count": result.count,
        "numbers": list(result.numbers),
        "mean": format_fixed(result.mean, decimals),
        "median": format_fixed(result.median, decimals),
        "stdev": format_fixed(result.stdev, decimals),
    }, None
