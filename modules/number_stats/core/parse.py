from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 10000

_DELIMITERS = re.compile(r"[,\s]+")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class EmptyInput:
    """Nothing submitted yet. The form is shown without results or errors."""


@dataclass(frozen=True)
class ParseFailure:
    token: str

    @property
    def message(self) -> str:
        return f"'{self.token}' is invalid"


@dataclass(frozen=True)
class TooManyNumbers:
    limit: int

    @property
    def message(self) -> str:
        return f"Too many numbers (limit {self.limit})."


@dataclass(frozen=True)
class Parsed:
    numbers: Tuple[float, ...]


ParseOutcome = Union[EmptyInput, ParseFailure, TooManyNumbers, Parsed]


def split_tokens(raw: str | None) -> List[str]:
    if raw is None:
        return []
    return [token for token in _DELIMITERS.split(str(raw)) if token]


def _parse_float(token: str) -> float | None:
    if not _DECIMAL_LITERAL.fullmatch(token):
        return None
    value = float(token)
    # 1e999 and friends parse to inf; reject them like any other bad literal.
    if not math.isfinite(value):
        return None
    return value


def parse_numbers(raw: str | None, *, max_items: int | None = DEFAULT_MAX_ITEMS) -> ParseOutcome:
    """Turn free-form comma or whitespace separated text into numbers.

    Returns ``EmptyInput`` when there are no tokens at all, ``ParseFailure``
    for the first token that is not a decimal literal, ``TooManyNumbers`` when
    ``max_items`` is exceeded, and ``Parsed`` otherwise.
    """
    tokens = split_tokens(raw)
    if not tokens:
        return EmptyInput()
    if max_items is not None and len(tokens) > max_items:
        logger.debug("Rejected %d tokens (limit %d).", len(tokens), max_items)
        return TooManyNumbers(max_items)

    values: List[float] = []
    for token in tokens:
        value = _parse_float(token)
        if value is None:
            logger.debug("Invalid number token: %r", token)
            return ParseFailure(token)
        values.append(value)
    return Parsed(tuple(values))
