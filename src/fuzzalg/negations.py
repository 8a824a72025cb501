"""
fuzzalg.negations

Elementwise negations:
  - involutive: 1 - x
  - strict:     1 if x == 0 else 0

Missing stays missing in both.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

import pandas as pd

from .errors import UnknownNegationError
from .truth import MISSING, as_result, as_sequence, is_missing, validate

Negation = Callable[[Iterable[Any]], pd.arrays.FloatingArray]

NEGATIONS = ("involutive", "strict")


def involutive_negation(values: Iterable[Any]) -> pd.arrays.FloatingArray:
    res = []
    for v in as_sequence(values):
        validate(v)
        res.append(MISSING if is_missing(v) else 1.0 - v)
    return as_result(res)


def strict_negation(values: Iterable[Any]) -> pd.arrays.FloatingArray:
    res = []
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            res.append(MISSING)
        elif v == 0:
            res.append(1.0)
        else:
            res.append(0.0)
    return as_result(res)


_NEGATIONS: Dict[str, Negation] = {
    "involutive": involutive_negation,
    "strict": strict_negation,
}


def get_negation(kind: str) -> Negation:
    try:
        return _NEGATIONS[kind]
    except KeyError:
        raise UnknownNegationError(
            f"Unknown negation: {kind!r}. Expected one of {', '.join(NEGATIONS)}."
        ) from None


def negate(kind: str, values: Iterable[Any]) -> pd.arrays.FloatingArray:
    """
    Apply the "involutive" or "strict" negation elementwise.
    """
    return get_negation(kind)(values)
