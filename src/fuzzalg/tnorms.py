"""
fuzzalg.tnorms

Triangular norms (AND) and conorms (OR) of the Goedel, Lukasiewicz and
Goguen (product) algebras, as aggregators over a sequence of truth values.

Missing-value policy (shared shape, family-specific details):
  - Missing elements are skipped by the fold but remembered.
  - After the fold, if the result computed from the known elements is already
    saturated at the operator's absorbing bound, it is returned as is.
  - Otherwise, when missing elements were seen and na_rm is False, the result
    is MISSING.

Each of the six rules is written out explicitly below, since the saturation
test differs per family and per polarity:

  goedel      AND: missing unless min == 0        OR: missing unless max == 1
  lukasiewicz AND: 0 if bounded sum <= 0          OR: 1 if sum >= 1
  goguen      AND: missing unless product == 0    OR: missing unless sum == 1

Note the Lukasiewicz t-norm counts a missing element as 1 in the sum, so
its saturation to 0 holds whatever the missing elements turn out to be.

Empty input returns the identity of the operator (1 for AND, 0 for OR).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

from .errors import UnknownFamilyError
from .truth import MISSING, as_sequence, is_missing, validate

Aggregator = Callable[..., Any]

FAMILIES = ("goedel", "lukasiewicz", "goguen")


def goedel_tnorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    res = 1.0
    na = False
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            na = True
        elif v < res:
            res = v
    if not na_rm and na and res > 0:
        return MISSING
    return float(res)


def lukasiewicz_tnorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    vals = as_sequence(values)
    res = 1.0
    na = False
    for v in vals:
        validate(v)
        if is_missing(v):
            na = True
            res += 1
        else:
            res += v
    res -= len(vals)
    if res <= 0:
        return 0.0
    if not na_rm and na:
        return MISSING
    return float(res)


def goguen_tnorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    res = 1.0
    na = False
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            na = True
        else:
            res = res * v
    if not na_rm and na and res > 0:
        return MISSING
    return float(res)


def goedel_tconorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    res = 0.0
    na = False
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            na = True
        elif v > res:
            res = v
    if not na_rm and na and res < 1:
        return MISSING
    return float(res)


def lukasiewicz_tconorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    res = 0.0
    na = False
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            na = True
        else:
            res += v
    if res >= 1:
        return 1.0
    if not na_rm and na:
        return MISSING
    return float(res)


def goguen_tconorm(values: Iterable[Any], na_rm: bool = False) -> Any:
    res = 0.0
    na = False
    for v in as_sequence(values):
        validate(v)
        if is_missing(v):
            na = True
        else:
            res = res + v - res * v
    if not na_rm and na and res < 1:
        return MISSING
    return float(res)


_TNORMS: Dict[str, Aggregator] = {
    "goedel": goedel_tnorm,
    "lukasiewicz": lukasiewicz_tnorm,
    "goguen": goguen_tnorm,
}

_TCONORMS: Dict[str, Aggregator] = {
    "goedel": goedel_tconorm,
    "lukasiewicz": lukasiewicz_tconorm,
    "goguen": goguen_tconorm,
}


def _lookup(table: Dict[str, Aggregator], family: str) -> Aggregator:
    try:
        return table[family]
    except KeyError:
        raise UnknownFamilyError(
            f"Unknown algebra family: {family!r}. Expected one of {', '.join(FAMILIES)}."
        ) from None


def get_tnorm(family: str) -> Aggregator:
    return _lookup(_TNORMS, family)


def get_tconorm(family: str) -> Aggregator:
    return _lookup(_TCONORMS, family)


def tnorm(family: str, values: Iterable[Any], na_rm: bool = False) -> Any:
    """
    Aggregate values with the t-norm of the given family.

    Args:
      family: "goedel", "lukasiewicz" or "goguen"
      values: truth values (MISSING allowed)
      na_rm: treat missing values as removable

    Returns:
      float in [0, 1], or MISSING
    """
    return get_tnorm(family)(values, na_rm=na_rm)


def tconorm(family: str, values: Iterable[Any], na_rm: bool = False) -> Any:
    """
    Aggregate values with the t-conorm of the given family.

    See tnorm() for arguments.
    """
    return get_tconorm(family)(values, na_rm=na_rm)
