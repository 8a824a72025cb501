"""
fuzzalg.residua

Residua (fuzzy implications) of the Goedel, Lukasiewicz and Goguen algebras.

Both operands are recycled to the longer length: element i of an operand of
length m is operand[i % m]. For each position:

  1) x == 0           -> 1   (even if y is missing)
  2) x or y missing   -> MISSING
  3) x <= y           -> 1
  4) otherwise the family's residual value:
       goedel       y
       lukasiewicz  1 - x + y
       goguen       y / x
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

import pandas as pd

from .errors import UnknownFamilyError
from .tnorms import FAMILIES
from .truth import MISSING, as_result, as_sequence, is_missing, recycled_length, validate

Residuum = Callable[[Iterable[Any], Iterable[Any]], pd.arrays.FloatingArray]


def _residuum(
    x: Iterable[Any], y: Iterable[Any], residual: Callable[[float, float], float]
) -> pd.arrays.FloatingArray:
    xs = as_sequence(x)
    ys = as_sequence(y)
    n = recycled_length(xs, ys)
    res = []
    for i in range(n):
        xi = xs[i % len(xs)]
        yi = ys[i % len(ys)]
        validate(xi)
        validate(yi)
        if not is_missing(xi) and xi == 0:
            res.append(1.0)
        elif is_missing(xi) or is_missing(yi):
            res.append(MISSING)
        elif xi <= yi:
            res.append(1.0)
        else:
            res.append(float(residual(xi, yi)))
    return as_result(res)


def goedel_residuum(x: Iterable[Any], y: Iterable[Any]) -> pd.arrays.FloatingArray:
    return _residuum(x, y, lambda a, b: b)


def lukasiewicz_residuum(x: Iterable[Any], y: Iterable[Any]) -> pd.arrays.FloatingArray:
    return _residuum(x, y, lambda a, b: 1 - a + b)


def goguen_residuum(x: Iterable[Any], y: Iterable[Any]) -> pd.arrays.FloatingArray:
    return _residuum(x, y, lambda a, b: b / a)


_RESIDUA: Dict[str, Residuum] = {
    "goedel": goedel_residuum,
    "lukasiewicz": lukasiewicz_residuum,
    "goguen": goguen_residuum,
}


def get_residuum(family: str) -> Residuum:
    try:
        return _RESIDUA[family]
    except KeyError:
        raise UnknownFamilyError(
            f"Unknown algebra family: {family!r}. Expected one of {', '.join(FAMILIES)}."
        ) from None


def residuum(family: str, x: Iterable[Any], y: Iterable[Any]) -> pd.arrays.FloatingArray:
    """
    Elementwise residuum of the given family.

    Raises:
      EmptyOperandError: x or y has zero length
    """
    return get_residuum(family)(x, y)
