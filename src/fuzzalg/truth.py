"""
fuzzalg.truth

Truth values, the missing marker, and validation.

A truth value is either:
  - a real number in [0, 1] (Python int/float/bool or NumPy scalar), or
  - the missing marker pandas.NA (None is accepted as missing on input).

Float NaN is NOT missing. It is rejected with NotANumberError so that
"unknown" and "broken arithmetic" never get conflated.

Sequence results are returned as pandas nullable Float64 arrays, where
missing entries come back as pandas.NA.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Sequence

import numpy as np
import pandas as pd

from .errors import EmptyOperandError, NotANumberError, NotATruthValueError, OutOfRangeError

MISSING = pd.NA

RESULT_DTYPE = "Float64"


def is_missing(x: Any) -> bool:
    """
    True for the missing marker only (pandas.NA or None), never for NaN.
    """
    return x is pd.NA or x is None


def _is_real(x: Any) -> bool:
    # Decimal is not a numbers.Real and does not mix with float arithmetic
    return isinstance(x, (numbers.Real, np.bool_))


def validate(x: Any) -> None:
    """
    Check a single truth value.

    Raises:
      NotATruthValueError: x is neither missing nor a real number
      NotANumberError: x is NaN
      OutOfRangeError: x < 0 or x > 1
    """
    if is_missing(x):
        return
    if not _is_real(x):
        raise NotATruthValueError(f"Not a truth value: {x!r} ({type(x).__name__})")
    if x < 0 or x > 1:
        raise OutOfRangeError(f"Argument out of range 0..1: {x!r}")
    # NaN fails both comparisons above; only floats can hold it
    if isinstance(x, (float, np.floating)) and np.isnan(x):
        raise NotANumberError("NaN argument")


def as_sequence(values: Iterable[Any]) -> Sequence[Any]:
    """
    Materialize an iterable of truth values into an indexable sequence.

    Scalars are treated as sequences of length one. Nothing is validated
    here; operators validate each element as they read it.
    """
    if is_missing(values) or _is_real(values):
        return [values]
    if isinstance(values, np.ndarray) and values.ndim == 0:
        return [values.item()]
    if isinstance(values, pd.Series):
        return values.array
    if isinstance(values, (list, tuple, np.ndarray, pd.api.extensions.ExtensionArray)):
        return values
    return list(values)


def as_result(values: List[Any]) -> pd.arrays.FloatingArray:
    """
    Pack computed values (floats and MISSING) into a nullable Float64 array.
    """
    return pd.array(values, dtype=RESULT_DTYPE)


def recycled_length(*operands: Sequence[Any]) -> int:
    """
    Length of the longest operand; every operand must be non-empty because
    shorter ones are reused with modular indexing.
    """
    if not operands:
        raise EmptyOperandError("At least one operand is required.")
    for pos, op in enumerate(operands):
        if len(op) == 0:
            raise EmptyOperandError(f"Operand {pos} has zero length; cannot recycle it.")
    return max(len(op) for op in operands)

