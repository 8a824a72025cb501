"""
fuzzalg.algebra

Elementwise ("pairwise") norms, the bi-residuum, and the Algebra bundle that
groups every operator of one family.

Pairwise operators recycle all operands to the longest length and apply the
family aggregator to the i-th elements:

  ptnorm("goedel", [0.2, 0.9], [0.5])  ->  [min(0.2, 0.5), min(0.9, 0.5)]

The bi-residuum (fuzzy equivalence) is the pairwise t-norm of the residuum
taken in both directions.

Default negation per family:
  goedel, goguen -> strict
  lukasiewicz    -> involutive
stdneg=True selects the involutive negation for every family.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterable

import pandas as pd

from .negations import get_negation, involutive_negation
from .residua import get_residuum, residuum
from .tnorms import Aggregator, get_tconorm, get_tnorm
from .truth import as_result, as_sequence, recycled_length

logger = logging.getLogger(__name__)

_DEFAULT_NEGATION = {
    "goedel": "strict",
    "lukasiewicz": "involutive",
    "goguen": "strict",
}


def _pairwise(aggregate: Aggregator, operands: tuple, na_rm: bool) -> pd.arrays.FloatingArray:
    seqs = [as_sequence(op) for op in operands]
    n = recycled_length(*seqs)
    res = []
    for i in range(n):
        column = [s[i % len(s)] for s in seqs]
        res.append(aggregate(column, na_rm=na_rm))
    return as_result(res)


def ptnorm(family: str, *operands: Iterable[Any], na_rm: bool = False) -> pd.arrays.FloatingArray:
    """
    Elementwise t-norm over recycled operands.

    Raises:
      EmptyOperandError: no operands, or a zero-length operand
    """
    return _pairwise(get_tnorm(family), operands, na_rm)


def ptconorm(family: str, *operands: Iterable[Any], na_rm: bool = False) -> pd.arrays.FloatingArray:
    """Elementwise t-conorm over recycled operands."""
    return _pairwise(get_tconorm(family), operands, na_rm)


def biresiduum(family: str, x: Iterable[Any], y: Iterable[Any]) -> pd.arrays.FloatingArray:
    return ptnorm(family, residuum(family, x, y), residuum(family, y, x))


@dataclass(frozen=True)
class Algebra:
    """
    All operators of one algebra family, with the family (and the default
    na_rm for the norms) already bound.

    Attributes:
      negation: the chosen negation (strict or involutive)
      invol_negation: always the involutive negation
      tnorm / tconorm: aggregators, f(values, na_rm=...)
      ptnorm / ptconorm: elementwise, f(*operands, na_rm=...)
      residuum / biresiduum: elementwise, f(x, y)
      infimum / supremum (+ p-variants): Goedel min/max, shared by all families
    """
    family: str
    negation: Callable[..., Any]
    invol_negation: Callable[..., Any]
    tnorm: Callable[..., Any]
    ptnorm: Callable[..., Any]
    tconorm: Callable[..., Any]
    ptconorm: Callable[..., Any]
    residuum: Callable[..., Any]
    biresiduum: Callable[..., Any]
    infimum: Callable[..., Any]
    pinfimum: Callable[..., Any]
    supremum: Callable[..., Any]
    psupremum: Callable[..., Any]


def algebra(family: str, stdneg: bool = False, na_rm: bool = False) -> Algebra:
    """
    Build the Algebra bundle for a family.

    Args:
      family: "goedel", "lukasiewicz" or "goguen"
      stdneg: use the involutive negation regardless of family
      na_rm: default missing policy for the (p)tnorm / (p)tconorm operators
    """
    tnorm_fn = get_tnorm(family)
    tconorm_fn = get_tconorm(family)
    neg_kind = "involutive" if stdneg else _DEFAULT_NEGATION[family]
    logger.debug("Building %s algebra (negation=%s, na_rm=%s)", family, neg_kind, na_rm)

    return Algebra(
        family=family,
        negation=get_negation(neg_kind),
        invol_negation=involutive_negation,
        tnorm=partial(tnorm_fn, na_rm=na_rm),
        ptnorm=partial(ptnorm, family, na_rm=na_rm),
        tconorm=partial(tconorm_fn, na_rm=na_rm),
        ptconorm=partial(ptconorm, family, na_rm=na_rm),
        residuum=get_residuum(family),
        biresiduum=partial(biresiduum, family),
        infimum=partial(get_tnorm("goedel"), na_rm=na_rm),
        pinfimum=partial(ptnorm, "goedel", na_rm=na_rm),
        supremum=partial(get_tconorm("goedel"), na_rm=na_rm),
        psupremum=partial(ptconorm, "goedel", na_rm=na_rm),
    )
