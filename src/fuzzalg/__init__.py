"""
fuzzalg: fuzzy-logic algebra with missing values.

This package provides:
  - t-norms and t-conorms of the Goedel, Lukasiewicz and Goguen algebras
  - the residuum (implication) of each algebra
  - involutive and strict negation
  - elementwise norms, bi-residuum and the Algebra bundle
  - YAML-loadable configuration for picking an algebra

Truth values are real numbers in [0, 1] or the missing marker MISSING
(pandas.NA). Float NaN is rejected, never treated as missing.
"""

from .algebra import Algebra, algebra, biresiduum, ptconorm, ptnorm
from .config import AlgebraConfig, load_config
from .errors import (
    AlgebraError,
    ConfigError,
    EmptyOperandError,
    NotANumberError,
    NotATruthValueError,
    OutOfRangeError,
    UnknownFamilyError,
    UnknownNegationError,
)
from .negations import NEGATIONS, involutive_negation, negate, strict_negation
from .residua import goedel_residuum, goguen_residuum, lukasiewicz_residuum, residuum
from .tnorms import (
    FAMILIES,
    goedel_tconorm,
    goedel_tnorm,
    goguen_tconorm,
    goguen_tnorm,
    lukasiewicz_tconorm,
    lukasiewicz_tnorm,
    tconorm,
    tnorm,
)
from .truth import MISSING, is_missing, validate

__all__ = [
    "__version__",
    "MISSING",
    "FAMILIES",
    "NEGATIONS",
    "validate",
    "is_missing",
    "tnorm",
    "tconorm",
    "residuum",
    "negate",
    "goedel_tnorm",
    "lukasiewicz_tnorm",
    "goguen_tnorm",
    "goedel_tconorm",
    "lukasiewicz_tconorm",
    "goguen_tconorm",
    "goedel_residuum",
    "lukasiewicz_residuum",
    "goguen_residuum",
    "involutive_negation",
    "strict_negation",
    "ptnorm",
    "ptconorm",
    "biresiduum",
    "Algebra",
    "algebra",
    "AlgebraConfig",
    "load_config",
    "AlgebraError",
    "OutOfRangeError",
    "NotANumberError",
    "NotATruthValueError",
    "EmptyOperandError",
    "UnknownFamilyError",
    "UnknownNegationError",
    "ConfigError",
]

__version__ = "0.1.0"
