"""
fuzzalg.errors

Exception taxonomy for the algebra.

Every error derives from AlgebraError, itself a ValueError, so callers that
only care about "bad input" can catch the standard type.
"""

from __future__ import annotations


class AlgebraError(ValueError):
    """Base class for all fuzzalg errors."""


class OutOfRangeError(AlgebraError):
    """A non-missing truth value lies outside [0, 1]."""


class NotANumberError(AlgebraError):
    """A truth value is the float NaN (which is never a missing value)."""


class NotATruthValueError(AlgebraError, TypeError):
    """A truth value is not a real number at all."""


class EmptyOperandError(AlgebraError):
    """An elementwise operator received a zero-length operand."""


class UnknownFamilyError(AlgebraError):
    pass


class UnknownNegationError(AlgebraError):
    pass


class ConfigError(AlgebraError):
    pass
