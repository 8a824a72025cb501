from __future__ import annotations

from fractions import Fraction

import numpy as np
import pandas as pd
import pytest

from fuzzalg import (
    MISSING,
    NotANumberError,
    NotATruthValueError,
    OutOfRangeError,
    UnknownFamilyError,
    goedel_tconorm,
    goedel_tnorm,
    goguen_tconorm,
    goguen_tnorm,
    involutive_negation,
    lukasiewicz_tconorm,
    lukasiewicz_tnorm,
    tconorm,
    tnorm,
)


def test_identity_elements(family):
    assert tnorm(family, [1]) == 1
    assert tconorm(family, [0]) == 0


def test_empty_input_returns_identity(family):
    assert tnorm(family, []) == 1
    assert tconorm(family, []) == 0


@pytest.mark.parametrize("xs", [[0.2, 0.5, 0.1], [0.7, 0.6], [0.0, 1.0, 0.3], [0.9]])
def test_results_stay_in_unit_interval(family, xs):
    assert 0 <= tnorm(family, xs) <= 1
    assert 0 <= tconorm(family, xs) <= 1


@pytest.mark.parametrize("a,b", [(0.3, 0.8), (0.0, 0.4), (1.0, 0.25), (0.6, 0.6)])
def test_commutativity(family, a, b):
    assert tnorm(family, [a, b]) == pytest.approx(tnorm(family, [b, a]))
    assert tconorm(family, [a, b]) == pytest.approx(tconorm(family, [b, a]))


@pytest.mark.parametrize("xs", [[0.2, 0.5, 0.1], [0.7, 0.6], [0.4, 0.5, 0.3], [0.0, 0.25]])
def test_de_morgan_duality(family, xs):
    dual = 1 - tnorm(family, involutive_negation(xs))
    assert tconorm(family, xs) == pytest.approx(dual)


def test_family_laws():
    xs = [0.6, 0.5, 0.9]
    assert tnorm("goedel", xs) == 0.5
    assert tconorm("goedel", xs) == 0.9
    assert tnorm("goguen", xs) == pytest.approx(0.27)
    assert tconorm("goguen", xs) == pytest.approx(1 - 0.4 * 0.5 * 0.1)
    assert tnorm("lukasiewicz", [0.9, 0.8]) == pytest.approx(0.7)
    assert tnorm("lukasiewicz", [0.6, 0.5, 0.4]) == 0.0
    assert tconorm("lukasiewicz", [0.2, 0.3]) == pytest.approx(0.5)


def test_lukasiewicz_tconorm_saturates():
    assert tconorm("lukasiewicz", [0.4, 0.5, 0.3], na_rm=True) == 1.0


# -- missing values ----------------------------------------------------------


def test_goedel_tnorm_missing():
    assert goedel_tnorm([0.5, MISSING], na_rm=False) is MISSING
    assert goedel_tnorm([0.0, MISSING], na_rm=False) == 0.0
    assert goedel_tnorm([0.5, MISSING], na_rm=True) == 0.5
    assert goedel_tnorm([MISSING], na_rm=True) == 1.0


def test_goedel_tconorm_missing():
    assert goedel_tconorm([0.4, MISSING]) is MISSING
    assert goedel_tconorm([1.0, MISSING]) == 1.0
    assert goedel_tconorm([0.4, MISSING], na_rm=True) == 0.4
    assert goedel_tconorm([MISSING], na_rm=True) == 0.0


def test_lukasiewicz_tnorm_missing():
    # a missing element counts as 1 in the bounded sum
    assert lukasiewicz_tnorm([0.5, MISSING]) is MISSING
    assert lukasiewicz_tnorm([0.5, MISSING], na_rm=True) == pytest.approx(0.5)
    assert lukasiewicz_tnorm([0.2, 0.3, MISSING]) == 0.0
    assert lukasiewicz_tnorm([0.5, 0.5, MISSING]) == 0.0


def test_lukasiewicz_tconorm_missing():
    assert lukasiewicz_tconorm([0.3, MISSING]) is MISSING
    assert lukasiewicz_tconorm([0.3, MISSING], na_rm=True) == pytest.approx(0.3)
    assert lukasiewicz_tconorm([0.6, 0.5, MISSING]) == 1.0


def test_goguen_tnorm_missing():
    assert goguen_tnorm([0.5, MISSING]) is MISSING
    assert goguen_tnorm([0.0, MISSING]) == 0.0
    assert goguen_tnorm([0.5, 0.5, MISSING], na_rm=True) == 0.25


def test_goguen_tconorm_missing():
    assert goguen_tconorm([0.5, MISSING]) is MISSING
    assert goguen_tconorm([1.0, MISSING]) == 1.0
    assert goguen_tconorm([0.5, 0.5, MISSING], na_rm=True) == 0.75


def test_none_is_missing():
    assert goedel_tnorm([0.5, None]) is MISSING


def test_nullable_series_input():
    s = pd.Series([0.5, None, 0.7], dtype="Float64")
    assert tnorm("goedel", s) is MISSING
    assert tnorm("goedel", s, na_rm=True) == 0.5


# -- validation --------------------------------------------------------------


def test_out_of_range_rejected(family):
    with pytest.raises(OutOfRangeError):
        tnorm(family, [1.5])
    with pytest.raises(OutOfRangeError):
        tconorm(family, [0.2, -0.5])


def test_nan_rejected(family):
    with pytest.raises(NotANumberError):
        tnorm(family, [float("nan")])
    with pytest.raises(NotANumberError):
        tconorm(family, np.array([0.3, np.nan]))
    assert tnorm(family, [MISSING], na_rm=True) == 1.0


def test_invalid_element_after_absorbing_value_still_rejected(family):
    with pytest.raises(OutOfRangeError):
        tnorm(family, [0.0, 2.0])
    with pytest.raises(NotATruthValueError):
        tconorm(family, [1.0, "x"])


def test_unknown_family():
    with pytest.raises(UnknownFamilyError):
        tnorm("hamacher", [0.5])
    with pytest.raises(UnknownFamilyError):
        tconorm("", [0.5])


def test_huge_integers_are_out_of_range(family):
    with pytest.raises(OutOfRangeError):
        tnorm(family, [2**64])


def test_scalar_and_fraction_inputs():
    assert tnorm("goedel", np.array(0.5)) == 0.5
    assert tconorm("goguen", [Fraction(1, 2), Fraction(1, 2)]) == 0.75
