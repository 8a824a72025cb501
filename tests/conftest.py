"""Shared pytest fixtures for fuzzalg tests."""

from __future__ import annotations

import pandas as pd
import pytest

from fuzzalg import FAMILIES


def _values(arr):
    return [None if v is pd.NA else float(v) for v in arr]


@pytest.fixture
def values():
    """Converter from a result array to a plain list, missing entries as None."""
    return _values


@pytest.fixture(params=FAMILIES)
def family(request):
    return request.param
