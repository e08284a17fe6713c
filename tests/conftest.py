"""Pytest configuration and fixtures."""

import pytest

from impact_curve.models import PoolParameters
from tests.helpers import make_params, make_symmetric_params


@pytest.fixture
def params() -> PoolParameters:
    """Reference pool: x0=5, y0=10, px=2, py=1, cx=cy=0."""
    return make_params()


@pytest.fixture
def symmetric_params() -> PoolParameters:
    """Pool with identical reserves, prices and concentration on both sides."""
    return make_symmetric_params()


@pytest.fixture
def dense_grid() -> list[float]:
    """Positions 0, 0.01, ..., 0.99 (the drained endpoint is excluded)."""
    return [i / 100 for i in range(100)]
