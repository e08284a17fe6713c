"""Shared type definitions for curve models."""

from enum import Enum
from typing import NamedTuple


class Direction(str, Enum):
    """Which side of the pool a trade drains.

    X covers the normalized interval [-1, 0], Y covers [0, 1].
    """

    X = "x"
    Y = "y"


class SideParameters(NamedTuple):
    """Pool parameters seen from one side of the curve.

    For the Y side the roles of the two assets are swapped, so the same
    formulas serve both directions.
    """

    price_self: float
    price_other: float
    reserve: float
    concentration: float
