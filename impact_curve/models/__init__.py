"""Data models for impact curves."""

from impact_curve.models.pool import PoolParameters
from impact_curve.models.types import Direction, SideParameters

__all__ = ["Direction", "PoolParameters", "SideParameters"]
