"""Float arithmetic helpers for curve math."""

from impact_curve.math.safe_float import ensure_finite, safe_div, safe_sqrt

__all__ = ["ensure_finite", "safe_div", "safe_sqrt"]
