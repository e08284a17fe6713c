"""Guarded float arithmetic for curve evaluation.

Plain float arithmetic fails in three different ways at the edges of the
curve domain:
- Division by zero raises ZeroDivisionError
- math.sqrt of a negative number raises ValueError
- Overflowing intermediate values quietly become inf or nan

Every one of these is a point where the curve is undefined, so this module
funnels them into a single DomainError that callers can catch per sample.

Usage pattern:
    from impact_curve.math.safe_float import safe_div, safe_sqrt

    def reserve_at(inner: float, x0: float) -> float:
        return safe_div(x0, safe_sqrt(inner))  # Raises DomainError if inner <= 0
"""

from __future__ import annotations

import math

from impact_curve.errors import DomainError


def ensure_finite(value: float, what: str = "value") -> float:
    """Return value unchanged if it is a finite float.

    Raises:
        DomainError: If value is nan or +/-inf
    """
    if not math.isfinite(value):
        raise DomainError(f"{what} is not finite: {value}")
    return value


def safe_div(numerator: float, denominator: float) -> float:
    """Divide two floats, raising DomainError instead of producing inf/nan.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator

    Raises:
        DomainError: If denominator is zero or the quotient is not finite
    """
    if denominator == 0:
        raise DomainError(f"Division by zero: {numerator} / {denominator}")
    try:
        result = numerator / denominator
    except OverflowError as err:
        raise DomainError(f"Division overflow: {numerator} / {denominator}") from err
    return ensure_finite(result, "quotient")


def safe_sqrt(value: float, *, strict: bool = False) -> float:
    """Square root that rejects negative (and optionally zero) arguments.

    Args:
        value: Radicand
        strict: If True, zero is rejected as well (used where the root
            ends up as a divisor)

    Raises:
        DomainError: If value is negative, zero under strict, or not finite
    """
    ensure_finite(value, "radicand")
    if value < 0 or (strict and value == 0):
        raise DomainError(f"No real square root for {value}")
    return math.sqrt(value)
