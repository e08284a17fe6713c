"""Hybrid constant-sum / constant-product curve math.

Each side of the pool follows the invariant

    y = y0 + (px/py) * (x0 - x) * (c + (1 - c) * x0 / x)

centred on the reserves (x0, y0). With c = 1 the segment is a straight line
(constant sum); with c = 0 it is constant-product-like. The Y side uses the
same formula with the roles of the two assets swapped.

Positions along the curve are normalized to t in [-1, 1]:
- t in [-1, 0] drains X: reserve x = (1 + t) * x0
- t in [0, 1] drains Y: reserve y = (1 - t) * y0

All functions are pure and raise DomainError wherever the math is undefined,
so a sampler can skip the point without masking genuine bugs.
"""

from __future__ import annotations

from dataclasses import dataclass

from impact_curve.errors import DomainError
from impact_curve.math.safe_float import ensure_finite, safe_div, safe_sqrt
from impact_curve.models import Direction, PoolParameters, SideParameters


@dataclass(frozen=True)
class SwapQuote:
    """Trade that moves the pool from its centre to position t.

    Deltas are signed reserve changes: positive means the asset flows into
    the pool, negative means it is paid out to the trader.

    Attributes:
        t: Normalized position the quote was computed for
        delta_x: Change of the X reserve
        delta_y: Change of the Y reserve
        price_xy: Local exchange rate, units of Y per unit of X
        price_yx: Local exchange rate, units of X per unit of Y
        impact: Fractional price impact at t
    """

    t: float
    delta_x: float
    delta_y: float
    price_xy: float
    price_yx: float
    impact: float


def implied_value(x: float, x0: float, y0: float, px: float, py: float, c: float) -> float:
    """Counter-asset reserve implied by the invariant when the driving reserve is x.

    Formula: y = y0 + (px/py) * (x0 - x) * (c + (1 - c) * x0 / x)

    Raises:
        DomainError: If x is zero or the result is not finite
    """
    inner = c + (1 - c) * safe_div(x0, x)
    return ensure_finite(y0 + (px / py) * (x0 - x) * inner, "implied value")


def marginal_price_slope(x: float, px: float, py: float, x0: float, c: float) -> float:
    """Derivative dy/dx of the invariant at reserve level x.

    Formula: dy/dx = -(px/py) * (c + (1 - c) * (x0/x)^2)

    Strictly negative for valid parameters.

    Raises:
        DomainError: If x is zero or the slope overflows
    """
    ratio = safe_div(x0, x)
    return ensure_finite(-(px / py) * (c + (1 - c) * ratio * ratio), "marginal slope")


def inverse_trade_size(target_slope: float, px: float, py: float, x0: float, c: float) -> float:
    """Reserve level at which the marginal slope equals target_slope.

    Solves marginal_price_slope(x, px, py, x0, c) == target_slope for x:

        inner = ((py/px) * -target_slope - c) / (1 - c)
        x = x0 / sqrt(inner)

    Raises:
        DomainError: If c == 1 (the slope is constant and carries no
            information about x) or inner <= 0 (no real solution)
    """
    numerator = (py / px) * -target_slope - c
    inner = safe_div(numerator, 1 - c)
    return safe_div(x0, safe_sqrt(inner, strict=True))


def _scaled_reserve(direction: Direction, t: float, side: SideParameters) -> float:
    # X walks t from -1 up to 0, Y walks t from 0 up to 1
    if Direction(direction) is Direction.X:
        reserve = (t + 1) * side.reserve
    else:
        reserve = (1 - t) * side.reserve
    if reserve <= 0:
        raise DomainError(f"Reserve level {reserve} at t={t} is not positive")
    return reserve


def marginal_price_ratio(direction: Direction, t: float, params: PoolParameters) -> float:
    """Ratio of the reference rate to the local marginal rate at position t.

    Equals 1 at the centre and falls toward 0 as the side is drained.
    """
    side = params.for_direction(direction)
    reserve = _scaled_reserve(direction, t, side)
    slope = marginal_price_slope(
        reserve, side.price_self, side.price_other, side.reserve, side.concentration
    )
    return safe_div(side.price_self / side.price_other, -slope)


def price_impact(direction: Direction, t: float, params: PoolParameters) -> float:
    """Fractional price impact of moving the pool to position t.

    impact = 1 - marginal_price_ratio, evaluated as

        (1 - c) * (q - 1) / (c + (1 - c) * q),  q = (x0 / x)^2

    which is exactly zero at the centre. Values outside [0, 1] are possible
    for t outside the side's interval and are left for the caller to reject.

    Raises:
        DomainError: If the scaled reserve is not positive
    """
    side = params.for_direction(direction)
    reserve = _scaled_reserve(direction, t, side)
    c = side.concentration
    ratio = safe_div(side.reserve, reserve)
    q = ensure_finite(ratio * ratio, "reserve ratio")
    return safe_div((1 - c) * (q - 1), c + (1 - c) * q)


def position_for_impact(direction: Direction, impact: float, params: PoolParameters) -> float:
    """Normalized position t at which the price impact equals impact.

    Inverse of price_impact: the impact is turned into a target marginal
    slope and solved for the reserve level with inverse_trade_size.

    Raises:
        DomainError: If impact == 1, the side's concentration is 1, or no
            real reserve level produces the requested impact
    """
    side = params.for_direction(direction)
    target_slope = -safe_div(side.price_self / side.price_other, 1 - impact)
    reserve = inverse_trade_size(
        target_slope, side.price_self, side.price_other, side.reserve, side.concentration
    )
    fraction = reserve / side.reserve
    if Direction(direction) is Direction.X:
        return fraction - 1
    return 1 - fraction


def trade_fraction(direction: Direction, impact: float, params: PoolParameters) -> float:
    """Share of the side's centre reserve that must be traded to reach impact."""
    return abs(position_for_impact(direction, impact, params))


def quote(t: float, params: PoolParameters) -> SwapQuote:
    """Swap amounts and exchange rates for the trade ending at position t.

    Args:
        t: Normalized position in [-1, 1]; t <= 0 drains X, t > 0 drains Y
        params: Pool parameters

    Returns:
        SwapQuote with signed reserve deltas, local rates and price impact

    Raises:
        DomainError: If t is outside [-1, 1] or the curve is undefined at t
            (e.g. t == -1, where the X reserve is exhausted)
    """
    if not -1 <= t <= 1:
        raise DomainError(f"Position {t} is outside [-1, 1]")

    if t <= 0:
        direction = Direction.X
        x = _scaled_reserve(direction, t, params.for_direction(direction))
        delta_x = t * params.x0
        y = implied_value(x, params.x0, params.y0, params.px, params.py, params.cx)
        delta_y = y - params.y0
        price_xy = -marginal_price_slope(x, params.px, params.py, params.x0, params.cx)
        price_yx = safe_div(1, price_xy)
    else:
        direction = Direction.Y
        y = _scaled_reserve(direction, t, params.for_direction(direction))
        x = implied_value(y, params.y0, params.x0, params.py, params.px, params.cy)
        delta_x = x - params.x0
        delta_y = -t * params.y0
        price_yx = -marginal_price_slope(y, params.py, params.px, params.y0, params.cy)
        price_xy = safe_div(1, price_yx)

    return SwapQuote(
        t=t,
        delta_x=delta_x,
        delta_y=delta_y,
        price_xy=price_xy,
        price_yx=price_yx,
        impact=price_impact(direction, t, params),
    )
