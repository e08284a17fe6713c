"""Tests for swap quotes along the curve."""

import pytest

from impact_curve.curve import SwapQuote, implied_value, quote
from impact_curve.errors import DomainError
from tests.helpers import make_params


class TestQuote:
    """Tests for swap amounts and exchange rates at a position."""

    def test_centre_is_no_trade(self, params):
        """t = 0 moves nothing and quotes the reference rate."""
        result = quote(0.0, params)
        assert result == SwapQuote(
            t=0.0, delta_x=0.0, delta_y=0.0, price_xy=2.0, price_yx=0.5, impact=0.0
        )

    def test_x_side(self, params):
        """Draining half of X on the reference pool."""
        result = quote(-0.5, params)

        # 2.5 X leave the pool, y = 10 + 2 * 2.5 * 2 = 20
        assert result.delta_x == pytest.approx(-2.5)
        assert result.delta_y == pytest.approx(10.0)
        assert result.price_xy == pytest.approx(8.0)
        assert result.price_yx == pytest.approx(0.125)
        assert result.impact == pytest.approx(0.75)

    def test_y_side(self, params):
        """Draining half of Y on the reference pool."""
        result = quote(0.5, params)

        # 5 Y leave the pool, x = 5 + 0.5 * 5 * 2 = 10
        assert result.delta_x == pytest.approx(5.0)
        assert result.delta_y == pytest.approx(-5.0)
        assert result.price_yx == pytest.approx(2.0)
        assert result.price_xy == pytest.approx(0.5)
        assert result.impact == pytest.approx(0.75)

    def test_deltas_follow_invariant(self):
        """The counter amount is what the invariant implies."""
        params = make_params(cx=0.4, cy=0.6)
        result = quote(-0.3, params)
        x = params.x0 + result.delta_x
        expected_y = implied_value(x, params.x0, params.y0, params.px, params.py, params.cx)
        assert params.y0 + result.delta_y == pytest.approx(expected_y)

    def test_rates_are_reciprocal(self):
        """price_xy * price_yx == 1 everywhere."""
        params = make_params(cx=0.25, cy=0.75)
        for t in (-0.9, -0.4, 0.2, 0.95):
            result = quote(t, params)
            assert result.price_xy * result.price_yx == pytest.approx(1.0)

    def test_constant_sum_trades_at_reference_rate(self):
        """c = 1 quotes the reference rate at any size."""
        params = make_params(cx=1.0, cy=1.0)
        result = quote(-0.8, params)
        assert result.price_xy == pytest.approx(2.0)
        assert result.delta_y == pytest.approx(8.0)
        assert result.impact == pytest.approx(0.0)

    @pytest.mark.parametrize("t", [-1.0, 1.0])
    def test_drained_side_is_domain_error(self, params, t):
        """The boundaries leave a zero reserve."""
        with pytest.raises(DomainError):
            quote(t, params)

    @pytest.mark.parametrize("t", [-1.5, 1.01])
    def test_outside_unit_interval(self, params, t):
        """Positions beyond [-1, 1] are undefined."""
        with pytest.raises(DomainError):
            quote(t, params)
