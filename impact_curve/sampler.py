"""Curve sampling.

Turns the continuous curve functions into bounded, ordered point series that
any plotting library can draw directly. Points where the curve is undefined
(DomainError) or whose value falls outside [0, 1] are dropped, never
substituted, so a series may be shorter than requested or empty.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, NamedTuple

import structlog

from impact_curve.config import DEFAULT_SAMPLER_CONFIG, SamplerConfig
from impact_curve.curve import price_impact
from impact_curve.errors import ConfigurationError, DomainError, EmptyResultWarning
from impact_curve.models import Direction, PoolParameters

logger = structlog.get_logger()


class SamplePoint(NamedTuple):
    """A sampled point: normalized position and its value in [0, 1]."""

    t: float
    impact: float


@dataclass(frozen=True)
class SeriesResult:
    """Ordered points sampled from one side of the curve.

    Attributes:
        points: Valid points, ordered by increasing t
        requested: Number of candidate positions that were evaluated
        side: Side of the curve the series belongs to, if any
    """

    points: tuple[SamplePoint, ...]
    requested: int
    side: Direction | None = None

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    @property
    def skipped(self) -> int:
        """Candidates dropped as undefined or out of range."""
        return self.requested - len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def as_pairs(self) -> list[list[float]]:
        """Points as [[t, impact], ...], the shape chart libraries expect."""
        return [[point.t, point.impact] for point in self.points]


@dataclass(frozen=True)
class ImpactCurve:
    """Both sides of a sampled price-impact curve.

    The two series meet at t = 0, where the impact is zero.
    """

    params: PoolParameters
    x_series: SeriesResult
    y_series: SeriesResult

    @property
    def is_empty(self) -> bool:
        return self.x_series.is_empty and self.y_series.is_empty


def sample_series(
    evaluate: Callable[[float], float],
    t_start: float,
    t_end: float,
    step_count: int,
    side: Direction | None = None,
) -> SeriesResult:
    """Sample evaluate over [t_start, t_end] at step_count + 1 equally spaced points.

    Algorithm:
        1. t_i = t_start + i * (t_end - t_start) / step_count, i = 0..step_count
        2. Skip t_i if evaluate raises DomainError
        3. Keep (t_i, value) only if value is finite and within [0, 1]

    Only DomainError is contained; any other exception from evaluate is a
    bug and propagates.

    Args:
        evaluate: Function from normalized position to a value in [0, 1]
        t_start: First position (inclusive)
        t_end: Last position (inclusive)
        step_count: Number of equal intervals
        side: Optional side label carried on the result

    Returns:
        SeriesResult ordered by increasing t, possibly empty

    Raises:
        ConfigurationError: If step_count is not a positive integer
    """
    if isinstance(step_count, bool) or not isinstance(step_count, int) or step_count < 1:
        raise ConfigurationError(f"step_count must be a positive integer, got {step_count!r}")

    dt = (t_end - t_start) / step_count
    points: list[SamplePoint] = []
    undefined = 0

    for i in range(step_count + 1):
        t = t_start + i * dt
        try:
            value = evaluate(t)
        except DomainError:
            undefined += 1
            continue
        if math.isfinite(value) and 0 <= value <= 1:
            points.append(SamplePoint(t, value))

    if dt < 0:
        points.reverse()

    result = SeriesResult(points=tuple(points), requested=step_count + 1, side=side)
    logger.debug(
        "series_sampled",
        side=side.value if side else None,
        requested=result.requested,
        points=len(result),
        undefined=undefined,
        out_of_range=result.skipped - undefined,
    )
    return result


def _coerce_params(params: PoolParameters | Mapping[str, Any]) -> PoolParameters:
    if isinstance(params, PoolParameters):
        return params
    return PoolParameters.from_mapping(params)


def sample_curve(
    params: PoolParameters | Mapping[str, Any],
    config: SamplerConfig | None = None,
) -> ImpactCurve:
    """Sample the price-impact curve on both sides of the pool.

    Args:
        params: Pool parameters, or a mapping with the same fields
        config: Sampler configuration (default: DEFAULT_SAMPLER_CONFIG)

    Returns:
        ImpactCurve with the X series over config.x_range and the Y series
        over config.y_range

    Raises:
        ConfigurationError: If params violate their invariants
    """
    params = _coerce_params(params)
    config = config or DEFAULT_SAMPLER_CONFIG

    series: dict[Direction, SeriesResult] = {}
    for direction, (t_start, t_end) in (
        (Direction.X, config.x_range),
        (Direction.Y, config.y_range),
    ):
        result = sample_series(
            partial(price_impact, direction, params=params),
            t_start,
            t_end,
            config.step_count,
            side=direction,
        )
        if result.is_empty:
            concentration = params.for_direction(direction).concentration
            logger.warning(
                "empty_series",
                side=direction.value,
                concentration=concentration,
                step_count=config.step_count,
            )
            if config.warn_on_empty:
                warnings.warn(
                    f"No points in range for the {direction.value.upper()} side "
                    f"(concentration={concentration})",
                    EmptyResultWarning,
                    stacklevel=2,
                )
        series[direction] = result

    return ImpactCurve(params=params, x_series=series[Direction.X], y_series=series[Direction.Y])
