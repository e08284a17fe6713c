"""Sampler configuration."""

import os
from dataclasses import dataclass

from impact_curve.errors import ConfigurationError

# Resolution of the full-detail chart; the compact variant used 100
DEFAULT_STEP_COUNT = 1000

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


@dataclass(frozen=True)
class SamplerConfig:
    """Centralized configuration for curve sampling.

    Attributes:
        step_count: Number of equal intervals per side (step_count + 1
            candidate points, both endpoints included)
        x_range: Normalized interval walked for the X side
        y_range: Normalized interval walked for the Y side
        warn_on_empty: If True, issue EmptyResultWarning when a side has
            no points in range. An empty side is always logged.
    """

    step_count: int = DEFAULT_STEP_COUNT
    x_range: tuple[float, float] = (-1.0, 0.0)
    y_range: tuple[float, float] = (0.0, 1.0)
    warn_on_empty: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.step_count, bool) or not isinstance(self.step_count, int):
            raise ConfigurationError(f"step_count must be an integer, got {self.step_count!r}")
        if self.step_count < 1:
            raise ConfigurationError(f"step_count must be at least 1, got {self.step_count}")
        for name in ("x_range", "y_range"):
            start, end = getattr(self, name)
            if not -1 <= start <= 1 or not -1 <= end <= 1:
                raise ConfigurationError(f"{name} must lie within [-1, 1], got {(start, end)}")

    @classmethod
    def from_env(cls) -> "SamplerConfig":
        """Build a configuration from environment variables.

        Reads IMPACT_CURVE_STEP_COUNT and IMPACT_CURVE_WARN_ON_EMPTY, falling
        back to the defaults when unset.

        Raises:
            ConfigurationError: If a variable holds an unparseable value
        """
        raw_steps = os.environ.get("IMPACT_CURVE_STEP_COUNT", str(DEFAULT_STEP_COUNT))
        try:
            step_count = int(raw_steps)
        except ValueError as err:
            raise ConfigurationError(
                f"IMPACT_CURVE_STEP_COUNT must be an integer: '{raw_steps}'"
            ) from err

        raw_warn = os.environ.get("IMPACT_CURVE_WARN_ON_EMPTY", "true").lower()
        if raw_warn not in _TRUE_VALUES + _FALSE_VALUES:
            raise ConfigurationError(f"IMPACT_CURVE_WARN_ON_EMPTY must be a boolean: '{raw_warn}'")

        return cls(step_count=step_count, warn_on_empty=raw_warn in _TRUE_VALUES)


# Default configuration instance
DEFAULT_SAMPLER_CONFIG = SamplerConfig()
