"""Price-impact curves for hybrid constant-sum / constant-product pools."""

from impact_curve.config import DEFAULT_SAMPLER_CONFIG, SamplerConfig
from impact_curve.curve import (
    SwapQuote,
    implied_value,
    inverse_trade_size,
    marginal_price_ratio,
    marginal_price_slope,
    position_for_impact,
    price_impact,
    quote,
    trade_fraction,
)
from impact_curve.errors import ConfigurationError, CurveError, DomainError, EmptyResultWarning
from impact_curve.models import Direction, PoolParameters
from impact_curve.sampler import ImpactCurve, SamplePoint, SeriesResult, sample_curve, sample_series

__version__ = "0.1.0"
__all__ = [
    # Models
    "Direction",
    "PoolParameters",
    # Curve math
    "implied_value",
    "marginal_price_slope",
    "marginal_price_ratio",
    "price_impact",
    "inverse_trade_size",
    "position_for_impact",
    "trade_fraction",
    "quote",
    "SwapQuote",
    # Sampling
    "sample_series",
    "sample_curve",
    "SamplePoint",
    "SeriesResult",
    "ImpactCurve",
    # Configuration
    "SamplerConfig",
    "DEFAULT_SAMPLER_CONFIG",
    # Errors
    "CurveError",
    "ConfigurationError",
    "DomainError",
    "EmptyResultWarning",
    "__version__",
]
