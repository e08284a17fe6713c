"""Error classes for curve evaluation and sampling."""


class CurveError(Exception):
    """Base error for impact curve operations."""

    pass


class ConfigurationError(CurveError, ValueError):
    """Pool parameters or sampler settings violate their invariants."""

    pass


class DomainError(CurveError, ArithmeticError):
    """Curve formula is undefined at the requested point.

    Raised for zero divisors, negative square-root arguments, zero reserve
    levels and non-finite results. The sampler drops the offending point.
    """

    pass


class EmptyResultWarning(UserWarning):
    """A sampled series has no points inside the valid impact range."""

    pass
