"""Pydantic model for the pool parameters that define a curve."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from impact_curve.errors import ConfigurationError
from impact_curve.models.types import Direction, SideParameters


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "parameters"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


class PoolParameters(BaseModel):
    """Reserves, reference prices and concentration of a two-asset pool.

    The curve is centred on (x0, y0), where the marginal exchange rate equals
    the reference rate px/py. Concentration 0 gives constant-product-like
    behaviour, 1 gives a constant-sum (linear) segment.

    Instances are immutable. Invalid values raise ConfigurationError rather
    than pydantic's ValidationError.
    """

    model_config = {"frozen": True, "extra": "forbid", "allow_inf_nan": False}

    x0: float = Field(gt=0, description="Reserve of X at the curve centre.")
    y0: float = Field(gt=0, description="Reserve of Y at the curve centre.")
    px: float = Field(gt=0, description="Reference unit price of X.")
    py: float = Field(gt=0, description="Reference unit price of Y.")
    cx: float = Field(ge=0, le=1, description="Concentration of the X segment.")
    cy: float = Field(ge=0, le=1, description="Concentration of the Y segment.")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as err:
            raise ConfigurationError(f"Invalid pool parameters: {_describe(err)}") from err

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PoolParameters":
        """Build parameters from a plain mapping (e.g. UI state).

        Raises:
            ConfigurationError: If a field is missing, unknown or out of range
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Pool parameters must be a mapping, got {type(data).__name__}"
            )
        return cls(**dict(data))

    @property
    def price_ratio(self) -> float:
        """Reference exchange rate px/py."""
        return self.px / self.py

    def for_direction(self, direction: Direction) -> SideParameters:
        """Return the parameters the curve formulas use for one side."""
        if Direction(direction) is Direction.X:
            return SideParameters(self.px, self.py, self.x0, self.cx)
        return SideParameters(self.py, self.px, self.y0, self.cy)

    def swapped(self) -> "PoolParameters":
        """Return the same pool with the roles of X and Y exchanged."""
        return PoolParameters(
            x0=self.y0, y0=self.x0, px=self.py, py=self.px, cx=self.cy, cy=self.cx
        )
