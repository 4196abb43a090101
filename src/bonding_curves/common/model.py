from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bonding_curves.common.constants import U128_MAX
from bonding_curves.common.enums import BondingCurveType


class LinearParams(BaseModel):
    """Parameters of a LinearBondingCurve, both unsigned fixed-point integers (scale 10^9)."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    linear: int = Field(ge=0, le=U128_MAX, description="Slope numerator; denominator is 10^9")
    base: int = Field(ge=0, le=U128_MAX, description="Price at zero supply")


class QuadraticParams(BaseModel):
    """Coefficients of price = a*s^2 + b*s + c, unsigned fixed-point integers."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    a: int = Field(ge=0, le=U128_MAX, description="Quadratic coefficient")
    b: int = Field(ge=0, le=U128_MAX, description="Linear coefficient")
    c: int = Field(ge=0, le=U128_MAX, description="Price at zero supply")


class ExponentialParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    a: float = Field(description="Base price coefficient")
    b: float = Field(description="Growth rate; negative values decay")


class LogarithmicParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    a: float = Field(description="Scaling coefficient")
    b: float = Field(description="Growth-rate coefficient inside the logarithm")


class SigmoidParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    a: float = Field(description="Maximum price (upper asymptote)")
    k: float = Field(description="Steepness of the transition")
    b: float = Field(description="Supply at the inflection point")


PARAMS_BY_CURVE_TYPE: Dict[BondingCurveType, Type[BaseModel]] = {
    BondingCurveType.LINEAR: LinearParams,
    BondingCurveType.QUADRATIC: QuadraticParams,
    BondingCurveType.EXPONENTIAL: ExponentialParams,
    BondingCurveType.LOGARITHMIC: LogarithmicParams,
    BondingCurveType.SIGMOID: SigmoidParams,
}


class BondingCurveConfig(BaseModel):
    """
    Plain-data description of a curve, e.g. loaded from JSON:
        {"curve_type": "linear", "params": {"linear": 500000000, "base": 1000000000}}

    ``params`` are validated against the family's parameter model on construction.
    """
    model_config = ConfigDict(frozen=True)

    curve_type: BondingCurveType = Field(description="The bonding curve family")
    params: Dict[str, Any] = Field(default_factory=dict, description="Family parameters")

    @field_validator("curve_type", mode="before")
    @classmethod
    def _parse_curve_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return BondingCurveType.from_str(value)
            except NotImplementedError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @model_validator(mode="after")
    def _validate_params(self) -> "BondingCurveConfig":
        self.family_params()
        return self

    def family_params(self) -> BaseModel:
        """Returns ``params`` parsed into the model of ``curve_type``."""
        return PARAMS_BY_CURVE_TYPE[self.curve_type].model_validate(self.params)
