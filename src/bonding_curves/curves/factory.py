from dataclasses import asdict
from typing import Any, Dict, Mapping, Type, Union

from bonding_curves.common.enums import BondingCurveType
from bonding_curves.common.model import BondingCurveConfig
from bonding_curves.curves.single.base import BondingCurve
from bonding_curves.curves.single.exponential import ExponentialBondingCurve
from bonding_curves.curves.single.linear import LinearBondingCurve
from bonding_curves.curves.single.logarithmic import LogarithmicBondingCurve
from bonding_curves.curves.single.quadratic import QuadraticBondingCurve
from bonding_curves.curves.single.sigmoid import SigmoidBondingCurve
from bonding_curves.logging import get_logger

logger = get_logger(__name__)

CURVE_CLASSES: Dict[BondingCurveType, Type[BondingCurve]] = {
    BondingCurveType.LINEAR: LinearBondingCurve,
    BondingCurveType.QUADRATIC: QuadraticBondingCurve,
    BondingCurveType.EXPONENTIAL: ExponentialBondingCurve,
    BondingCurveType.LOGARITHMIC: LogarithmicBondingCurve,
    BondingCurveType.SIGMOID: SigmoidBondingCurve,
}


def create_bonding_curve(config: Union[BondingCurveConfig, Mapping[str, Any]]) -> BondingCurve:
    """
    Builds a curve from a BondingCurveConfig or an equivalent mapping.

    :param config: {"curve_type": ..., "params": {...}}
    :return: the matching BondingCurve instance
    :raises pydantic.ValidationError: if the type or parameters are invalid
    """
    if not isinstance(config, BondingCurveConfig):
        config = BondingCurveConfig.model_validate(config)

    params = config.family_params()
    curve = CURVE_CLASSES[config.curve_type](**params.model_dump())
    logger.debug("bonding_curve_created", curve_type=str(config.curve_type), params=params.model_dump())
    return curve


def curve_to_config(curve: BondingCurve) -> BondingCurveConfig:
    """Inverse of create_bonding_curve."""
    return BondingCurveConfig(curve_type=curve.curve_type, params=asdict(curve))
