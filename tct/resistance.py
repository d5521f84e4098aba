"""DC resistance of the winding wire."""
# python libraries
import logging

# 3rd party libraries
import numpy as np

# own libraries
from tct.toroid_exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# resistivity of copper at room temperature in Ohm*m
COPPER_RESISTIVITY = 1.68e-8
# diameters above this value are most likely given in millimeter
MILLIMETER_DIAMETER_LIMIT = 0.1


def wire_length_to_resistance(wire_length: float, wire_diameter: float, resistivity: float = COPPER_RESISTIVITY,
                              fill_factor: float = 1.0, is_millimeter_correction_enabled: bool = False) -> float:
    """
    Calculate the DC resistance of a round wire.

    The conductive cross-section is the wire cross-section scaled by the fill factor,
    e.g. fill_factor < 1 for litz wire.

    :param wire_length: total wire length in m
    :type wire_length: float
    :param wire_diameter: outer wire diameter in m
    :type wire_diameter: float
    :param resistivity: resistivity of the conductor in Ohm*m
    :type resistivity: float
    :param fill_factor: conductor share of the wire cross-section, 0 < fill_factor <= 1
    :type fill_factor: float
    :param is_millimeter_correction_enabled: True to rescale diameters > 0.1 from mm to m
    :type is_millimeter_correction_enabled: bool
    :return: resistance in Ohm
    :rtype: float
    :raises InvalidArgumentError: in case of non-physical input values
    """
    if wire_length <= 0:
        raise InvalidArgumentError(f"Wire length {wire_length} must be greater than 0.")
    if wire_diameter <= 0:
        raise InvalidArgumentError(f"Wire diameter {wire_diameter} must be greater than 0.")
    if resistivity <= 0:
        raise InvalidArgumentError(f"Resistivity {resistivity} must be greater than 0.")
    if not 0 < fill_factor <= 1:
        raise InvalidArgumentError(f"Fill factor {fill_factor} must be within (0, 1].")

    if wire_diameter > MILLIMETER_DIAMETER_LIMIT:
        if not is_millimeter_correction_enabled:
            raise InvalidArgumentError(f"Wire diameter {wire_diameter} m exceeds {MILLIMETER_DIAMETER_LIMIT} m. "
                                       "Provide the diameter in meter or set is_millimeter_correction_enabled.")
        logger.warning(f"Wire diameter {wire_diameter} is interpreted as millimeter and multiplied by 1e-3.")
        wire_diameter = wire_diameter * 1e-3

    cross_section = np.pi / 4 * wire_diameter ** 2
    return float(wire_length * resistivity / (fill_factor * cross_section))
