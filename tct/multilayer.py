"""Packed inner diameter of multi-layer toroid windings."""
# python libraries
import logging

# 3rd party libraries
import numpy as np

# own libraries
from tct.toroid_exceptions import InvalidArgumentError, GeometryInfeasibleError

logger = logging.getLogger(__name__)


def packed_inner_diameters(number_of_layers: int, inner_diameter: float, wire_diameter: float) -> np.ndarray:
    """
    Calculate the packed winding diameter on the inner core surface for each layer.

    Each following layer lies in the grooves formed by two neighbouring turns of the previous layer.
    With the half-angle phi = asin(d / (2 r)) spanned by a single turn of the previous layer
    the next radius is r * cos(phi) + sqrt(d^2 - r^2 * sin(phi)^2).
    phi is evaluated with the radius of the previous layer for every layer, not once with the first
    layer radius, which changes the result from the third layer on.

    :param number_of_layers: number of winding layers, >= 1
    :type number_of_layers: int
    :param inner_diameter: diameter of the first layer in m
    :type inner_diameter: float
    :param wire_diameter: wire diameter in m
    :type wire_diameter: float
    :return: diameters in layer order, the first entry equals inner_diameter
    :rtype: np.ndarray
    :raises InvalidArgumentError: in case of non-physical input values
    :raises GeometryInfeasibleError: in case the wire does not fit on the previous layer
    """
    if isinstance(number_of_layers, bool) or not isinstance(number_of_layers, (int, np.integer)) or number_of_layers < 1:
        raise InvalidArgumentError(f"Number of layers {number_of_layers} must be an integer >= 1.")
    if inner_diameter <= 0:
        raise InvalidArgumentError(f"Inner diameter {inner_diameter} must be greater than 0.")
    if wire_diameter <= 0:
        raise InvalidArgumentError(f"Wire diameter {wire_diameter} must be greater than 0.")

    radius_vec = np.zeros(number_of_layers)
    radius_vec[0] = inner_diameter / 2

    for layer in range(1, number_of_layers):
        previous_radius = radius_vec[layer - 1]
        if wire_diameter > 2 * previous_radius:
            logger.warning(f"Wire diameter {wire_diameter} exceeds the diameter {2 * previous_radius} of layer {layer}.")
            raise GeometryInfeasibleError(f"Wire diameter {wire_diameter} m does not fit on layer {layer} "
                                          f"with diameter {2 * previous_radius} m.")
        phi = np.arcsin(wire_diameter / (2 * previous_radius))
        radius_vec[layer] = previous_radius * np.cos(phi) + np.sqrt(wire_diameter ** 2 - previous_radius ** 2 * np.sin(phi) ** 2)

    return radius_vec * 2
