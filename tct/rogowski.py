"""Mutual inductance and induced voltage of Rogowski coils."""

# 3rd party libraries
import numpy as np

# own libraries
from tct.toroid_exceptions import InvalidArgumentError

MU_0 = 4 * np.pi * 1e-7


def _check_rogowski_parameter(turns: float, inner_diameter: float, outer_diameter: float) -> None:
    if turns <= 0:
        raise InvalidArgumentError(f"Number of turns {turns} must be greater than 0.")
    if inner_diameter <= 0 or outer_diameter <= inner_diameter:
        raise InvalidArgumentError(f"Diameters must fulfill 0 < inner diameter {inner_diameter} < outer diameter {outer_diameter}.")


def circular_rogowski(turns: float, inner_diameter: float, outer_diameter: float, current: float = 1.0,
                      mu: float = MU_0, omega: float = 25e3 * 2 * np.pi) -> tuple[float, float]:
    """
    Calculate mutual inductance and induced voltage of a Rogowski coil with circular cross-section.

    :param turns: number of turns
    :type turns: float
    :param inner_diameter: inner diameter in m
    :type inner_diameter: float
    :param outer_diameter: outer diameter in m
    :type outer_diameter: float
    :param current: amplitude of the sensed current in A
    :type current: float
    :param mu: permeability of the core
    :type mu: float
    :param omega: angular frequency of the sensed current in rad/s
    :type omega: float
    :return: mutual inductance in H, induced voltage in V
    :rtype: tuple[float, float]
    """
    _check_rogowski_parameter(turns, inner_diameter, outer_diameter)
    mutual_inductance = mu * turns / 2 * (inner_diameter + outer_diameter - 2 * np.sqrt(inner_diameter * outer_diameter))
    return float(mutual_inductance), float(omega * mutual_inductance * current)


def rectangular_rogowski(turns: float, height: float, inner_diameter: float, outer_diameter: float, current: float = 1.0,
                         mu: float = MU_0, omega: float = 25e3 * 2 * np.pi) -> tuple[float, float]:
    """
    Calculate mutual inductance and induced voltage of a Rogowski coil with rectangular cross-section.

    :param turns: number of turns
    :type turns: float
    :param height: height of the rectangle in m
    :type height: float
    :param inner_diameter: inner diameter in m
    :type inner_diameter: float
    :param outer_diameter: outer diameter in m
    :type outer_diameter: float
    :param current: amplitude of the sensed current in A
    :type current: float
    :param mu: permeability of the core
    :type mu: float
    :param omega: angular frequency of the sensed current in rad/s
    :type omega: float
    :return: mutual inductance in H, induced voltage in V
    :rtype: tuple[float, float]
    """
    _check_rogowski_parameter(turns, inner_diameter, outer_diameter)
    if height <= 0:
        raise InvalidArgumentError(f"Height {height} must be greater than 0.")
    mutual_inductance = mu * turns / (2 * np.pi) * height * np.log(outer_diameter / inner_diameter)
    return float(mutual_inductance), float(omega * mutual_inductance * current)
