"""Unit tests for the packed inner diameter of multi-layer windings."""

# python libraries
import logging

# 3rd party libraries
import pytest
from pytest import approx
import numpy as np

# own libraries
import tct
from tct.multilayer import packed_inner_diameters

# Enable logger
pytestlogger = logging.getLogger(__name__)


@pytest.mark.parametrize("inner_diameter, wire_diameter", [
    (53.75e-3, 2e-3),
    (1.0, 1.0),
    (2e-3, 2e-3)
])
def test_single_layer_identity(inner_diameter: float, wire_diameter: float) -> None:
    """Test that a single layer returns the inner diameter itself.

    :param inner_diameter: diameter of the first layer
    :type  inner_diameter: float
    :param wire_diameter: wire diameter
    :type  wire_diameter: float
    """
    diameter_vec = packed_inner_diameters(1, inner_diameter, wire_diameter)

    assert len(diameter_vec) == 1
    assert diameter_vec[0] == inner_diameter


def test_three_layers() -> None:
    """Test the recurrence r_next = r * cos(phi) + sqrt(d^2 - r^2 * sin(phi)^2) with sin(phi) = d / (2 * r)."""
    diameter_vec = packed_inner_diameters(3, 2.0, 1.0)

    # r2 = sqrt(1 - 1/4) + sqrt(3)/2, r3 = sqrt(r2^2 - 1/4) + sqrt(3)/2
    radius_2 = np.sqrt(3)
    radius_3 = np.sqrt(radius_2 ** 2 - 0.25) + np.sqrt(3) / 2
    assert diameter_vec == approx(np.array([2.0, 2 * radius_2, 2 * radius_3]))


def test_diameter_increases_with_layers() -> None:
    """Test that each following layer has a larger diameter."""
    diameter_vec = packed_inner_diameters(5, 53.75e-3, 2e-3)

    assert np.all(np.diff(diameter_vec) > 0)


def test_wire_too_thick() -> None:
    """Test that a wire thicker than the previous layer diameter raises GeometryInfeasibleError."""
    with pytest.raises(tct.GeometryInfeasibleError):
        packed_inner_diameters(2, 1e-3, 2e-3)


@pytest.mark.parametrize("number_of_layers, inner_diameter, wire_diameter", [
    (0, 1.0, 0.1),
    (1.5, 1.0, 0.1),
    (2, 0, 0.1),
    (2, 1.0, -0.1)
])
def test_invalid_argument(number_of_layers: int, inner_diameter: float, wire_diameter: float) -> None:
    """Test invalid input values.

    :param number_of_layers: number of layers
    :type  number_of_layers: int
    :param inner_diameter: diameter of the first layer
    :type  inner_diameter: float
    :param wire_diameter: wire diameter
    :type  wire_diameter: float
    """
    with pytest.raises(tct.InvalidArgumentError):
        packed_inner_diameters(number_of_layers, inner_diameter, wire_diameter)
