"""Unit tests for the wire resistance."""

# python libraries
import logging

# 3rd party libraries
import pytest
from pytest import approx
from _pytest.logging import LogCaptureFixture
import numpy as np

# own libraries
import tct
from tct.resistance import wire_length_to_resistance

# Enable logger
pytestlogger = logging.getLogger(__name__)


def test_resistance_value() -> None:
    """Test the resistance of 1 m copper wire with 1 mm diameter."""
    assert wire_length_to_resistance(1.0, 1e-3) == approx(1.68e-8 / (np.pi / 4 * 1e-6))
    assert wire_length_to_resistance(1.0, 1e-3) == approx(0.02139, rel=1e-3)


@pytest.mark.parametrize("wire_length, wire_diameter, fill_factor", [
    (1.0, 1e-3, 1.0),
    (15.14, 2e-3, 0.7),
    (0.3, 0.1, 0.25)
])
def test_resistance_scaling(wire_length: float, wire_diameter: float, fill_factor: float) -> None:
    """Test linear scaling with the wire length and inverse scaling with the fill factor.

    :param wire_length: wire length in m
    :type  wire_length: float
    :param wire_diameter: wire diameter in m
    :type  wire_diameter: float
    :param fill_factor: conductor share of the wire cross-section
    :type  fill_factor: float
    """
    resistance = wire_length_to_resistance(wire_length, wire_diameter, fill_factor=fill_factor)

    assert wire_length_to_resistance(2 * wire_length, wire_diameter, fill_factor=fill_factor) == approx(2 * resistance)
    assert wire_length_to_resistance(wire_length, wire_diameter, fill_factor=fill_factor / 2) == approx(2 * resistance)
    assert wire_length_to_resistance(wire_length, wire_diameter, resistivity=2 * 1.68e-8, fill_factor=fill_factor) == approx(2 * resistance)


def test_resistance_millimeter_correction(caplog: LogCaptureFixture) -> None:
    """Test the optional interpretation of a diameter in millimeter.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    with caplog.at_level(logging.WARNING):
        resistance = wire_length_to_resistance(1.0, 1.0, is_millimeter_correction_enabled=True)

    assert resistance == approx(wire_length_to_resistance(1.0, 1e-3))
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].message == "Wire diameter 1.0 is interpreted as millimeter and multiplied by 1e-3."


def test_resistance_millimeter_without_correction() -> None:
    """Test that a diameter in millimeter is rejected, if the correction is not enabled."""
    with pytest.raises(tct.InvalidArgumentError) as error_message:
        wire_length_to_resistance(1.0, 1.0)
    assert "is_millimeter_correction_enabled" in str(error_message.value)


@pytest.mark.parametrize("wire_length, wire_diameter, option_dict", [
    (0, 1e-3, {}),
    (-1.0, 1e-3, {}),
    (1.0, 0, {}),
    (1.0, 1e-3, {"resistivity": 0}),
    (1.0, 1e-3, {"fill_factor": 0}),
    (1.0, 1e-3, {"fill_factor": 1.01})
])
def test_resistance_invalid_argument(wire_length: float, wire_diameter: float, option_dict: dict) -> None:
    """Test invalid input values.

    :param wire_length: wire length in m
    :type  wire_length: float
    :param wire_diameter: wire diameter in m
    :type  wire_diameter: float
    :param option_dict: further keyword arguments
    :type  option_dict: dict
    """
    with pytest.raises(tct.InvalidArgumentError):
        wire_length_to_resistance(wire_length, wire_diameter, **option_dict)
