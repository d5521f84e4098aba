"""Unit tests for boundary check."""

# python libraries
import logging

# 3rd party libraries
import pytest
import numpy as np
from _pytest.logging import LogCaptureFixture

# own libraries
import tct
import tct.boundary_check as test_module

# Enable logger
pytestlogger = logging.getLogger(__name__)

#########################################################################################################
# test of check_float_value
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("value, check_condition_minimum, check_condition_maximum, is_passed, report_part", [
    # Valid test case
    # Test value in between
    (0.5, test_module.CheckCondition.check_exclusive, test_module.CheckCondition.check_exclusive, True, ""),
    # Test valid boundary inclusive, inclusive
    (0.0, test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive, True, ""),
    (1.0, test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive, True, ""),
    # Test ignored boundaries
    (-5.0, test_module.CheckCondition.check_ignore, test_module.CheckCondition.check_ignore, True, ""),
    (5.0, test_module.CheckCondition.check_exclusive, test_module.CheckCondition.check_ignore, True, ""),
    # Failure test case
    # Test when the lower limit is exceeded with exclusive boundaries
    (0.0, test_module.CheckCondition.check_exclusive, test_module.CheckCondition.check_inclusive, False,
     "Parameter test_value= 0.0 is less equal minimum value 0!"),
    # Test when the lower limit is exceeded with inclusive boundaries
    (-0.1, test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive, False,
     "Parameter test_value= -0.1 is less than minimum value 0!"),
    # Test when the upper limit is exceeded
    (1.0, test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_exclusive, False,
     "Parameter test_value= 1.0 is greater equal maximum value 1!"),
    (1.5, test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive, False,
     "Parameter test_value= 1.5 is greater than maximum value 1!"),
    # Test not a number
    (float("nan"), test_module.CheckCondition.check_ignore, test_module.CheckCondition.check_ignore, False,
     "Parameter test_value is not a number!")
])
def test_check_float_value(value: float, check_condition_minimum: test_module.CheckCondition,
                           check_condition_maximum: test_module.CheckCondition, is_passed: bool, report_part: str) -> None:
    """Test the method check_float_value.

    :param value: value to check
    :type  value: float
    :param check_condition_minimum: Type of check according the minimum value
    :type  check_condition_minimum: CheckCondition
    :param check_condition_maximum: Type of check according the maximum value
    :type  check_condition_maximum: CheckCondition
    :param is_passed: expected result
    :type  is_passed: bool
    :param report_part: expected part of the inconsistency report
    :type  report_part: str
    """
    result, report = test_module.BoundaryCheck.check_float_value(0, 1, value, "test_value", check_condition_minimum, check_condition_maximum)

    assert result == is_passed
    assert report_part in report


def test_check_float_value_inconsistent_boundary() -> None:
    """Test minimum > maximum."""
    result, report = test_module.BoundaryCheck.check_float_value(
        2, 1, 1.5, "test_value", test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive)

    assert not result
    assert report == "    Minimum boundary value 2 is greater than maximum value 1!\n"


def test_check_float_value_list(caplog: LogCaptureFixture) -> None:
    """Test the method check_float_value_list.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    result, report = test_module.BoundaryCheck.check_float_value_list(
        0, 1, [(0.5, "a"), (2.0, "b"), (-1.0, "c")],
        test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive)
    assert not result
    assert "Parameter b=" in report
    assert "Parameter c=" in report
    assert "Parameter a=" not in report

    with caplog.at_level(logging.INFO):
        result, report = test_module.BoundaryCheck.check_float_value_list(
            0, 1, [], test_module.CheckCondition.check_inclusive, test_module.CheckCondition.check_inclusive)
    assert result
    assert caplog.records[0].message == "List is empty. There is not performed any check!"


@pytest.mark.parametrize("value, is_passed", [
    (1, True),
    (5, True),
    (0, False),
    (6, False),
    (2.0, False),
    (True, False),
    # numpy integers are accepted
    (np.int64(3), True),
    (np.int64(0), False)
])
def test_check_int_value(value: int, is_passed: bool) -> None:
    """Test the method check_int_value.

    :param value: value to check
    :type  value: int
    :param is_passed: expected result
    :type  is_passed: bool
    """
    result, _ = test_module.BoundaryCheck.check_int_value(1, 5, value, "number_of_layers")

    assert result == is_passed


def test_check_dictionary() -> None:
    """Test the method check_dictionary."""
    keyword_dictionary = {2: "a", 3: "b"}

    assert test_module.BoundaryCheck.check_dictionary(keyword_dictionary, 2, "alpha") == (True, "")

    result, report = test_module.BoundaryCheck.check_dictionary(keyword_dictionary, 6, "alpha")
    assert not result
    assert "Keyword '6' in alpha does not match any keyword" in report

    result, report = test_module.BoundaryCheck.check_dictionary({}, 2, "alpha")
    assert not result
    assert report == "    Dictionary is empty!\n"


def test_raise_on_inconsistency() -> None:
    """Test the conversion of a failed check into InvalidArgumentError."""
    test_module.BoundaryCheck.raise_on_inconsistency(True, "")

    with pytest.raises(tct.InvalidArgumentError) as error_message:
        test_module.BoundaryCheck.raise_on_inconsistency(False, "    Parameter x is not a number!\n")
    assert "Parameter x is not a number!" in str(error_message.value)
