"""Boundary check of the toroid input parameters."""
# python libraries
import enum
import logging

# 3rd party libraries
import numpy as np

# own libraries
from tct.toroid_exceptions import InvalidArgumentError

# configure root logger
logger = logging.getLogger(__name__)

class CheckCondition(enum.Enum):
    """Enum for type of check."""

    check_ignore = 0
    check_inclusive = 1
    check_exclusive = 2

class BoundaryCheck:
    """Boundary check for parameter."""

    @staticmethod
    def check_float_value(minimum: float, maximum: float, parameter_value: float,
                          parameter_name: str, check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the value according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param parameter_value: Float value to check
        :type  parameter_value: float
        :param parameter_name: Name of parameter to mention in inconsistency report, if check fails
        :type  parameter_name: str
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        # Variable declaration
        is_check_passed: bool = True
        inconsistency_report: str = ""

        # Check the consistency of the input parameter itself
        if minimum > maximum:
            return False, f"    Minimum boundary value {minimum} is greater than maximum value {maximum}!\n"

        # NaN passes every comparison below, so it is rejected explicitly
        if parameter_value != parameter_value:
            return False, f"    Parameter {parameter_name} is not a number!\n"

        # Check minimum boundary
        if check_type_minimum == CheckCondition.check_exclusive and parameter_value <= minimum:
            inconsistency_report = f"    Parameter {parameter_name}= {parameter_value} is less equal minimum value {minimum}!\n"
            is_check_passed = False
        elif check_type_minimum == CheckCondition.check_inclusive and parameter_value < minimum:
            inconsistency_report = f"    Parameter {parameter_name}= {parameter_value} is less than minimum value {minimum}!\n"
            is_check_passed = False

        # Check maximum boundary
        if check_type_maximum == CheckCondition.check_exclusive and parameter_value >= maximum:
            inconsistency_report = inconsistency_report + \
                f"    Parameter {parameter_name}= {parameter_value} is greater equal maximum value {maximum}!\n"
            is_check_passed = False
        elif check_type_maximum == CheckCondition.check_inclusive and parameter_value > maximum:
            inconsistency_report = inconsistency_report + \
                f"    Parameter {parameter_name}= {parameter_value} is greater than maximum value {maximum}!\n"
            is_check_passed = False

        return is_check_passed, inconsistency_report

    @staticmethod
    def check_float_value_list(minimum: float, maximum: float, value_list: list[tuple[float, str]],
                               check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the listed values according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param value_list: List of float values to check and the parameter name
        :type  value_list: list[tuple[float, str]]
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        is_check_list_passed: bool = True
        inconsistency_list_report: str = ""

        if len(value_list) == 0:
            logger.info("List is empty. There is not performed any check!")

        for parameter_value, parameter_name in value_list:
            is_check_passed, issue_report = BoundaryCheck.check_float_value(
                minimum, maximum, parameter_value, parameter_name, check_type_minimum, check_type_maximum)
            if not is_check_passed:
                inconsistency_list_report = inconsistency_list_report + issue_report
                is_check_list_passed = False

        return is_check_list_passed, inconsistency_list_report

    @staticmethod
    def check_int_value(minimum: int, maximum: int, parameter_value: int, parameter_name: str) -> tuple[bool, str]:
        """
        Verify that the value is an integer within minimum and maximum (both inclusive).

        :param minimum: Minimum value of the range
        :type  minimum: int
        :param maximum: Maximum value of the range
        :type  maximum: int
        :param parameter_value: Value to check
        :type  parameter_value: int
        :param parameter_name: Name of parameter to mention in inconsistency report, if check fails
        :type  parameter_name: str
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        # bool is a subclass of int, but never a valid count
        if isinstance(parameter_value, bool) or not isinstance(parameter_value, (int, np.integer)):
            return False, f"    Parameter {parameter_name}= {parameter_value} is not an integer!\n"

        return BoundaryCheck.check_float_value(minimum, maximum, parameter_value, parameter_name,
                                               CheckCondition.check_inclusive, CheckCondition.check_inclusive)

    @staticmethod
    def check_dictionary(keyword_dictionary: dict, keyword: object, keyword_list_name: str) -> tuple[bool, str]:
        """
        Check the keyword according match in keyword dictionary.

        :param keyword_dictionary: Dictionary with keywords
        :type  keyword_dictionary: dict
        :param keyword: Keyword to check
        :type  keyword: object
        :param keyword_list_name: Name of keyword to mention in inconsistency report, if check fails
        :type  keyword_list_name: str
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        if len(keyword_dictionary) == 0:
            return False, "    Dictionary is empty!\n"

        if keyword not in keyword_dictionary:
            return False, (f"    Keyword '{keyword}' in {keyword_list_name} does not match any keyword within dictionary:\n"
                           f"    {list(keyword_dictionary.keys())}!\n")

        return True, ""

    @staticmethod
    def raise_on_inconsistency(is_consistent: bool, inconsistency_report: str) -> None:
        """
        Raise an InvalidArgumentError in case a previous check has failed.

        :param is_consistent: Result of the previous checks
        :type  is_consistent: bool
        :param inconsistency_report: Collected reports of the previous checks
        :type  inconsistency_report: str
        :raises InvalidArgumentError: in case of inconsistent parameters
        """
        if not is_consistent:
            raise InvalidArgumentError(f"Invalid toroid parameter:\n{inconsistency_report}")
