"""Toroid optimization class.

Optimal single-layer air-core toroids with D-shaped and circular core cross-section according to
 * "The optimal form for coreless inductors", P.N. Murgatroyd, IEEE Trans. Magn. 25 (3), 1989
 * "Economic designs for single-layer toroidal inductors", P.N. Murgatroyd
 * "D-shaped toroidal cage inductors", P.N. Murgatroyd and D. Belahrache, 1989
"""
# python libraries
import logging

# 3rd party libraries
import numpy as np
import pandas as pd
import tqdm
import scipy.optimize

# own libraries
from tct.boundary_check import BoundaryCheck, CheckCondition as c_flag
from tct.toroid_exceptions import InvalidArgumentError, GeometryInfeasibleError, RootFindFailureError
from tct.toroid_dtos import (DCoreCoefficients, DCoreGeometry, CircularCoreGeometry, GeneralParameters,
                             ToroidGeometry, InductanceCheck)
from tct.resistance import wire_length_to_resistance, COPPER_RESISTIVITY
from tct.multilayer import packed_inner_diameters
from tct.toml_checker import TomlToroid

# configure root logger
logger = logging.getLogger(__name__)

MU_0 = 4 * np.pi * 1e-7

# Table 1 of "D-shaped toroidal cage inductors", columns: alpha e h p s t
D_CORE_COEFFICIENT_DICT: dict[int, DCoreCoefficients] = {
    2: DCoreCoefficients(alpha=2, e=0.26, h=0.645, p=3.6, s=0.72, t=1.77),
    3: DCoreCoefficients(alpha=3, e=0.85, h=1.5, p=8.0, s=2.74, t=4.42),
    4: DCoreCoefficients(alpha=4, e=1.6, h=2.4, p=12.8, s=5.76, t=8.09),
    5: DCoreCoefficients(alpha=5, e=2.45, h=3.4, p=17.9, s=9.61, t=12.6),
    6: DCoreCoefficients(alpha=6, e=3.4, h=4.5, p=23.3, s=14.2, t=17.8),
    7: DCoreCoefficients(alpha=7, e=4.4, h=5.6, p=28.9, s=19.4, t=23.7),
}
# alpha values supported by the optimizer
OPTIMIZER_ALPHA_LIST: list[int] = [2, 3, 4, 5]

# upper limit of the number of layers accepted by the parameter verification
MAX_NUMBER_OF_LAYERS = 1000

# search interval of the dimensionless winding parameter K
K_SEARCH_MIN_MAX_LIST: list[float] = [0.0, 1e5]

# K-equation coefficients of the circular core: 0.2722 * K^1.5 + 0.25 * K = L/L0
CIRCULAR_CORE_K_COEFFICIENT = 0.2722
K_LINEAR_COEFFICIENT = 0.25
# turns of the optimal circular core: N = 0.8165 * sqrt(K)
CIRCULAR_CORE_TURNS_COEFFICIENT = 0.8165

# the D-core sanity check assumes the core fills 75 % of its circumscribed rectangle
D_CORE_AREA_FILL_RATIO = 0.75


class ToroidOptimization:
    """Optimization of air-core toroids."""

    @staticmethod
    def get_d_core_coefficients(alpha: int, alpha_list: list[int] | None = None) -> DCoreCoefficients:
        """
        Look up the D-core shape coefficients.

        :param alpha: ratio of outer to inner diameter
        :type alpha: int
        :param alpha_list: permitted alpha values, default all table entries
        :type alpha_list: list[int] | None
        :return: shape coefficients
        :rtype: DCoreCoefficients
        :raises InvalidArgumentError: in case alpha is not supported
        """
        if alpha_list is None:
            alpha_list = list(D_CORE_COEFFICIENT_DICT.keys())
        permitted_dict = {key: D_CORE_COEFFICIENT_DICT[key] for key in alpha_list}

        is_check_passed, issue_report = BoundaryCheck.check_dictionary(permitted_dict, alpha, "alpha")
        BoundaryCheck.raise_on_inconsistency(is_check_passed, issue_report)

        return permitted_dict[alpha]

    @staticmethod
    def verify_parameter(wire_diameter: float, target_inductance: float, number_of_layers: int, core_mu: float,
                         alpha: int, fill_factor: float, resistivity: float) -> tuple[bool, str]:
        """Verify the input parameter ranges of a single optimization.

        :param wire_diameter: wire diameter in m
        :type wire_diameter: float
        :param target_inductance: target inductance in H
        :type target_inductance: float
        :param number_of_layers: number of fully wound layers
        :type number_of_layers: int
        :param core_mu: relative permeability
        :type core_mu: float
        :param alpha: ratio of outer to inner diameter
        :type alpha: int
        :param fill_factor: conductor share of the wire cross-section
        :type fill_factor: float
        :param resistivity: resistivity of the conductor in Ohm*m
        :type resistivity: float
        :return: True, if the parameters are consistent | inconsistency report
        :rtype: tuple[bool, str]
        """
        # Variable declaration
        inconsistency_report: str = ""
        is_consistent: bool = True

        toml_check_value_list = [(wire_diameter, "wire_diameter"), (target_inductance, "target_inductance"),
                                 (core_mu, "core_mu"), (resistivity, "resistivity")]
        is_check_passed, issue_report = BoundaryCheck.check_float_value_list(
            0, np.inf, toml_check_value_list, c_flag.check_exclusive, c_flag.check_ignore)
        if not is_check_passed:
            inconsistency_report = inconsistency_report + issue_report
            is_consistent = False

        is_check_passed, issue_report = BoundaryCheck.check_float_value(
            0, 1, fill_factor, "fill_factor", c_flag.check_exclusive, c_flag.check_inclusive)
        if not is_check_passed:
            inconsistency_report = inconsistency_report + issue_report
            is_consistent = False

        is_check_passed, issue_report = BoundaryCheck.check_int_value(1, MAX_NUMBER_OF_LAYERS, number_of_layers, "number_of_layers")
        if not is_check_passed:
            inconsistency_report = inconsistency_report + issue_report
            is_consistent = False

        is_check_passed, issue_report = BoundaryCheck.check_dictionary(
            {alpha_key: D_CORE_COEFFICIENT_DICT[alpha_key] for alpha_key in OPTIMIZER_ALPHA_LIST}, alpha, "alpha")
        if not is_check_passed:
            inconsistency_report = inconsistency_report + issue_report
            is_consistent = False

        return is_consistent, inconsistency_report

    @staticmethod
    def verify_optimization_parameter(toml_toroid: TomlToroid) -> tuple[bool, str]:
        """Verify the input parameter ranges of a toroid configuration.

        :param toml_toroid: toml toroid configuration
        :type toml_toroid: TomlToroid
        :return: True, if the configuration is consistent | inconsistency report
        :rtype: tuple[bool, str]
        """
        is_consistent, inconsistency_report = ToroidOptimization.verify_parameter(
            toml_toroid.wire.diameter, toml_toroid.design.target_inductance, toml_toroid.design.number_of_layers,
            toml_toroid.design.core_mu, toml_toroid.design.alpha, toml_toroid.wire.fill_factor, toml_toroid.wire.resistivity)

        # sweep values
        sweep_check_value_list = [(target_inductance, f"target_inductance_list[{count}]")
                                  for count, target_inductance in enumerate(toml_toroid.sweep.target_inductance_list)]
        if sweep_check_value_list:
            is_check_passed, issue_report = BoundaryCheck.check_float_value_list(
                0, np.inf, sweep_check_value_list, c_flag.check_exclusive, c_flag.check_ignore)
            if not is_check_passed:
                inconsistency_report = inconsistency_report + issue_report
                is_consistent = False

        # export values
        if toml_toroid.export.export_name != "":
            is_check_passed, issue_report = BoundaryCheck.check_int_value(
                1, toml_toroid.export.upsample_points, toml_toroid.export.number_of_points, "number_of_points")
            if not is_check_passed:
                inconsistency_report = inconsistency_report + issue_report
                is_consistent = False

        return is_consistent, inconsistency_report

    @staticmethod
    def solve_winding_parameter(k_coefficient: float, l_per_l0: float, k_linear_coefficient: float = K_LINEAR_COEFFICIENT) -> float:
        """
        Solve k_coefficient * K^1.5 + k_linear_coefficient * K = L/L0 for the dimensionless winding parameter K.

        Brent's method on the signed residual within the interval K_SEARCH_MIN_MAX_LIST.

        :param k_coefficient: coefficient of the K^1.5 term
        :type k_coefficient: float
        :param l_per_l0: dimensionless inductance L/L0
        :type l_per_l0: float
        :param k_linear_coefficient: coefficient of the linear term
        :type k_linear_coefficient: float
        :return: winding parameter K
        :rtype: float
        :raises RootFindFailureError: in case there is no root within the interval or the solver does not converge
        """
        def residual(k: float) -> float:
            return k_coefficient * k ** 1.5 + k_linear_coefficient * k - l_per_l0

        k_min, k_max = K_SEARCH_MIN_MAX_LIST
        residual_min = residual(k_min)
        residual_max = residual(k_max)
        if residual_min == 0:
            return k_min
        if residual_min * residual_max > 0:
            raise RootFindFailureError(f"No winding parameter K within [{k_min}, {k_max}] for L/L0={l_per_l0}.")

        k, root_results = scipy.optimize.brentq(residual, k_min, k_max, full_output=True, disp=False)
        if not root_results.converged:
            raise RootFindFailureError(f"Winding parameter K did not converge for L/L0={l_per_l0}: {root_results.flag}.")

        logger.debug(f"K={k} after {root_results.iterations} iterations.")
        return float(k)

    @staticmethod
    def optimize_d_core(wire_diameter: float, l_per_l0: float, coefficients: DCoreCoefficients, number_of_layers: int,
                        fill_factor: float = 1.0, resistivity: float = COPPER_RESISTIVITY,
                        is_millimeter_correction_enabled: bool = False) -> DCoreGeometry:
        """
        Calculate the optimal toroid with D-shaped core for a single layer and scale it to all layers.

        :param wire_diameter: wire diameter in m
        :type wire_diameter: float
        :param l_per_l0: dimensionless single-layer inductance L/L0
        :type l_per_l0: float
        :param coefficients: shape coefficients of the D-core
        :type coefficients: DCoreCoefficients
        :param number_of_layers: number of fully wound layers
        :type number_of_layers: int
        :param fill_factor: conductor share of the wire cross-section
        :type fill_factor: float
        :param resistivity: resistivity of the conductor in Ohm*m
        :type resistivity: float
        :param is_millimeter_correction_enabled: forwarded to the resistance calculation
        :type is_millimeter_correction_enabled: bool
        :return: D-core geometry
        :rtype: DCoreGeometry
        """
        k_coefficient = np.sqrt(2 * np.pi) * coefficients.s / coefficients.p ** 1.5
        k = ToroidOptimization.solve_winding_parameter(k_coefficient, l_per_l0)

        wire_length_per_layer = k * wire_diameter
        turns_per_layer = np.sqrt(2 * np.pi * k / coefficients.p)
        # inner radius with touching wires on the inner edge of the core
        inner_radius = wire_diameter / 2 + turns_per_layer * wire_diameter / (2 * np.pi)

        if number_of_layers > 1:
            inner_diameter = packed_inner_diameters(number_of_layers, 2 * inner_radius, wire_diameter)[-1]
        else:
            inner_diameter = 2 * inner_radius
        outer_diameter = 2 * coefficients.alpha * inner_radius

        turns = int(round(turns_per_layer * number_of_layers))
        if turns < 1:
            raise GeometryInfeasibleError(f"D-core winding results in {turns} turns.")
        if outer_diameter <= inner_diameter:
            logger.warning(f"Packed inner diameter {inner_diameter} of {number_of_layers} layers exceeds outer diameter {outer_diameter}.")
            raise GeometryInfeasibleError(f"D-core inner diameter {inner_diameter} m is not less than outer diameter {outer_diameter} m.")

        wire_length = wire_length_per_layer * number_of_layers
        resistance = wire_length_to_resistance(wire_length, wire_diameter, resistivity=resistivity, fill_factor=fill_factor,
                                               is_millimeter_correction_enabled=is_millimeter_correction_enabled)

        return DCoreGeometry(
            flat_height=float(inner_radius * coefficients.e),
            max_height=float(inner_radius * coefficients.h),
            radius_at_peak=float(np.sqrt(coefficients.alpha) * inner_radius),
            inner_diameter=float(inner_diameter),
            outer_diameter=float(outer_diameter),
            turns=turns,
            layers=number_of_layers,
            wire_length=float(wire_length),
            resistance=resistance)

    @staticmethod
    def optimize_circular_core(wire_diameter: float, l_per_l0: float, number_of_layers: int,
                               fill_factor: float = 1.0, resistivity: float = COPPER_RESISTIVITY,
                               is_millimeter_correction_enabled: bool = False) -> CircularCoreGeometry:
        """
        Calculate the optimal toroid with circular core for a single layer and scale it to all layers.

        Core radius and center radius result from the single-layer turns and wire length,
        turns and wire length are scaled by the number of layers afterward.

        :param wire_diameter: wire diameter in m
        :type wire_diameter: float
        :param l_per_l0: dimensionless single-layer inductance L/L0
        :type l_per_l0: float
        :param number_of_layers: number of fully wound layers
        :type number_of_layers: int
        :param fill_factor: conductor share of the wire cross-section
        :type fill_factor: float
        :param resistivity: resistivity of the conductor in Ohm*m
        :type resistivity: float
        :param is_millimeter_correction_enabled: forwarded to the resistance calculation
        :type is_millimeter_correction_enabled: bool
        :return: circular core geometry
        :rtype: CircularCoreGeometry
        """
        k = ToroidOptimization.solve_winding_parameter(CIRCULAR_CORE_K_COEFFICIENT, l_per_l0)

        wire_length_per_layer = k * wire_diameter
        turns_per_layer = CIRCULAR_CORE_TURNS_COEFFICIENT * np.sqrt(k)
        if turns_per_layer <= 1:
            raise GeometryInfeasibleError(f"Circular core winding results in {turns_per_layer} turns per layer.")

        core_radius = wire_length_per_layer / (2 * np.pi * turns_per_layer)
        center_radius = wire_diameter / (2 * np.sin(np.pi / turns_per_layer)) + core_radius

        turns = int(round(turns_per_layer * number_of_layers))
        wire_length = wire_length_per_layer * number_of_layers
        resistance = wire_length_to_resistance(wire_length, wire_diameter, resistivity=resistivity, fill_factor=fill_factor,
                                               is_millimeter_correction_enabled=is_millimeter_correction_enabled)

        return CircularCoreGeometry(
            core_radius=float(core_radius),
            center_radius=float(center_radius),
            inner_diameter=float(2 * (center_radius - core_radius)),
            outer_diameter=float(2 * (center_radius + core_radius)),
            turns=turns,
            layers=number_of_layers,
            wire_length=float(wire_length),
            resistance=resistance)

    @staticmethod
    def optimize(wire_diameter: float, target_inductance: float, number_of_layers: int = 2, core_mu: float = 1.0,
                 alpha: int = 2, fill_factor: float = 1.0, resistivity: float = COPPER_RESISTIVITY,
                 is_millimeter_correction_enabled: bool = False) -> ToroidGeometry:
        """
        Calculate the optimal D-shaped and circular core toroid for a target inductance.

        The calculation assumes number_of_layers fully wound layers. A single layer is optimized
        for target_inductance / number_of_layers^2 and the turns are scaled by the number of layers.

        :param wire_diameter: wire diameter in m
        :type wire_diameter: float
        :param target_inductance: target inductance in H
        :type target_inductance: float
        :param number_of_layers: number of fully wound layers
        :type number_of_layers: int
        :param core_mu: relative permeability
        :type core_mu: float
        :param alpha: ratio of outer to inner diameter of the D-core, integer between 2 and 5
        :type alpha: int
        :param fill_factor: conductor share of the wire cross-section, < 1 for litz wire
        :type fill_factor: float
        :param resistivity: resistivity of the conductor in Ohm*m
        :type resistivity: float
        :param is_millimeter_correction_enabled: forwarded to the resistance calculation
        :type is_millimeter_correction_enabled: bool
        :return: D-core geometry, circular core geometry and the general parameters
        :rtype: ToroidGeometry
        :raises InvalidArgumentError: in case of invalid input parameters
        :raises GeometryInfeasibleError: in case the winding can not be realized
        :raises RootFindFailureError: in case the winding parameter can not be solved
        """
        is_consistent, inconsistency_report = ToroidOptimization.verify_parameter(
            wire_diameter, target_inductance, number_of_layers, core_mu, alpha, fill_factor, resistivity)
        BoundaryCheck.raise_on_inconsistency(is_consistent, inconsistency_report)
        coefficients = ToroidOptimization.get_d_core_coefficients(alpha, OPTIMIZER_ALPHA_LIST)
        number_of_layers = int(number_of_layers)

        mu = MU_0 * core_mu
        l0 = mu * wire_diameter / (2 * np.pi)
        single_layer_inductance = target_inductance / number_of_layers ** 2
        # intermediate dimensionless parameter of the formulas from the papers
        l_per_l0 = single_layer_inductance / l0

        general = GeneralParameters(single_layer_inductance=single_layer_inductance, wire_diameter=wire_diameter,
                                    target_inductance=target_inductance)

        d_core = ToroidOptimization.optimize_d_core(wire_diameter, l_per_l0, coefficients, number_of_layers, fill_factor=fill_factor,
                                                    resistivity=resistivity, is_millimeter_correction_enabled=is_millimeter_correction_enabled)
        circular_core = ToroidOptimization.optimize_circular_core(wire_diameter, l_per_l0, number_of_layers, fill_factor=fill_factor,
                                                                  resistivity=resistivity,
                                                                  is_millimeter_correction_enabled=is_millimeter_correction_enabled)
        geometry = ToroidGeometry(d_core=d_core, circular_core=circular_core, general=general)

        inductance_check = ToroidOptimization.check_inductance(geometry, core_mu)
        logger.info(f"Target inductance is: {target_inductance * 1e6:.1f} uH")
        logger.info(f"Sanity check inductance D-core: {inductance_check.d_core_sanity_inductance * 1e6:.1f} uH, "
                    f"circular core: {inductance_check.circular_core_sanity_inductance * 1e6:.1f} uH")
        logger.debug(f"{geometry=}")

        return geometry

    @staticmethod
    def d_core_sanity_inductance(d_core: DCoreGeometry, core_mu: float = 1.0) -> float:
        """
        Approximate the inductance of a D-core geometry.

        Rough approximation: the core fills 75 % of its circumscribed rectangle.

        :param d_core: D-core geometry
        :type d_core: DCoreGeometry
        :param core_mu: relative permeability
        :type core_mu: float
        :return: inductance in H
        :rtype: float
        """
        enclosed_area = d_core.max_height * 2 * (d_core.outer_diameter - d_core.inner_diameter) / 2 * D_CORE_AREA_FILL_RATIO
        mean_path_length = np.pi * (d_core.outer_diameter + d_core.inner_diameter) / 2
        return float(MU_0 * core_mu * d_core.turns ** 2 * enclosed_area / mean_path_length)

    @staticmethod
    def circular_core_sanity_inductance(circular_core: CircularCoreGeometry, core_mu: float = 1.0) -> float:
        """
        Approximate the inductance of a circular core geometry by mu * N^2 * R^2 / (2 * T).

        :param circular_core: circular core geometry
        :type circular_core: CircularCoreGeometry
        :param core_mu: relative permeability
        :type core_mu: float
        :return: inductance in H
        :rtype: float
        """
        return float(MU_0 * core_mu * circular_core.turns ** 2 * circular_core.core_radius ** 2 / (2 * circular_core.center_radius))

    @staticmethod
    def check_inductance(geometry: ToroidGeometry, core_mu: float = 1.0) -> InductanceCheck:
        """
        Back-check a computed geometry with two approximations.

        :param geometry: result of the optimization
        :type geometry: ToroidGeometry
        :param core_mu: relative permeability
        :type core_mu: float
        :return: approximated inductances
        :rtype: InductanceCheck
        """
        return InductanceCheck(
            target_inductance=geometry.general.target_inductance,
            d_core_sanity_inductance=ToroidOptimization.d_core_sanity_inductance(geometry.d_core, core_mu),
            circular_core_sanity_inductance=ToroidOptimization.circular_core_sanity_inductance(geometry.circular_core, core_mu))

    @staticmethod
    def d_core_ideal_inductance(inner_diameter: float, turns: float, alpha: int) -> float:
        """
        Calculate the inductance of an ideal D-core toroid, equation 7 of the D-core paper.

        :param inner_diameter: inner diameter in m
        :type inner_diameter: float
        :param turns: number of turns
        :type turns: float
        :param alpha: ratio of outer to inner diameter, integer between 2 and 7
        :type alpha: int
        :return: inductance in H
        :rtype: float
        """
        if inner_diameter <= 0:
            raise InvalidArgumentError(f"Inner diameter {inner_diameter} must be greater than 0.")
        coefficients = ToroidOptimization.get_d_core_coefficients(alpha)
        inner_radius = inner_diameter / 2
        return float(coefficients.t * MU_0 * turns ** 2 * inner_radius / (2 * np.pi))

    @staticmethod
    def circular_core_ideal_inductance(inner_radius: float, turns: float, alpha: float, core_mu: float = 1.0) -> float:
        """
        Calculate the inductance of a toroid with circular cross-section by mu * N^2 * (R - sqrt(R^2 - a^2)).

        :param inner_radius: inner radius in m
        :type inner_radius: float
        :param turns: number of turns
        :type turns: float
        :param alpha: ratio of outer to inner radius
        :type alpha: float
        :param core_mu: relative permeability
        :type core_mu: float
        :return: inductance in H
        :rtype: float
        """
        if inner_radius <= 0:
            raise InvalidArgumentError(f"Inner radius {inner_radius} must be greater than 0.")
        if alpha <= 1:
            raise InvalidArgumentError(f"Alpha {alpha} must be greater than 1.")
        outer_radius = inner_radius * alpha
        center_radius = (outer_radius + inner_radius) / 2
        core_radius = (outer_radius - inner_radius) / 2
        return float(MU_0 * core_mu * turns ** 2 * (center_radius - np.sqrt(center_radius ** 2 - core_radius ** 2)))

    @staticmethod
    def optimize_sweep(wire_diameter: float, target_inductance_list: list[float], **kwargs) -> pd.DataFrame:
        """
        Optimize the toroid for several target inductances.

        :param wire_diameter: wire diameter in m
        :type wire_diameter: float
        :param target_inductance_list: target inductances in H
        :type target_inductance_list: list[float]
        :param kwargs: further keyword arguments of optimize()
        :return: one row per target inductance
        :rtype: pd.DataFrame
        """
        if len(target_inductance_list) == 0:
            logger.info("List is empty. No toroid is optimized!")

        row_list = []
        for target_inductance in tqdm.tqdm(target_inductance_list, disable=len(target_inductance_list) < 2):
            geometry = ToroidOptimization.optimize(wire_diameter, target_inductance, **kwargs)
            row_list.append(geometry.to_dict())

        return pd.DataFrame(row_list)
