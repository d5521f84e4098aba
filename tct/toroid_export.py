"""Export of the toroid results to text and csv files."""
# python libraries
import os
import dataclasses
import logging

# 3rd party libraries
import numpy as np
import pandas as pd

# own libraries
from tct.toroid_dtos import ToroidGeometry, BoundaryCurve
from tct.boundary_curve import sample_d_core_boundary

logger = logging.getLogger(__name__)

# fields given in meter, reported in millimeter
_LENGTH_FIELD_LIST = ["flat_height", "max_height", "radius_at_peak", "inner_diameter", "outer_diameter",
                      "core_radius", "center_radius"]


def _format_geometry_section(title: str, geometry_dto: object) -> list[str]:
    line_list = [title]
    for key, value in dataclasses.asdict(geometry_dto).items():
        if key in _LENGTH_FIELD_LIST:
            line_list.append(f"    {key:<26}: {value * 1e3:.4g} mm")
        elif key == "wire_length":
            line_list.append(f"    {key:<26}: {value:.4g} m")
        elif key == "resistance":
            line_list.append(f"    {key:<26}: {value:.4g} Ohm")
        else:
            line_list.append(f"    {key:<26}: {value}")
    return line_list


def write_toroid_report(geometry: ToroidGeometry, filepath: str) -> None:
    """
    Write both geometries and the general parameters to a plain text file.

    :param geometry: result of the toroid optimization
    :type geometry: ToroidGeometry
    :param filepath: file name of the report
    :type filepath: str
    """
    line_list = ["General parameters",
                 f"    {'single_layer_inductance':<26}: {geometry.general.single_layer_inductance * 1e6:.4g} uH",
                 f"    {'wire_diameter':<26}: {geometry.general.wire_diameter * 1e3:.4g} mm",
                 f"    {'target_inductance':<26}: {geometry.general.target_inductance * 1e6:.4g} uH",
                 ""]
    line_list += _format_geometry_section("D-shaped core", geometry.d_core)
    line_list.append("")
    line_list += _format_geometry_section("Circular core", geometry.circular_core)

    with open(filepath, "w") as f:
        f.write("\n".join(line_list) + "\n")
    logger.info(f"Toroid parameters written to {filepath}.")


def write_boundary_curve(curve: BoundaryCurve, filepath: str) -> None:
    """
    Write the boundary curve in millimeter to a csv file.

    :param curve: D-core cross-section boundary in meter
    :type curve: BoundaryCurve
    :param filepath: file name of the csv file
    :type filepath: str
    """
    np.savetxt(filepath, np.column_stack((curve.radius * 1e3, curve.height * 1e3)), delimiter=",",
               header="r_mm,z_mm", comments="")
    logger.info(f"D-core boundary with {len(curve.radius)} points written to {filepath}.")


def write_sweep(sweep_df: pd.DataFrame, filepath: str) -> None:
    """
    Write the result table of a sweep to a csv file.

    :param sweep_df: sweep results
    :type sweep_df: pd.DataFrame
    :param filepath: file name of the csv file
    :type filepath: str
    """
    sweep_df.to_csv(filepath, index=False)
    logger.info(f"Sweep with {len(sweep_df)} designs written to {filepath}.")


def export_toroid(geometry: ToroidGeometry, export_name: str, directory: str = "", number_of_points: int = 100,
                  upsample_points: int = 10000) -> tuple[str, str]:
    """
    Export the parameter report and the D-core cross-section.

    Generates 'ToroidParameters-<export_name>.txt' and 'DCoreGeom-<export_name>.csv'.

    :param geometry: result of the toroid optimization
    :type geometry: ToroidGeometry
    :param export_name: name suffix of the generated files
    :type export_name: str
    :param directory: target directory, default is the working directory
    :type directory: str
    :param number_of_points: approximate number of points of the cross-section
    :type number_of_points: int
    :param upsample_points: number of integration steps of the cross-section
    :type upsample_points: int
    :return: file path of the report, file path of the cross-section
    :rtype: tuple[str, str]
    """
    if directory != "" and not os.path.exists(directory):
        os.makedirs(directory)

    report_filepath = os.path.join(directory, f"ToroidParameters-{export_name}.txt")
    curve_filepath = os.path.join(directory, f"DCoreGeom-{export_name}.csv")

    curve = sample_d_core_boundary(geometry.d_core.inner_diameter / 2, geometry.d_core.outer_diameter / 2,
                                   number_of_points=number_of_points, upsample_points=upsample_points)
    write_toroid_report(geometry, report_filepath)
    write_boundary_curve(curve, curve_filepath)

    return report_filepath, curve_filepath
