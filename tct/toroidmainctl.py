"""Main control program to optimize the toroid."""
# python libraries
import configparser
import logging
import logging.config
import os
import sys
import tomllib
from typing import Any

# 3rd party libraries

# own libraries
from tct import toml_checker as tc
from tct.boundary_check import BoundaryCheck
from tct.generate_toml import (check_for_missing_toml_files, generate_toroid_toml, generate_logging_config,
                               TOROID_CONF_FILENAME, LOGGING_CONF_FILENAME)
from tct.toroid_dtos import ToroidGeometry
from tct.toroid_export import export_toroid, write_sweep
from tct.toroid_optimization import ToroidOptimization

logger = logging.getLogger(__name__)


class ToroidMainCtl:
    """Main class to control the toroid optimization."""

    @staticmethod
    def load_toml_file(toml_file: str) -> tuple[bool, dict[str, Any]]:
        """
        Load the toml configuration data to a dictionary.

        :param toml_file : File name of the toml-file
        :type  toml_file : str
        :return: True, if the data could be loaded successful and the loaded dictionary
        :rtype: tuple[bool, dict[str, Any]]
        """
        # return value initialization to false and toml Data to empty
        is_toml_file_existing = False
        config: dict[str, Any] = {}

        toml_file_directory = os.path.dirname(toml_file)

        if os.path.exists(toml_file_directory) or toml_file_directory == "":
            if os.path.isfile(toml_file):
                with open(toml_file, "rb") as f:
                    try:
                        config = tomllib.load(f)
                        is_toml_file_existing = True
                    except tomllib.TOMLDecodeError as e:
                        # File is not conform to toml-format
                        logger.warning(f"toml-file is not conform to toml-format:\n{e}")
            else:
                logger.warning(f"File {toml_file} does not exists!")
        else:
            logger.warning(f"Path {toml_file_directory} does not exists!")

        return is_toml_file_existing, config

    @staticmethod
    def load_generate_logging_config(logging_config_file: str) -> None:
        """
        Read the logging configuration file and configure the logger.

        Generate a default logging configuration file in case it does not exist.

        :param logging_config_file: File name of the logging configuration file
        :type logging_config_file: str
        """
        logging_conf_file_directory = os.path.dirname(logging_config_file)

        if os.path.exists(logging_conf_file_directory) or logging_conf_file_directory == "":
            if os.path.isfile(logging_config_file):
                try:
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                except (KeyError, ValueError, RuntimeError, configparser.Error):
                    logger.warning(f"Logging configuration file {logging_config_file} is inconsistent.")
                else:
                    logger.info(f"Found existing logging configuration {logging_config_file}.")
            else:
                logger.info(f"Generate a new {LOGGING_CONF_FILENAME} file.")
                generate_logging_config(logging_conf_file_directory)
                # Reset to standard file name
                logging_config_file = os.path.join(logging_conf_file_directory, LOGGING_CONF_FILENAME)
                if os.path.isfile(logging_config_file):
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                else:
                    raise ValueError(f"{LOGGING_CONF_FILENAME} can not be generated.")
        else:
            logger.warning(f"Path {logging_conf_file_directory} does not exists!")

    @staticmethod
    def generate_conf_file(path: str) -> bool:
        """
        Create and save the default configuration file ToroidConf.toml within the path.

        :param path : Location of the configuration
        :type  path : str
        :return: true, if the file is stored successfully
        :rtype: bool
        """
        if not os.path.exists(path):
            logger.warning(f"Path {path} does not exists!")
            return False

        generate_toroid_toml(path)
        return os.path.isfile(os.path.join(path, TOROID_CONF_FILENAME))

    @staticmethod
    def load_toroid_configuration(toml_file: str) -> tc.TomlToroid:
        """
        Load and verify the toroid configuration.

        :param toml_file: File name of the toroid toml-file
        :type  toml_file: str
        :return: verified toroid configuration
        :rtype: tc.TomlToroid
        :raises ValueError: in case the file is missing or inconsistent
        """
        is_loaded, dict_toroid = ToroidMainCtl.load_toml_file(toml_file)
        if not is_loaded:
            raise ValueError(f"Toroid configuration file {toml_file} can not be loaded.")
        toml_toroid = tc.TomlToroid(**dict_toroid)

        is_consistent, inconsistency_report = ToroidOptimization.verify_optimization_parameter(toml_toroid)
        if not is_consistent:
            logger.warning(f"Toroid configuration {toml_file} is inconsistent:\n{inconsistency_report}")
        BoundaryCheck.raise_on_inconsistency(is_consistent, inconsistency_report)

        return toml_toroid

    @staticmethod
    def run_optimization_from_toml_configurations(workspace_path: str) -> ToroidGeometry:
        """
        Perform the toroid optimization according the configuration within the workspace.

        Missing configuration files are generated with default values.

        :param workspace_path: Path to the workspace with ToroidConf.toml and logging.conf
        :type  workspace_path: str
        :return: result of the toroid optimization
        :rtype: ToroidGeometry
        """
        if workspace_path == "":
            workspace_path = os.path.join(os.getcwd(), "workspace")
        workspace_path = os.path.abspath(workspace_path)

        # --------------------------
        # Logging and configuration
        # --------------------------
        check_for_missing_toml_files(workspace_path)
        ToroidMainCtl.load_generate_logging_config(os.path.join(workspace_path, LOGGING_CONF_FILENAME))

        logger.debug("Read toroid configuration file")
        toml_toroid = ToroidMainCtl.load_toroid_configuration(os.path.join(workspace_path, TOROID_CONF_FILENAME))

        option_dict: dict[str, Any] = {
            "number_of_layers": toml_toroid.design.number_of_layers,
            "core_mu": toml_toroid.design.core_mu,
            "alpha": toml_toroid.design.alpha,
            "fill_factor": toml_toroid.wire.fill_factor,
            "resistivity": toml_toroid.wire.resistivity,
            "is_millimeter_correction_enabled": toml_toroid.wire.is_millimeter_correction_enabled
        }

        # --------------------------
        # Optimization
        # --------------------------
        geometry = ToroidOptimization.optimize(toml_toroid.wire.diameter, toml_toroid.design.target_inductance, **option_dict)
        logger.info(f"D-core: ID={geometry.d_core.inner_diameter * 1e3:.2f} mm, OD={geometry.d_core.outer_diameter * 1e3:.2f} mm, "
                    f"turns={geometry.d_core.turns}, R={geometry.d_core.resistance:.3g} Ohm")
        logger.info(f"Circular core: ID={geometry.circular_core.inner_diameter * 1e3:.2f} mm, "
                    f"OD={geometry.circular_core.outer_diameter * 1e3:.2f} mm, "
                    f"turns={geometry.circular_core.turns}, R={geometry.circular_core.resistance:.3g} Ohm")

        # --------------------------
        # Export
        # --------------------------
        if toml_toroid.export.export_name != "":
            export_toroid(geometry, toml_toroid.export.export_name, workspace_path,
                          number_of_points=toml_toroid.export.number_of_points,
                          upsample_points=toml_toroid.export.upsample_points)

        if len(toml_toroid.sweep.target_inductance_list) > 0:
            sweep_df = ToroidOptimization.optimize_sweep(toml_toroid.wire.diameter, toml_toroid.sweep.target_inductance_list,
                                                         **option_dict)
            sweep_name = toml_toroid.export.export_name if toml_toroid.export.export_name != "" else "sweep"
            write_sweep(sweep_df, os.path.join(workspace_path, f"ToroidSweep-{sweep_name}.csv"))

        return geometry


if __name__ == "__main__":
    # Variable declaration
    arg1 = ""

    arguments = sys.argv
    # Optional argument: workspace folder
    if len(arguments) > 1:
        arg1 = os.path.abspath(arguments[1])
        print(f"workspace path={arg1}")

    ToroidMainCtl.run_optimization_from_toml_configurations(arg1)
