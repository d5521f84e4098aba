"""Generate default toml and logging configuration files."""
# python libraries
import os

TOROID_CONF_FILENAME = "ToroidConf.toml"
LOGGING_CONF_FILENAME = "logging.conf"


def check_for_missing_toml_files(working_directory: str) -> None:
    """
    Check for missing toml default files. Generate them, if missing.

    :param working_directory: working directory
    :type working_directory: str
    """
    if not os.path.exists(working_directory):
        os.makedirs(working_directory)
    if not os.path.isfile(os.path.join(working_directory, TOROID_CONF_FILENAME)):
        generate_toroid_toml(working_directory)


def generate_toroid_toml(working_directory: str) -> None:
    """
    Generate the default ToroidConf.toml file.

    :param working_directory: working directory
    :type working_directory: str
    """
    toml_data = '''
    [wire]
        diameter = 2e-3                 # wire diameter in m
        resistivity = 1.68e-8           # resistivity in Ohm*m (copper)
        fill_factor = 1.0               # conductor share of the wire cross-section, < 1 for litz wire
        is_millimeter_correction_enabled = false  # interpret diameters > 0.1 as mm in the resistance calculation

    [design]
        target_inductance = 100e-6      # target inductance in H
        number_of_layers = 2            # number of fully wound layers
        core_mu = 1.0                   # relative permeability
        alpha = 2                       # ratio of OD/ID of the D-core, integer between 2 and 5

    [sweep]
        target_inductance_list = []     # optional list of target inductances in H

    [export]
        export_name = ""                # empty: no export
        number_of_points = 100          # approximate number of points of the cross-section
        upsample_points = 10000         # number of integration steps of the cross-section
    '''
    with open(os.path.join(working_directory, TOROID_CONF_FILENAME), 'w') as output:
        output.write(toml_data)


def generate_logging_config(working_directory: str) -> None:
    """
    Generate the default logging.conf file.

    :param working_directory: working directory
    :type working_directory: str
    """
    logging_data = '''[loggers]
keys=root,tct

[handlers]
keys=console

[formatters]
keys=simple

[logger_root]
level=INFO
handlers=console
qualname=

[logger_tct]
level=INFO
handlers=console
qualname=tct
propagate=0

[handler_console]
class=StreamHandler
level=NOTSET
formatter=simple
args=(sys.stdout,)

[formatter_simple]
format=%(asctime)s - %(name)s - %(levelname)s - %(message)s
datefmt=%Y-%m-%d %H:%M:%S
'''
    with open(os.path.join(working_directory, LOGGING_CONF_FILENAME), 'w') as output:
        output.write(logging_data)
