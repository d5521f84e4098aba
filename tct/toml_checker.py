"""Classes and toml checker for the toroid configuration."""
# python libraries

# 3rd party libraries
from pydantic import BaseModel, Field


# ######################################################
# toroid
# ######################################################

class TomlWire(BaseModel):
    """Wire data."""

    diameter: float
    resistivity: float = 1.68e-8
    fill_factor: float = 1.0
    is_millimeter_correction_enabled: bool = False

class TomlDesign(BaseModel):
    """Design target and core shape."""

    target_inductance: float
    number_of_layers: int = 2
    core_mu: float = 1.0
    alpha: int = 2

class TomlSweep(BaseModel):
    """Optional sweep over the target inductance."""

    target_inductance_list: list[float] = Field(default_factory=list)

class TomlExport(BaseModel):
    """Export of the cross-section and the parameter report."""

    export_name: str = ""
    number_of_points: int = 100
    upsample_points: int = 10000

class TomlToroid(BaseModel):
    """Toroid toml file."""

    wire: TomlWire
    design: TomlDesign
    sweep: TomlSweep = Field(default_factory=TomlSweep)
    export: TomlExport = Field(default_factory=TomlExport)
