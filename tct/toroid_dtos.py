"""Data transfer objects (DTOs) for the toroid optimization."""

# python libraries
import dataclasses

# 3rd party libraries
import numpy as np

@dataclasses.dataclass(frozen=True)
class DCoreCoefficients:
    """
    Shape coefficients of the D-shaped core for a single alpha.

    Table 1 of "D-shaped toroidal cage inductors", P.N. Murgatroyd and D. Belahrache, 1989.
    All lengths are normalized to the inner radius B.
    """

    alpha: int
    e: float  # flat height
    h: float  # maximum half-height
    p: float  # perimeter of a single turn
    s: float  # enclosed area
    t: float  # inductance factor

@dataclasses.dataclass(frozen=True)
class DCoreGeometry:
    """Geometry of a toroid with D-shaped core cross-section. All lengths in meter."""

    flat_height: float
    # height from the center line, the core is two times as tall overall
    max_height: float
    # distance between center axis and the peak of the D, not the radius of curvature
    radius_at_peak: float
    inner_diameter: float
    outer_diameter: float
    turns: int
    layers: int
    wire_length: float
    resistance: float

@dataclasses.dataclass(frozen=True)
class CircularCoreGeometry:
    """Geometry of a toroid with circular core cross-section. All lengths in meter."""

    core_radius: float
    center_radius: float
    inner_diameter: float
    outer_diameter: float
    turns: int
    layers: int
    wire_length: float
    resistance: float

@dataclasses.dataclass(frozen=True)
class GeneralParameters:
    """Input echo of a single optimization."""

    single_layer_inductance: float
    wire_diameter: float
    target_inductance: float

@dataclasses.dataclass(frozen=True)
class ToroidGeometry:
    """Combined result of the toroid optimization."""

    d_core: DCoreGeometry
    circular_core: CircularCoreGeometry
    general: GeneralParameters

    def to_dict(self) -> dict[str, float]:
        """
        Flatten the result to a single dictionary, e.g. as a row of a sweep table.

        :return: Dictionary with prefixed keys 'd_core_', 'circular_core_' and the general parameters
        :rtype: dict[str, float]
        """
        row: dict[str, float] = dataclasses.asdict(self.general)
        for key, value in dataclasses.asdict(self.d_core).items():
            row[f"d_core_{key}"] = value
        for key, value in dataclasses.asdict(self.circular_core).items():
            row[f"circular_core_{key}"] = value
        return row

@dataclasses.dataclass(frozen=True)
class InductanceCheck:
    """Approximated inductances of a computed geometry. Informational only."""

    target_inductance: float
    d_core_sanity_inductance: float
    circular_core_sanity_inductance: float

@dataclasses.dataclass(frozen=True)
class BoundaryCurve:
    """
    Cross-section boundary of the D-shaped core.

    radius and height form a closed curve (upper half followed by the mirrored lower half).
    """

    radius: np.ndarray
    height: np.ndarray
    inner_radius: float
    outer_radius: float
    flat_height: float
