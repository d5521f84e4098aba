"""Cross-section boundary of the ideal D-shaped toroid core."""
# python libraries
import logging

# 3rd party libraries
import numpy as np

# own libraries
from tct.toroid_exceptions import InvalidArgumentError
from tct.toroid_dtos import BoundaryCurve

logger = logging.getLogger(__name__)


def d_core_slope(radius: np.ndarray, inner_radius: float, outer_radius: float) -> np.ndarray:
    """
    Slope dz/dr of the D-shaped core boundary.

    The slope is singular at both, the inner and the outer radius.

    :param radius: radial position(s), inner_radius < radius < outer_radius
    :type radius: np.ndarray
    :param inner_radius: inner radius r1
    :type inner_radius: float
    :param outer_radius: outer radius r2
    :type outer_radius: float
    :return: slope dz/dr
    :rtype: np.ndarray
    """
    return np.log(np.sqrt(inner_radius * outer_radius) / radius) / \
        np.sqrt(np.log(radius / inner_radius) * np.log(outer_radius / radius))


def integrate_half_profile(inner_radius: float, outer_radius: float, step_size: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Integrate the upper half of the D-shaped core boundary with the explicit Euler method.

    Integration starts a tenth step above the inner radius to avoid the infinite slope.
    Afterward the curve is shifted to z(r2) = 0, z(r1) = 0 is set manually and the
    vertical flat part at the inner radius is filled with linear interpolated points.

    :param inner_radius: inner radius r1
    :type inner_radius: float
    :param outer_radius: outer radius r2
    :type outer_radius: float
    :param step_size: radial step size dr
    :type step_size: float
    :return: radius and height of the upper half, starting at (r1, 0) and ending at z = 0
    :rtype: tuple[np.ndarray, np.ndarray]
    """
    number_of_samples = int(np.floor((outer_radius - inner_radius) / step_size))
    if number_of_samples < 3:
        raise InvalidArgumentError(f"Step size {step_size} is too large for the radial range "
                                   f"{inner_radius} to {outer_radius}.")

    radius = inner_radius + step_size / 10 + step_size * np.arange(number_of_samples)
    height = np.zeros(number_of_samples)
    height[1:] = np.cumsum(d_core_slope(radius[:-1], inner_radius, outer_radius) * step_size)

    # boundary conditions z(r2) = 0 and z(r1) = 0
    height = height - height[-1]
    height[0] = 0.0

    # fill the vertical flat part between z(r1) = 0 and the flat height
    flat_height = height[1]
    number_of_start_points = int(np.ceil(flat_height / step_size)) if flat_height > 0 else 0
    if number_of_start_points > 0:
        start_height = flat_height * np.arange(1, number_of_start_points + 1) / number_of_start_points
        height = np.concatenate((height[:1], start_height, height[1:]))
        radius = np.concatenate((radius[:1], np.full(number_of_start_points, radius[0]), radius[1:]))

    return radius, height


def mirror_half_profile(radius: np.ndarray, height: np.ndarray, number_of_skipped_outer_points: int = 2) -> tuple[np.ndarray, np.ndarray]:
    """
    Close the upper half profile by appending the mirrored lower half.

    The first point and the last number_of_skipped_outer_points points of the upper half are not repeated.

    :param radius: radius of the upper half
    :type radius: np.ndarray
    :param height: height of the upper half
    :type height: np.ndarray
    :param number_of_skipped_outer_points: number of outer points of the upper half, which are not mirrored
    :type number_of_skipped_outer_points: int
    :return: radius and height of the closed curve
    :rtype: tuple[np.ndarray, np.ndarray]
    """
    mirrored_radius = np.concatenate((radius, radius[1:-number_of_skipped_outer_points][::-1]))
    mirrored_height = np.concatenate((height, -height[1:-number_of_skipped_outer_points][::-1]))
    return mirrored_radius, mirrored_height


def downsample_half_profile(radius: np.ndarray, height: np.ndarray, downsample_step: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Keep every downsample_step-th point of the upper half profile.

    The first and the last point are always kept, so z(r1) = 0 and z(r2) = 0 survive the reduction.

    :param radius: radius of the upper half
    :type radius: np.ndarray
    :param height: height of the upper half
    :type height: np.ndarray
    :param downsample_step: step between two kept points
    :type downsample_step: int
    :return: radius and height of the reduced upper half
    :rtype: tuple[np.ndarray, np.ndarray]
    """
    index_array = np.arange(0, len(radius), downsample_step)
    if index_array[-1] != len(radius) - 1:
        index_array = np.append(index_array, len(radius) - 1)
    return radius[index_array], height[index_array]


def sample_d_core_boundary(inner_radius: float, outer_radius: float, step_size: float = 1e-4,
                           number_of_points: int | None = None, upsample_points: int = 10000) -> BoundaryCurve:
    """
    Sample the closed cross-section boundary of the ideal D-shaped core.

    If number_of_points is given, the step size is derived from upsample_points and the upper
    half is downsampled by round(upsample_points / number_of_points) before it is mirrored.

    :param inner_radius: inner radius r1
    :type inner_radius: float
    :param outer_radius: outer radius r2
    :type outer_radius: float
    :param step_size: radial step size, ignored if number_of_points is given
    :type step_size: float
    :param number_of_points: approximate number of points for export
    :type number_of_points: int | None
    :param upsample_points: number of radial integration steps, used with number_of_points
    :type upsample_points: int
    :return: closed boundary curve
    :rtype: BoundaryCurve
    """
    if inner_radius <= 0:
        raise InvalidArgumentError(f"Inner radius {inner_radius} must be greater than 0.")
    if outer_radius <= inner_radius:
        raise InvalidArgumentError(f"Outer radius {outer_radius} must be greater than inner radius {inner_radius}.")

    if number_of_points is not None:
        if number_of_points < 1 or upsample_points < number_of_points:
            raise InvalidArgumentError(f"Number of points {number_of_points} must be within 1 and upsample points {upsample_points}.")
        step_size = (outer_radius - inner_radius) / upsample_points
    elif step_size <= 0:
        raise InvalidArgumentError(f"Step size {step_size} must be greater than 0.")

    radius, height = integrate_half_profile(inner_radius, outer_radius, step_size)
    flat_height = float(np.max(height[radius == radius[0]]))

    if number_of_points is not None:
        downsample_step = max(int(round(upsample_points / number_of_points)), 1)
        radius, height = downsample_half_profile(radius, height, downsample_step)
        # reduced half: only the outer point on z = 0 is not mirrored
        radius, height = mirror_half_profile(radius, height, number_of_skipped_outer_points=1)
    else:
        radius, height = mirror_half_profile(radius, height)

    logger.debug(f"D-core boundary with {len(radius)} points between r1={inner_radius} and r2={outer_radius}.")

    return BoundaryCurve(radius=radius, height=height, inner_radius=inner_radius,
                         outer_radius=outer_radius, flat_height=flat_height)
