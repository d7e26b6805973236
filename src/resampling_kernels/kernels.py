"""Submodule defining the cubic interpolation weight kernels.

Both kernels map a distance, measured in source-sample units, to the weight of
the sample at that distance. Both have a support radius of 2.
"""

from typing import Callable, TypeAlias

import numba

KernelFunction: TypeAlias = Callable[[float], float]

SUPPORT_RADIUS = 2.0


@numba.njit(nogil=True, fastmath=False)
def cubic_kernel(distance: float) -> float:
    """Cubic convolution weight (Catmull-Rom, a = -0.5).

    Parameters:
        distance: Signed distance from the sample in sample units.

    Returns:
        The interpolating cubic convolution weight.

    Note:
        Compiled without fastmath. A NaN distance fails every comparison
        and returns 0.
    """
    abs_x = abs(distance)
    if abs_x <= 1.0:
        x2 = abs_x * abs_x
        return x2 * (1.5 * abs_x - 2.5) + 1.0
    elif abs_x <= 2.0:
        x2 = abs_x * abs_x
        return x2 * (-0.5 * abs_x + 2.5) - 4.0 * abs_x + 2.0
    else:
        return 0.0


@numba.njit(nogil=True, fastmath=False)
def _truncated_cube(value: float) -> float:
    if value <= 0.0:
        return 0.0
    return value * value * value


@numba.njit(nogil=True, fastmath=False)
def cubic_spline_kernel(distance: float) -> float:
    """Normalized cubic B-spline weight.

    Parameters:
        distance: Non-negative distance from the sample in sample units.

    Returns:
        The smoothing cubic B-spline weight.

    Note:
        No absolute value is taken. Callers must pass the absolute distance.
    """
    if distance > SUPPORT_RADIUS:
        return 0.0

    a = _truncated_cube(distance + 2.0)
    b = _truncated_cube(distance + 1.0)
    c = _truncated_cube(distance)
    d = _truncated_cube(distance - 1.0)

    return (a - 4.0 * b + 6.0 * c - 4.0 * d) / 6.0
