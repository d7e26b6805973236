"""Submodule defining kernel-weighted interpolation of gridded data."""

import numba
import numpy.typing as npt

from .kernel_tools import clamp_index, kernel_weights, split_index
from .kernels import KernelFunction


@numba.njit(nogil=True, fastmath=True)
def interpolate_1d(
    idx: float,
    array: npt.NDArray[float],
    kernel_fn: KernelFunction,
    radius: float,
) -> float:
    """Perform kernel interpolation on a 1D array.

    Parameters:
        idx: The floating-point index to interpolate at.
        array: 1D array of values to interpolate within.
        kernel_fn: Jitted weight function taking a non-negative distance.
        radius: Support radius of the kernel.

    Returns:
        The interpolated value as a float.
    """
    I0, f0 = split_index(idx)
    w0 = kernel_weights(kernel_fn, f0, radius)
    start = I0 + 1 - w0.size // 2
    max_idx = array.shape[0] - 1

    value = 0.0
    total = 0.0
    for k in range(w0.size):
        i = clamp_index(start + k, max_idx)
        value += w0[k] * array[i]
        total += w0[k]

    if total != 0.0:
        value /= total
    return value


@numba.njit(nogil=True, fastmath=True)
def interpolate_2d(
    idx: tuple[float, float],
    array: npt.NDArray[float],
    kernel_fn: KernelFunction,
    radius: float,
) -> float:
    """Perform separable kernel interpolation on a 2D array.

    Parameters:
        idx: The floating-point indices.
        array: 2D array of values to interpolate within.
        kernel_fn: Jitted weight function taking a non-negative distance.
        radius: Support radius of the kernel.

    Returns:
        The interpolated value as a float.
    """
    I0, f0 = split_index(idx[0])
    I1, f1 = split_index(idx[1])
    w0 = kernel_weights(kernel_fn, f0, radius)
    w1 = kernel_weights(kernel_fn, f1, radius)
    start0 = I0 + 1 - w0.size // 2
    start1 = I1 + 1 - w1.size // 2
    max0 = array.shape[0] - 1
    max1 = array.shape[1] - 1

    value = 0.0
    total = 0.0
    for k0 in range(w0.size):
        i0 = clamp_index(start0 + k0, max0)
        for k1 in range(w1.size):
            i1 = clamp_index(start1 + k1, max1)
            w = w0[k0] * w1[k1]
            value += w * array[i0, i1]
            total += w

    if total != 0.0:
        value /= total
    return value
