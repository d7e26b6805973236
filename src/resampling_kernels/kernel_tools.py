"""A submodule with utility functions for kernel operations."""

import numba
import numpy as np
import numpy.typing as npt

from .kernels import KernelFunction


@numba.njit(nogil=True, fastmath=True)
def clamp_index(idx: int, max_idx: int) -> int:
    """Clamp an integer index into [0, max_idx]."""
    return min(max_idx, max(0, idx))


@numba.njit(nogil=True, fastmath=True)
def split_index(idx: float) -> tuple[int, float]:
    """Split a single index into its integer and fractional parts.

    Parameters:
        idx: The index to split.
    Returns:
        A tuple containing the integer part and the fractional part.

    """
    int_idx = int(np.floor(idx))
    frac_idx = idx - int_idx
    return int_idx, frac_idx


@numba.njit(nogil=True)
def kernel_weights(
    kernel_fn: KernelFunction, phase: float, radius: float
) -> npt.NDArray[np.float64]:
    """Compute the weights of the integer taps around a fractional position.

    Parameters:
        kernel_fn: Jitted weight function taking a non-negative distance.
        phase: Fractional part of the position, in [0, 1).
        radius: Support radius of the kernel.

    Returns:
        Array of 2 * ceil(radius) weights for the taps at offsets
        1 - ceil(radius), ..., ceil(radius) relative to the integer part.
    """
    half = int(np.ceil(radius))
    weights = np.empty(2 * half, dtype=np.float64)
    for k in range(2 * half):
        offset = k + 1 - half
        weights[k] = kernel_fn(abs(offset - phase))
    return weights
