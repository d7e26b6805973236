"""Submodule for separable resampling of arrays onto new grid sizes."""

import logging
import operator

import numba
import numpy as np
import numpy.typing as npt

from .kernel_tools import clamp_index
from .kernel_types import Kernel
from .kernels import KernelFunction

logger = logging.getLogger(__name__)


@numba.njit(nogil=True)
def compute_weight_table(
    src_size: int, dst_size: int, kernel_fn: KernelFunction, radius: float
) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.float64]]:
    """Compute source indices and normalized weights for every output sample.

    Sample i of a grid of N samples sits at (i + 0.5) / N in the unit domain.
    When downsampling the kernel is widened by src_size / dst_size.

    Parameters:
        src_size: Number of source samples.
        dst_size: Number of destination samples.
        kernel_fn: Jitted weight function taking a non-negative distance.
        radius: Support radius of the kernel.

    Returns:
        (dst_size, taps) arrays of edge-clamped source indices and weights.
    """
    ratio = src_size / dst_size
    stretch = max(ratio, 1.0)
    support = radius * stretch
    taps = int(np.ceil(2.0 * support)) + 1
    max_idx = src_size - 1

    indices = np.empty((dst_size, taps), dtype=np.int64)
    weights = np.empty((dst_size, taps), dtype=np.float64)
    for j in range(dst_size):
        center = (j + 0.5) * ratio - 0.5
        first = int(np.floor(center - support)) + 1
        total = 0.0
        for k in range(taps):
            i = first + k
            w = kernel_fn(abs(i - center) / stretch)
            indices[j, k] = clamp_index(i, max_idx)
            weights[j, k] = w
            total += w
        if total != 0.0:
            for k in range(taps):
                weights[j, k] /= total
    return indices, weights


@numba.njit(nogil=True, fastmath=True)
def apply_weight_table(
    data: npt.NDArray[np.float64],
    indices: npt.NDArray[np.int64],
    weights: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """Resample each row of a 2D array using a precomputed weight table."""
    rows = data.shape[0]
    dst_size, taps = weights.shape
    out = np.zeros((rows, dst_size), dtype=np.float64)
    for r in range(rows):
        for j in range(dst_size):
            acc = 0.0
            for k in range(taps):
                acc += weights[j, k] * data[r, indices[j, k]]
            out[r, j] = acc
    return out


def resample_axis(
    array: npt.ArrayLike,
    size: int,
    axis: int = -1,
    kernel: Kernel | str = Kernel.CUBIC,
) -> npt.NDArray[np.float64]:
    """Resample an array to a new number of samples along one axis.

    Parameters:
        array: Input samples. Any number of dimensions >= 1.
        size: Number of output samples along axis.
        axis: Axis to resample.
        kernel: Kernel, or kernel name, used to compute the weights.

    Returns:
        A float64 array with the size of axis replaced by size.
    """
    data = np.asarray(array, dtype=np.float64)
    if data.ndim == 0:
        raise ValueError("Cannot resample a zero-dimensional array.")
    try:
        size = operator.index(size)
    except TypeError:
        raise ValueError(f"Output size must be an integer, got {size!r}.") from None
    if size <= 0:
        raise ValueError(f"Output size must be positive, got {size}.")
    kernel = Kernel.from_name(kernel)

    moved = np.moveaxis(data, axis, -1)
    src_size = moved.shape[-1]
    if src_size == 0:
        raise ValueError("Cannot resample an axis with no samples.")

    logger.debug(
        "Resampling axis %d from %d to %d samples with %s kernel",
        axis, src_size, size, kernel,
    )
    indices, weights = compute_weight_table(
        src_size, size, kernel.function, kernel.support_radius
    )
    rows = np.ascontiguousarray(moved.reshape(-1, src_size))
    out = apply_weight_table(rows, indices, weights)
    out = out.reshape(moved.shape[:-1] + (size,))
    return np.moveaxis(out, -1, axis)


def resample(
    array: npt.ArrayLike,
    shape: tuple[int, ...],
    kernel: Kernel | str = Kernel.CUBIC,
) -> npt.NDArray[np.float64]:
    """Resample an array to a new shape, one axis at a time.

    Parameters:
        array: Input samples.
        shape: Output shape, one entry per input dimension.
        kernel: Kernel, or kernel name, used to compute the weights.

    Returns:
        A float64 array of the requested shape.
    """
    data = np.asarray(array, dtype=np.float64)
    shape = tuple(shape)
    if len(shape) != data.ndim:
        raise ValueError(
            f"Output shape {shape} does not match array dimensions {data.ndim}."
        )
    kernel = Kernel.from_name(kernel)

    resampled = False
    for axis, size in enumerate(shape):
        if size != data.shape[axis]:
            data = resample_axis(data, size, axis=axis, kernel=kernel)
            resampled = True
    if not resampled:
        data = data.copy()
    return data
