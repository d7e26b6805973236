"""Cubic interpolation kernels for separable image resampling."""

from .interpolation import interpolate_1d, interpolate_2d
from .kernel_tools import kernel_weights
from .kernel_types import Kernel, KernelFunction
from .kernels import SUPPORT_RADIUS, cubic_kernel, cubic_spline_kernel
from .resample import resample, resample_axis

__all__ = [
    "Kernel",
    "KernelFunction",
    "SUPPORT_RADIUS",
    "cubic_kernel",
    "cubic_spline_kernel",
    "kernel_weights",
    "interpolate_1d",
    "interpolate_2d",
    "resample",
    "resample_axis",
]
