"""Submodule enumerating the available resampling kernels."""

import enum
from typing import Self

from .kernels import (
    SUPPORT_RADIUS,
    KernelFunction,
    cubic_kernel,
    cubic_spline_kernel,
)


@enum.unique
class Kernel(enum.StrEnum):
    """Enumeration of the interpolation kernels."""

    CUBIC = "cubic"
    CUBICSPLINE = "cubicspline"

    @property
    def function(self) -> KernelFunction:
        """Compiled weight function, suitable for passing to jitted loops."""
        match self:
            case Kernel.CUBIC:
                return cubic_kernel
            case Kernel.CUBICSPLINE:
                return cubic_spline_kernel

    @property
    def support_radius(self) -> float:
        """Distance beyond which the weight is zero."""
        return SUPPORT_RADIUS

    @property
    def is_interpolating(self) -> bool:
        """Whether the kernel reproduces samples at integer positions."""
        return self is Kernel.CUBIC

    def weight(self, distance: float) -> float:
        """Evaluate the kernel at a signed distance."""
        return self.function(abs(distance))

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Look up a kernel by name, case-insensitively."""
        try:
            return cls(name.lower())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Unknown kernel '{name}'. Expected one of: {', '.join(cls)}."
            ) from None
