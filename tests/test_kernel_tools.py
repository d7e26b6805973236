import numpy as np
import pytest
from numpy.testing import assert_allclose

from resampling_kernels import Kernel
from resampling_kernels.kernel_tools import clamp_index, kernel_weights, split_index


@pytest.mark.parametrize("idx, expected", [(-3, 0), (0, 0), (4, 4), (9, 9), (12, 9)])
def test_clamp_index(idx, expected):
    assert clamp_index(idx, 9) == expected


@pytest.mark.parametrize("idx, expected", [(2.25, (2, 0.25)), (0.0, (0, 0.0)), (-0.75, (-1, 0.25))])
def test_split_index(idx, expected):
    int_idx, frac_idx = split_index(idx)
    assert int_idx == expected[0]
    assert frac_idx == pytest.approx(expected[1])


@pytest.mark.parametrize("kernel", list(Kernel))
@pytest.mark.parametrize("phase", [0.0, 0.1, 0.5, 0.9])
def test_kernel_weights_sum_to_one(kernel, phase):
    weights = kernel_weights(kernel.function, phase, kernel.support_radius)
    assert weights.shape == (4,)
    assert weights.sum() == pytest.approx(1.0, abs=1e-12)


def test_kernel_weights_at_integer_phase():
    weights = kernel_weights(Kernel.CUBIC.function, 0.0, 2.0)
    assert_allclose(weights, [0.0, 1.0, 0.0, 0.0], atol=1e-15)

    weights = kernel_weights(Kernel.CUBICSPLINE.function, 0.0, 2.0)
    assert_allclose(weights, [1 / 6, 2 / 3, 1 / 6, 0.0], atol=1e-15)


def test_kernel_weights_half_phase_is_symmetric():
    weights = kernel_weights(Kernel.CUBIC.function, 0.5, 2.0)
    assert_allclose(weights, weights[::-1])
    assert_allclose(weights, [-0.0625, 0.5625, 0.5625, -0.0625])
