# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
import warnings

import pytest
import numpy as np

import bandnoise.dsp.scale as scale
import bandnoise.dsp.utils as utils


@pytest.mark.parametrize("seed", [1, 2, 3])
@pytest.mark.parametrize("amplitude", [1e-9, 1, 1e9])
def test_range(seed, amplitude):
    signal = amplitude * np.random.default_rng(seed).standard_normal(5000)
    output = scale.normalize_and_scale(signal)

    assert len(output) == len(signal)
    assert np.issubdtype(output.dtype, np.integer)
    assert np.all(output >= 0)
    assert np.all(output <= 255)


def test_centred_signal():
    signal = 127.5 + 0.01 * np.random.default_rng(5).standard_normal(10000)
    output = scale.normalize_and_scale(signal)

    assert abs(np.mean(output) - 127.5) < 2
    assert 120 <= np.median(output) <= 135
    # +-3 sigma covers the full range, so roughly 68 % of samples are
    # within a sixth of it
    assert np.mean(np.abs(output - 127.5) <= 127.5 / 3) > 0.6


def test_clamping():
    signal = np.zeros(1000)
    signal[-1] = 1000.0
    output = scale.normalize_and_scale(signal)
    assert output[-1] == 255
    assert np.all(output[:-1] == output[0])

    signal[-1] = -1000.0
    output = scale.normalize_and_scale(signal)
    assert output[-1] == 0


def test_midpoint_rounds_up():
    output = scale.normalize_and_scale(np.array([-1.0, 0.0, 1.0]))
    assert output[1] == 128


def test_full_scale():
    # with n_sigma = 1, +-1 sigma hits the ends of the range exactly
    output = scale.normalize_and_scale(np.array([-1.0, 1.0]), n_sigma=1)
    np.testing.assert_array_equal(output, [0, 255])


@pytest.mark.parametrize("out_min, out_max", [[0, 255], [-128, 127], [0, 65535], [10, 11]])
def test_output_range(out_min, out_max):
    signal = np.random.default_rng(8).standard_normal(100000)
    output = scale.normalize_and_scale(signal, out_min, out_max)

    assert np.min(output) == out_min
    assert np.max(output) == out_max


@pytest.mark.parametrize("value", [5.0, 0.0, -3.0, 0.1])
def test_constant_signal(value):
    signal = np.full(100, value)
    with pytest.warns(utils.ZeroVarianceWarning):
        output = scale.normalize_and_scale(signal)

    np.testing.assert_array_equal(output, np.full(100, 128))


def test_single_sample():
    with pytest.warns(utils.ZeroVarianceWarning):
        output = scale.normalize_and_scale(np.array([3.0]))
    np.testing.assert_array_equal(output, [128])


def test_tiny_variance():
    signal = np.zeros(10)
    signal[0] = 1e-320
    output = scale.normalize_and_scale(signal)
    assert np.all(output >= 0)
    assert np.all(output <= 255)


@pytest.mark.parametrize("signal", [np.array([]), np.array([1.0, np.nan]), np.array([np.inf, 0.0])])
def test_bad_signal(signal):
    with pytest.raises(ValueError):
        scale.normalize_and_scale(signal)


def test_bad_range():
    with pytest.raises(ValueError):
        scale.normalize_and_scale(np.array([1.0, 2.0]), 10, 10)


@pytest.mark.parametrize("amplitude", [1e150, 1e200, 1e300])
def test_huge_samples(amplitude):
    # squaring these overflows, the result must match the unit scale signal
    signal = np.array([-1.0, 0.0, 1.0, 0.5, -0.25])
    expected = scale.normalize_and_scale(signal)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        output = scale.normalize_and_scale(amplitude * signal)

    np.testing.assert_array_equal(output, expected)
    assert output[0] < 128 < output[2]


def test_huge_constant():
    with pytest.warns(utils.ZeroVarianceWarning):
        output = scale.normalize_and_scale(np.full(4, 1e308))
    np.testing.assert_array_equal(output, np.full(4, 128))
