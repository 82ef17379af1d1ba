# Copyright 2024-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Utility functions used by DSP blocks."""

import numpy as np

FLT_MIN = np.finfo(float).tiny


class ZeroVarianceWarning(Warning):
    """A warning for when a signal has no spread and cannot be normalised."""

    pass


def db(input):
    """Convert an amplitude to decibels (20*log10(abs(x)))."""
    out = 20 * np.log10(np.abs(input) + FLT_MIN)
    return out


def round_half_up(x):
    """Round to the nearest integer, with halves rounded towards +inf.

    numpy rounds halves to even, this matches the usual arithmetic
    rounding for the non-negative values produced by the scaler.
    """
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5).astype(np.int64)


def check_band(fs: float, low_cutoff: float, high_cutoff: float):
    """Check that a pair of band edges fits below the Nyquist frequency.

    Raises
    ------
    ValueError
        If any frequency is inf, nan or not positive, if
        ``low_cutoff >= high_cutoff`` or if ``high_cutoff >= fs/2``.
    """
    if not np.all(np.isfinite([fs, low_cutoff, high_cutoff])):
        raise ValueError("Frequencies must be finite.")
    if fs <= 0:
        raise ValueError("Sampling frequency must be positive.")
    if low_cutoff <= 0:
        raise ValueError("Low cutoff frequency must be positive.")
    if high_cutoff >= fs / 2:
        raise ValueError("High cutoff frequency must be less than half the sampling frequency.")
    if low_cutoff >= high_cutoff:
        raise ValueError("Low cutoff must be less than high cutoff frequency.")
