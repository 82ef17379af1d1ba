# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Normalise a real valued signal and scale it to a bounded integer range."""

import warnings

import numpy as np

from bandnoise.dsp import utils as utils

# number of standard deviations either side of the mean mapped to the
# full output range
N_SIGMA = 3


def _mean_std(signal: np.ndarray) -> tuple[float, float]:
    """Population mean and standard deviation (divisor N)."""
    mean = np.mean(signal)
    variance = np.mean((signal - mean) ** 2)
    return mean, np.sqrt(variance)


def normalize_and_scale(
    signal: np.ndarray, out_min: int = 0, out_max: int = 255, n_sigma: float = N_SIGMA
) -> np.ndarray:
    """
    Normalise a signal by its mean and standard deviation, then scale
    and clamp it to integers in ``[out_min, out_max]``.

    Each sample is mapped to
    ``round((x - mean) / (n_sigma*std) * half + mid)``, where ``mid`` and
    ``half`` are the centre and half width of the output range. Samples
    further than ``n_sigma`` standard deviations from the mean saturate
    at the ends of the range.

    The standard deviation is the population value (divisor N).

    Parameters
    ----------
    signal : np.ndarray
        1-D array of real valued samples.
    out_min : int, optional
        The lowest output value, by default 0.
    out_max : int, optional
        The highest output value, by default 255.
    n_sigma : float, optional
        The number of standard deviations mapped to each end of the
        output range, by default 3.

    Returns
    -------
    np.ndarray
        1-D int64 array the same length as signal.

    Raises
    ------
    ValueError
        If the signal is empty, contains inf or nan, or the output range
        is empty.

    Warns
    -----
    utils.ZeroVarianceWarning
        If every sample is equal. All samples are then mapped to the
        rounded centre of the output range (128 for 0 to 255).
    """
    signal = np.asarray(signal, dtype=np.float64)
    if signal.size == 0:
        raise ValueError("Cannot normalise an empty signal")
    if not np.all(np.isfinite(signal)):
        raise ValueError("Cannot normalise a signal with non finite samples")
    if out_max <= out_min:
        raise ValueError("out_max must be greater than out_min")
    if n_sigma <= 0:
        raise ValueError("n_sigma must be positive")

    mid = (out_min + out_max) / 2
    half = (out_max - out_min) / 2

    with np.errstate(over="ignore", invalid="ignore"):
        mean, std_dev = _mean_std(signal)
        is_constant = np.ptp(signal) == 0

    if not (np.isfinite(mean) and np.isfinite(std_dev)):
        # very large samples overflow the squares, the mapping does not
        # depend on the scale of the signal
        signal = signal / np.max(np.abs(signal))
        mean, std_dev = _mean_std(signal)

    # a constant signal can still give a tiny non zero variance from
    # rounding in the mean
    if std_dev == 0 or is_constant:
        warnings.warn(
            "Signal has zero variance, mapping all samples to the centre of the output range",
            utils.ZeroVarianceWarning,
        )
        return np.full(signal.shape, utils.round_half_up(mid), dtype=np.int64)

    # clamp before rounding, a denormal std_dev can push samples to inf
    with np.errstate(over="ignore"):
        scaled = (signal - mean) / (n_sigma * std_dev) * half + mid
    scaled = np.clip(scaled, out_min, out_max)
    return utils.round_half_up(scaled)
