# Copyright 2024-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Signal generator DSP utilities."""

from typing import Optional

import numpy as np

from bandnoise.dsp import utils as utils


def gaussian_noise(count: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generate standard normal white noise using the Box-Muller
    transform.

    Each output sample takes two uniform draws ``u1, u2`` from the
    random source and returns ``sqrt(-2*ln(u1)) * cos(2*pi*u2)``. The
    paired sine output of the transform is not used.

    Parameters
    ----------
    count : int
        The number of samples to generate.
    rng : np.random.Generator, optional
        The source of uniform random numbers. If None, a new unseeded
        generator is created. Pass a seeded generator for reproducible
        output.

    Returns
    -------
    np.ndarray
        1-D array of ``count`` samples with mean 0 and variance 1.

    Raises
    ------
    ValueError
        If count is negative.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if rng is None:
        rng = np.random.default_rng()

    # draws are interleaved so sample n consumes draws 2n and 2n+1
    u = rng.random((count, 2))
    u1 = u[:, 0]
    u2 = u[:, 1]

    # rng.random is on [0, 1), log(0) diverges
    u1 = np.where(u1 == 0.0, utils.FLT_MIN, u1)

    signal = np.sqrt(-2 * np.log(u1)) * np.cos(2 * np.pi * u2)
    return signal
