# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Bandpass filtered Gaussian noise, scaled to a bounded integer range."""

from typing import Optional

import numpy as np

from bandnoise.dsp import signal_gen as gen
from bandnoise.dsp import cascaded_biquads as cbq
from bandnoise.dsp import scale as scale
from bandnoise.dsp.cascaded_biquads import TRANSIENT_SAMPLES
from bandnoise.models.band_noise import BandNoiseParameters


class band_noise:
    """
    A band-limited noise generator.

    Gaussian white noise is generated, filtered by a cascade of
    identical bandpass biquads, the first ``transient`` samples are
    dropped while the filter settles, and the rest are scaled to
    integers in ``[out_min, out_max]``.

    All the parameters are validated when the generator is created, so
    an invalid configuration fails before any random numbers are drawn.

    Parameters
    ----------
    params : BandNoiseParameters
        The generator configuration.

    Attributes
    ----------
    params : BandNoiseParameters
        The generator configuration.
    filter : cbq.bandpass_cascade
        The bandpass filter.
    raw_scaled : np.ndarray or None
        The unfiltered noise from the last call to generate, scaled to
        the output range. Only kept for inspection.
    """

    def __init__(self, params: BandNoiseParameters):
        self.params = params
        self.filter = cbq.bandpass_cascade(
            params.fs, params.low_cutoff, params.high_cutoff, params.order
        )
        self.raw_scaled = None

    def generate(self, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        """
        Generate a block of band-limited noise.

        Parameters
        ----------
        rng : np.random.Generator, optional
            The random source. If None, a generator seeded with
            ``params.seed`` is created.

        Returns
        -------
        np.ndarray
            1-D int64 array of ``params.length`` samples in
            ``[out_min, out_max]``.
        """
        p = self.params
        if rng is None:
            rng = np.random.default_rng(p.seed)

        noise = gen.gaussian_noise(p.length + p.transient, rng)
        self.raw_scaled = scale.normalize_and_scale(noise, p.out_min, p.out_max)

        filtered = self.filter.process_signal(noise)
        trimmed = filtered[p.transient :]

        return scale.normalize_and_scale(trimmed, p.out_min, p.out_max)


def generate_noise(
    length: int = 1000,
    fs: float = 44100.0,
    low_cutoff: float = 20.0,
    high_cutoff: float = 2000.0,
    order: int = 2,
    rng: Optional[np.random.Generator] = None,
    **kwargs,
) -> np.ndarray:
    """
    Generate bandpass filtered Gaussian white noise.

    Parameters
    ----------
    length : int, optional
        Number of samples to generate, by default 1000.
    fs : float, optional
        Sampling frequency in Hz, by default 44100.0.
    low_cutoff : float, optional
        Lower cutoff frequency in Hz, by default 20.0.
    high_cutoff : float, optional
        Higher cutoff frequency in Hz, by default 2000.0.
    order : int, optional
        Number of cascaded biquads, by default 2.
    rng : np.random.Generator, optional
        The random source, by default a new unseeded generator.
    **kwargs
        Any other field of :py:class:`BandNoiseParameters`, such as
        ``transient``, ``out_min``, ``out_max`` or ``seed``.

    Returns
    -------
    np.ndarray
        1-D int64 array of ``length`` samples between 0 and 255, or
        ``out_min`` and ``out_max`` if given.

    Raises
    ------
    pydantic.ValidationError
        If the configuration is invalid, for example
        ``high_cutoff >= fs/2`` or ``low_cutoff >= high_cutoff``.
    """
    params = BandNoiseParameters(
        length=length,
        fs=fs,
        low_cutoff=low_cutoff,
        high_cutoff=high_cutoff,
        order=order,
        **kwargs,
    )
    return band_noise(params).generate(rng)
