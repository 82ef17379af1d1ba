# Copyright 2024-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""The biquad DSP block."""

import numpy as np
import numpy.typing as npt
import scipy.signal as spsig

from bandnoise.dsp import utils as utils
from bandnoise.dsp import generic as dspg


class biquad(dspg.dsp_block):
    """
    A second order biquadratic filter instance.

    This implements a direct form 1 biquad filter, using the
    coefficients provided at initialisation:
    `a0*y[n] = b0*x[n] + b1*x[n-1] + b2*x[n-2] - a1*y[n-1] - a2*y[n-2]`

    For efficiency the biquad coefficients are normalised by a0 and the
    output `a` coefficients multiplied by -1.

    The filter states start at zero, so the first two outputs are
    `y[0] = b0*x[0]` and `y[1] = b0*x[1] + b1*x[0] - a1*y[0]`.

    Parameters
    ----------
    coeffs : list[float]
        List of normalised biquad coefficients in the form
        `[b0, b1, b2, -a1, -a2]/a0`

    Attributes
    ----------
    coeffs : list[float]
        List of normalised float biquad coefficients in the form
        `[b0, b1, b2, -a1, -a2]/a0`.

    """

    def __init__(self, coeffs: list[float], fs: float):
        super().__init__(fs)

        # coeffs should be in the form [b0 b1 b2 -a1 -a2], and
        # normalized by a0
        self.coeffs = _check_coeffs(coeffs)

        self._x1 = 0.0
        self._x2 = 0.0
        self._y1 = 0.0
        self._y2 = 0.0

    def process(self, sample: float) -> float:
        """
        Filter a single sample using direct form 1 biquad using floating
        point maths.

        """
        y = (
            self.coeffs[0] * sample
            + self.coeffs[1] * self._x1
            + self.coeffs[2] * self._x2
            + self.coeffs[3] * self._y1
            + self.coeffs[4] * self._y2
        )

        self._x2 = self._x1
        self._x1 = sample
        self._y2 = self._y1
        self._y1 = y

        return y

    def freq_response(
        self, nfft: int = 1024
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]:
        """
        Calculate the frequency response of the biquad filter.

        The biquad filter coefficients are returned to numerator and
        denominator coefficients, before being passed to
        `scipy.signal.freqz` to calculate the frequency response.

        Parameters
        ----------
        nfft : int
            The number of points to compute in the frequency response,
            by default 1024.

        Returns
        -------
        tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]
            A tuple containing the frequency vector and the complex
            frequency response.

        """
        b, a = self.ba()
        f, h = spsig.freqz(b, a, worN=nfft, fs=self.fs)  # type: ignore

        return f, h

    def ba(self) -> tuple[list[float], list[float]]:
        """Return the coefficients as numerator and denominator lists,
        in the form used by `scipy.signal`.
        """
        b = [self.coeffs[0], self.coeffs[1], self.coeffs[2]]
        a = [1.0, -self.coeffs[3], -self.coeffs[4]]
        return b, a

    def reset_state(self):
        """Reset the biquad saved states to zero."""
        self._x1 = 0.0
        self._x2 = 0.0
        self._y1 = 0.0
        self._y2 = 0.0


def biquad_bandnoise(fs: float, low_cutoff: float, high_cutoff: float) -> biquad:
    """Return a biquad object with bandpass coefficients for the band
    between low_cutoff and high_cutoff.
    """
    coeffs = make_biquad_bandnoise(fs, low_cutoff, high_cutoff)
    return biquad(coeffs, fs)


def _normalise_biquad(coeffs: list[float]) -> list[float]:
    """
    Normalise biquad coefficients by dividing by a0 and making a1 and a2
    negative.

    Expected input format: [b0, b1, b2, a0, a1, a2]
    Expected output format: [b0, b1, b2, -a1, -a2]/a0

    """
    if len(coeffs) != 6:
        raise ValueError("expected list of 6 biquad coefficients")
    # divide by a0, make a1 and a2 negative
    coeffs = [
        coeffs[0] / coeffs[3],
        coeffs[1] / coeffs[3],
        coeffs[2] / coeffs[3],
        -(coeffs[4] / coeffs[3]),
        -(coeffs[5] / coeffs[3]),
    ]

    return coeffs


def _check_coeffs(coeffs: list[float]) -> list[float]:
    """
    Check the biquad coefficients are finite and the poles are inside
    the unit circle.

    """
    if len(coeffs) != 5:
        raise ValueError("coeffs should be in the form [b0 b1 b2 -a1 -a2]")
    coeffs = [float(c) for c in coeffs]
    if not np.all(np.isfinite(coeffs)):
        raise ValueError("Filter coefficients must be finite")

    # check filter is stable
    poles = np.roots([1, -coeffs[3], -coeffs[4]])
    if np.any(np.abs(poles) >= 1):
        raise ValueError("Poles lie outside the unit circle, the filter is unstable")

    return coeffs


def make_biquad_bandnoise(fs: float, low_cutoff: float, high_cutoff: float) -> list[float]:
    """Create coefficients for a biquad bandpass filter between two band
    edges.

    The centre frequency is the midpoint of the band edges in angular
    frequency, and the bandwidth is their difference:

    `alpha = sin(wc) * sin(ln(2)/2 * bw * wc / sin(wc))`

    This has the same structure as the constant 0 dB peak gain bandpass,
    so the gain at the centre frequency is unity.

    Parameters
    ----------
    fs : float
        The sampling frequency in Hz.
    low_cutoff : float
        The lower edge of the band in Hz.
    high_cutoff : float
        The upper edge of the band in Hz.

    Returns
    -------
    list[float]
        The coefficients of the biquad filter in the order
        [b0, b1, b2, -a1, -a2]. The coefficients are normalised by a0
        such that ``a0 = 1``.

    Raises
    ------
    ValueError
        If the band edges are not ordered, not positive, or if
        high_cutoff is not less than fs/2.

    """
    utils.check_band(fs, low_cutoff, high_cutoff)

    w1 = 2 * np.pi * low_cutoff / fs
    w2 = 2 * np.pi * high_cutoff / fs

    wc = (w1 + w2) / 2
    bw = w2 - w1

    sin_wc = np.sin(wc)
    if sin_wc == 0:
        raise ValueError("Centre frequency must not be a multiple of fs/2")

    alpha = sin_wc * np.sin(np.log(2) / 2 * bw * wc / sin_wc)
    cosw0 = np.cos(wc)

    b0 = alpha
    b1 = +0.0
    b2 = -alpha
    a0 = +1.0 + alpha
    a1 = -2.0 * cosw0
    a2 = +1.0 - alpha

    coeffs = [b0, b1, b2, a0, a1, a2]
    coeffs = _normalise_biquad(coeffs)

    return [float(c) for c in coeffs]
