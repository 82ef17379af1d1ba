# Copyright 2024-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
import numpy as np

from . import biquad as bq
from bandnoise.dsp import generic as dspg

# extra samples generated ahead of the output and then discarded, so
# the zero initial state of the cascade has settled. This is a fixed
# heuristic, it does not scale with the filter order or band.
TRANSIENT_SAMPLES = 500


class cascaded_biquads(dspg.dsp_block):
    """A class representing a cascade of identical biquad filters.

    The output of each biquad is the input of the next, so an order N
    cascade applies the same second order section N times in series.

    Parameters
    ----------
    coeffs : list[float]
        Normalised coefficients shared by every biquad in the cascade,
        in the form `[b0, b1, b2, -a1, -a2]/a0`.
    order : int
        The number of biquads in the cascade.

    Attributes
    ----------
    biquads : list
        List of biquad objects representing each biquad in the cascade.

    """

    def __init__(self, coeffs: list[float], fs: float, order: int):
        super().__init__(fs)
        if order < 1:
            raise ValueError("order must be at least 1")
        self.order = order
        self.biquads = [bq.biquad(coeffs, fs) for _ in range(order)]

    def process(self, sample: float) -> float:
        """Process the input sample through the cascaded biquads using
        floating point maths.

        Parameters
        ----------
        sample : float
            The input sample to be processed.

        Returns
        -------
        float
            The processed output sample.
        """
        y = sample
        for biquad in self.biquads:
            y = biquad.process(y)

        return y

    def process_signal(self, signal: np.ndarray) -> np.ndarray:
        """
        Take a whole signal and return the filtered signal.

        The whole signal is run through each biquad in turn, with every
        biquad starting from zero state.

        Parameters
        ----------
        signal : np.ndarray
            1-D array of input samples, in time order.

        Returns
        -------
        np.ndarray
            1-D array of filtered samples, the same length as the
            input.
        """
        y = np.asarray(signal, dtype=np.float64)
        for biquad in self.biquads:
            biquad.reset_state()
            y = biquad.process_signal(y)

        return y

    def freq_response(self, nfft=1024):
        """
        Calculate the frequency response of the cascaded biquad filters.

        The stages are combined by multiplying the complex frequency
        responses of each biquad.

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
        f, h_all = self.biquads[0].freq_response(nfft)
        for biquad in self.biquads[1:]:
            _, h = biquad.freq_response(nfft)
            h_all *= h

        return f, h_all

    def reset_state(self):
        """
        Reset the biquad saved states to zero.
        """
        for biquad in self.biquads:
            biquad.reset_state()

        return


class bandpass_cascade(cascaded_biquads):
    """A bandpass filter made from a cascade of identical biquads.

    Parameters
    ----------
    low_cutoff : float
        The lower edge of the band in Hz.
    high_cutoff : float
        The upper edge of the band in Hz.
    """

    def __init__(self, fs, low_cutoff, high_cutoff, order):
        coeffs = bq.make_biquad_bandnoise(fs, low_cutoff, high_cutoff)
        super().__init__(coeffs, fs, order)
        self.low_cutoff = low_cutoff
        self.high_cutoff = high_cutoff


def bandpass_filter(signal, fs, low_cutoff, high_cutoff, order=1):
    """Filter a signal with an order N cascade of bandpass biquads.

    Returns a new array the same length as signal.
    """
    filt = bandpass_cascade(fs, low_cutoff, high_cutoff, order)
    return filt.process_signal(signal)
