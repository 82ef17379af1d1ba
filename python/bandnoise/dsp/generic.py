# Copyright 2024-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""The generic DSP block."""

import numpy as np
from docstring_inheritance import NumpyDocstringInheritanceInitMeta


class dsp_block(metaclass=NumpyDocstringInheritanceInitMeta):
    """
    Generic DSP block, all blocks should inherit from this class and
    implement it's methods.

    By using the metaclass NumpyDocstringInheritanceInitMeta, parameter
    and attribute documentation can be inherited by the child classes.

    Parameters
    ----------
    fs : float
        Sampling frequency in Hz.

    Attributes
    ----------
    fs : float
        Sampling frequency in Hz.
    """

    def __init__(self, fs):
        self.fs = fs
        return

    def process(self, sample: float) -> float:
        """
        Take one new sample and give it back. Do no processing for the
        generic block.

        Parameters
        ----------
        sample : float
            The input sample to be processed.

        Returns
        -------
        float
            The processed sample.
        """
        raise NotImplementedError

    def process_signal(self, signal: np.ndarray) -> np.ndarray:
        """
        Take a whole signal and return the processed signal.

        For the generic implementation, just call process for each
        sample in turn. The samples are passed to process as Python
        floats.

        Parameters
        ----------
        signal : np.ndarray
            1-D array of input samples, in time order.

        Returns
        -------
        np.ndarray
            1-D array of processed samples, the same length as the
            input.
        """
        process = self.process
        output = [process(x) for x in np.asarray(signal, dtype=np.float64).tolist()]

        return np.array(output, dtype=np.float64)

