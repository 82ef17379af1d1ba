# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""
The band-limited noise Python library.

For generating bandpass filtered Gaussian noise, scaled to a bounded
integer range, and exporting it as text.
"""

from importlib import metadata as _metadata

__version__ = _metadata.version("bandnoise")

from bandnoise.dsp.band_noise import band_noise, generate_noise, TRANSIENT_SAMPLES
from bandnoise.models.band_noise import BandNoiseParameters, BandpassParameters
from bandnoise.export import save_to_file, load_from_file, SaveError
