# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""The pydantic models of the noise generator configuration."""

from .band_noise import (
    BandpassParameters,
    BandNoiseParameters,
    load_parameters,
    read_parameter_file,
)
