# Copyright 2025-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Shared pydantic fields for the noise generator models."""

from functools import partial

from pydantic import Field

from bandnoise.dsp.cascaded_biquads import TRANSIENT_SAMPLES


DEFAULT_FS = partial(
    Field, default=44100.0, gt=0, allow_inf_nan=False, description="Sampling frequency in Hz."
)
DEFAULT_LOW_CUTOFF = partial(
    Field,
    default=20.0,
    gt=0,
    allow_inf_nan=False,
    description="Lower edge of the pass band in Hz.",
)
DEFAULT_HIGH_CUTOFF = partial(
    Field,
    default=2000.0,
    gt=0,
    allow_inf_nan=False,
    description="Upper edge of the pass band in Hz, must be less than fs/2.",
)
DEFAULT_ORDER = partial(
    Field, default=2, ge=1, description="Number of identical biquads in the cascade."
)

DEFAULT_LENGTH = partial(Field, default=1000, ge=1, description="Number of output samples.")
DEFAULT_TRANSIENT = partial(
    Field,
    default=TRANSIENT_SAMPLES,
    ge=0,
    description="Number of filtered samples discarded while the filter settles.",
)
DEFAULT_OUT_MIN = partial(Field, default=0, description="Lowest output value.")
DEFAULT_OUT_MAX = partial(Field, default=255, description="Highest output value.")
DEFAULT_SEED = partial(
    Field, default=None, ge=0, description="Seed for the random source, None for fresh entropy."
)
