# Copyright 2025-2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Pydantic models of the band-limited noise generator."""

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, model_validator

from bandnoise.dsp import utils
from bandnoise.models.fields import (
    DEFAULT_FS,
    DEFAULT_LOW_CUTOFF,
    DEFAULT_HIGH_CUTOFF,
    DEFAULT_ORDER,
    DEFAULT_LENGTH,
    DEFAULT_TRANSIENT,
    DEFAULT_OUT_MIN,
    DEFAULT_OUT_MAX,
    DEFAULT_SEED,
)


class BandpassParameters(BaseModel, extra="forbid"):
    """Parameters of a cascaded bandpass filter.

    The band edges must satisfy ``low_cutoff < high_cutoff < fs/2``.
    """

    fs: float = DEFAULT_FS()
    low_cutoff: float = DEFAULT_LOW_CUTOFF()
    high_cutoff: float = DEFAULT_HIGH_CUTOFF()
    order: int = DEFAULT_ORDER()

    @model_validator(mode="after")
    def check_band(self):
        """Check the band edges are ordered and below Nyquist."""
        utils.check_band(self.fs, self.low_cutoff, self.high_cutoff)
        return self


class BandNoiseParameters(BandpassParameters):
    """Parameters of the band-limited noise generator."""

    length: int = DEFAULT_LENGTH()
    transient: int = DEFAULT_TRANSIENT()
    out_min: int = DEFAULT_OUT_MIN()
    out_max: int = DEFAULT_OUT_MAX()
    seed: Optional[int] = DEFAULT_SEED()

    @model_validator(mode="after")
    def check_output_range(self):
        """Check the output range is not empty."""
        if self.out_max <= self.out_min:
            raise ValueError("out_max must be greater than out_min")
        return self


def read_parameter_file(path: str | Path) -> dict:
    """Read a JSON or YAML parameter file into a dictionary, without
    validating it.

    Files ending in ``.yaml`` or ``.yml`` are read as YAML, anything
    else as JSON. An empty YAML file gives an empty dictionary.

    Raises
    ------
    OSError
        If the file cannot be read.
    ValueError
        If the JSON is malformed or the file does not hold a mapping.
    yaml.YAMLError
        If the YAML is malformed.
    """
    path = Path(path)
    text = path.read_text()
    if path.suffix in (".yaml", ".yml"):
        values = yaml.safe_load(text) or {}
    else:
        values = json.loads(text)

    if not isinstance(values, dict):
        raise ValueError(f"Parameter file {path} must contain a mapping")
    return values


def load_parameters(path: str | Path) -> BandNoiseParameters:
    """Load generator parameters from a JSON or YAML file.

    Parameters
    ----------
    path : str | Path
        Path to the configuration file.

    Returns
    -------
    BandNoiseParameters
        The validated parameters.
    """
    return BandNoiseParameters.model_validate(read_parameter_file(path))
