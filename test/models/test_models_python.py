# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
import json

import pytest
import yaml
from pydantic import ValidationError

from bandnoise.models.band_noise import (
    BandNoiseParameters,
    BandpassParameters,
    load_parameters,
    read_parameter_file,
)


def test_defaults():
    p = BandNoiseParameters()
    assert p.length == 1000
    assert p.fs == 44100.0
    assert p.low_cutoff == 20.0
    assert p.high_cutoff == 2000.0
    assert p.order == 2
    assert p.transient == 500
    assert (p.out_min, p.out_max) == (0, 255)
    assert p.seed is None


@pytest.mark.parametrize("kwargs", [{"high_cutoff": 22050},
                                    {"low_cutoff": 2000},
                                    {"low_cutoff": 0},
                                    {"fs": -1},
                                    {"order": 0},
                                    {"length": 0},
                                    {"transient": -1},
                                    {"out_min": 255},
                                    {"seed": -2},
                                    {"colour": "pink"}])
def test_invalid(kwargs):
    with pytest.raises(ValidationError):
        BandNoiseParameters(**kwargs)


def test_filter_parameters():
    p = BandpassParameters(fs=8000, low_cutoff=300, high_cutoff=3400, order=4)
    assert p.order == 4
    with pytest.raises(ValidationError):
        BandpassParameters(fs=8000, low_cutoff=300, high_cutoff=4000)


def test_load_json(tmp_path):
    params = {"length": 64, "fs": 16000, "low_cutoff": 100, "high_cutoff": 1000, "seed": 5}
    path = tmp_path / "params.json"
    path.write_text(json.dumps(params))

    p = load_parameters(path)
    assert p == BandNoiseParameters(**params)


@pytest.mark.parametrize("suffix", [".yaml", ".yml"])
def test_load_yaml(tmp_path, suffix):
    params = {"length": 64, "order": 3, "out_min": -128, "out_max": 127}
    path = tmp_path / ("params" + suffix)
    path.write_text(yaml.dump(params))

    p = load_parameters(path)
    assert p == BandNoiseParameters(**params)


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text("")
    assert load_parameters(path) == BandNoiseParameters()


def test_load_invalid(tmp_path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"high_cutoff": 50000}))
    with pytest.raises(ValidationError):
        load_parameters(path)


@pytest.mark.parametrize("kwargs", [{"fs": float("inf")},
                                    {"fs": float("nan")},
                                    {"low_cutoff": float("nan")},
                                    {"low_cutoff": float("-inf")},
                                    {"high_cutoff": float("inf")},
                                    {"high_cutoff": float("nan")}])
def test_non_finite(kwargs):
    with pytest.raises(ValidationError):
        BandNoiseParameters(**kwargs)
    with pytest.raises(ValidationError):
        BandpassParameters(**kwargs)


def test_read_parameter_file(tmp_path):
    # raw values are returned unvalidated so they can be merged first
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"high_cutoff": 50000}))
    assert read_parameter_file(path) == {"high_cutoff": 50000}

    path = tmp_path / "params.yml"
    path.write_text(yaml.safe_dump({"fs": 8000.0, "order": 4}))
    assert read_parameter_file(path) == {"fs": 8000.0, "order": 4}


@pytest.mark.parametrize("name, text", [("params.json", "[1, 2, 3]"),
                                        ("params.yaml", "- 1\n- 2\n"),
                                        ("params.json", "{not json")])
def test_read_parameter_file_bad(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    with pytest.raises(ValueError):
        read_parameter_file(path)
