# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Command line tool to generate band-limited noise and save it as text."""

import argparse
import pathlib

import numpy as np
import yaml

from bandnoise.dsp.band_noise import band_noise
from bandnoise.export import save_to_file
from bandnoise.models.band_noise import BandNoiseParameters, read_parameter_file


# command line option name and BandNoiseParameters field
_OPTIONS = {
    "length": int,
    "fs": float,
    "low_cutoff": float,
    "high_cutoff": float,
    "order": int,
    "transient": int,
    "out_min": int,
    "out_max": int,
    "seed": int,
}


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        "bandnoise", description="Generate bandpass filtered Gaussian noise."
    )
    parser.add_argument("name", help="output file name, without extension")
    parser.add_argument(
        "-d", "--output-dir", type=pathlib.Path, default=pathlib.Path("."), help="output directory"
    )
    parser.add_argument(
        "-c", "--config", type=pathlib.Path, default=None, help="JSON or YAML parameter file"
    )
    for name, kind in _OPTIONS.items():
        parser.add_argument(
            "--" + name.replace("_", "-"),
            type=kind,
            default=None,
            help=f"overrides {name} from the config file",
        )

    args = parser.parse_args(argv)
    return parser, args


def make_parameters(args) -> BandNoiseParameters:
    """Merge the config file and the command line options, the command
    line takes precedence. The merged values are validated once.
    """
    values = {}
    if args.config is not None:
        values = read_parameter_file(args.config)
    for name in _OPTIONS:
        value = getattr(args, name)
        if value is not None:
            values[name] = value

    return BandNoiseParameters.model_validate(values)


def main(argv=None):
    """Generate noise and save it, printing the saved path."""
    parser, args = parse_arguments(argv)
    try:
        params = make_parameters(args)
    except (OSError, yaml.YAMLError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        parser.error(str(e))

    output = band_noise(params).generate(np.random.default_rng(params.seed))
    path = save_to_file(output, args.name, args.output_dir)
    print(path)
    return path


if __name__ == "__main__":
    main()
