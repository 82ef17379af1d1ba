# Copyright 2026 XMOS LIMITED.
# This Software is subject to the terms of the XMOS Public Licence: Version 1.
"""Save and load integer signals as newline separated text."""

from pathlib import Path

import numpy as np


class SaveError(OSError):
    """Raised when a signal could not be written to disk."""

    pass


def save_to_file(data, filename: str, directory: str | Path = ".") -> Path:
    """
    Save a sequence of integers to a text file, one value per line.

    Parameters
    ----------
    data : iterable of int
        The samples to save.
    filename : str
        Name of the file, without the ``.txt`` extension.
    directory : str | Path, optional
        Directory to write into, created if it does not exist. By
        default the current working directory.

    Returns
    -------
    Path
        The path of the saved file.

    Raises
    ------
    SaveError
        If the file could not be written. The underlying error is
        available as ``__cause__``.
    """
    path = Path(directory) / f"{filename}.txt"
    text = "\n".join(str(int(v)) for v in data)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    except OSError as e:
        raise SaveError(f"Failed to save data to {path}: {e}") from e

    return path


def load_from_file(path: str | Path) -> np.ndarray:
    """Load a signal saved by :py:func:`save_to_file` as an int64 array."""
    text = Path(path).read_text()
    values = [int(line) for line in text.splitlines() if line.strip()]
    return np.array(values, dtype=np.int64)
