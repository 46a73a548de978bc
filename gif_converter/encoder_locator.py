"""Locating the ffmpeg and ffprobe executables."""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gif_converter.errors import EncoderNotFoundError


@dataclass(frozen=True)
class EncoderPaths:
    """Resolved paths of the external tools."""
    ffmpeg: str
    ffprobe: str


def _executable_name(name: str) -> str:
    return f"{name}.exe" if os.name == "nt" else name


def find_executable(name: str, directory: Optional[Path] = None) -> str:
    """
    Find an executable in a given directory or on PATH.

    Args:
        name: Executable name without extension (e.g., "ffmpeg")
        directory: Directory holding the executables, or None to search PATH

    Returns:
        Path to the executable

    Raises:
        EncoderNotFoundError: If the executable cannot be found
    """
    if directory is not None:
        candidate = directory / _executable_name(name)
        if candidate.is_file():
            return str(candidate)
        raise EncoderNotFoundError(f"{name} not found in {directory}")

    found = shutil.which(name)
    if found is None:
        raise EncoderNotFoundError(f"{name} not found on PATH")
    return found


def locate_encoder(directory: Optional[Path] = None) -> EncoderPaths:
    """Resolve both ffmpeg and ffprobe, failing if either is missing."""
    paths = EncoderPaths(
        ffmpeg=find_executable("ffmpeg", directory),
        ffprobe=find_executable("ffprobe", directory),
    )
    logging.info(f"Using ffmpeg: {paths.ffmpeg}")
    logging.debug(f"Using ffprobe: {paths.ffprobe}")
    return paths
