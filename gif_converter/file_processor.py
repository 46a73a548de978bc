"""File system operations for the GIF conversion workflow."""

import logging
from pathlib import Path
from typing import List

from gif_converter.errors import ConfigurationError, OutputDirectoryError


SOURCE_SUFFIX = ".gif"
OUTPUT_SUFFIX = ".mp4"


class FileProcessor:
    """Manages file system operations for the GIF conversion workflow."""

    def __init__(self, input_dir: Path, output_dir: Path):
        """
        Initialize FileProcessor with input and output directory paths.

        Args:
            input_dir: Path to the directory containing source GIF files
            output_dir: Path to the directory for converted MP4 files
        """
        self.input_dir = input_dir
        self.output_dir = output_dir

    def prepare(self) -> None:
        """
        Check the input directory and create the output directory.

        Raises:
            ConfigurationError: If the input directory is missing or unreadable
            OutputDirectoryError: If the output directory cannot be created
        """
        if not self.input_dir.is_dir():
            raise ConfigurationError(f"Input directory is not accessible: {self.input_dir}")

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Failed to create output directory {self.output_dir}: {e}") from e
        logging.info(f"Output directory ready: {self.output_dir}")

    def find_gif_files(self) -> List[Path]:
        """
        List GIF files in the input directory.

        Files are returned in directory iteration order, which is not sorted.

        Returns:
            List of Path objects for files with a .gif suffix

        Raises:
            ConfigurationError: If the input directory cannot be read
        """
        try:
            return [
                item for item in self.input_dir.iterdir()
                if item.is_file() and item.suffix.lower() == SOURCE_SUFFIX
            ]
        except OSError as e:
            raise ConfigurationError(f"Cannot read input directory {self.input_dir}: {e}") from e

    def output_path_for(self, sequence: int) -> Path:
        """Path of the output file for a sequence number (1.mp4, 2.mp4, ...)."""
        return self.output_dir / f"{sequence}{OUTPUT_SUFFIX}"

    @staticmethod
    def get_file_size(path: Path) -> int:
        """
        Size of a file in bytes.

        Args:
            path: Path to the file

        Returns:
            Size in bytes, or 0 if the file does not exist
        """
        try:
            return path.stat().st_size
        except OSError:
            return 0
