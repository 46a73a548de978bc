"""Configuration management for the GIF converter."""

import json
import logging
from pathlib import Path
from typing import Optional

from gif_converter.errors import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigManager:
    """Manages loading and validation of configuration from config.json."""

    REQUIRED_FIELDS = [
        "input_directory_path",
        "output_directory_path"
    ]

    def __init__(
        self,
        config_path: str = "config.json",
        input_override: Optional[str] = None,
        output_override: Optional[str] = None
    ):
        """
        Initialize ConfigManager with path to configuration file.

        Args:
            config_path: Path to the JSON configuration file (default: "config.json")
            input_override: Input directory that replaces the file's value
            output_override: Output directory that replaces the file's value
        """
        self.config_path = Path(config_path)
        self._config = None
        self._overrides = {}
        if input_override is not None:
            self._overrides["input_directory_path"] = input_override
        if output_override is not None:
            self._overrides["output_directory_path"] = output_override
        self._load_and_validate()

    def _load_and_validate(self):
        """Load and validate configuration on initialization."""
        try:
            logging.info(f"Loading configuration from {self.config_path}")
            config = self.load_config()
            config.update(self._overrides)
            self.validate_config(config)
            self._config = config
            logging.info("Configuration loaded and validated successfully")
        except ConfigurationError:
            logging.error(f"Configuration error: Failed to load or validate {self.config_path}")
            raise
        except Exception as e:
            logging.error(f"Unexpected error loading configuration: {e}")
            raise ConfigurationError(f"Unexpected error loading configuration: {e}") from e

    def load_config(self) -> dict:
        """
        Read and parse JSON configuration from file.

        When every required field is supplied as an override, a missing file
        is treated as an empty configuration.

        Returns:
            Dictionary containing configuration data

        Raises:
            ConfigurationError: If file is missing or contains invalid JSON
        """
        if not self.config_path.exists():
            if all(field in self._overrides for field in self.REQUIRED_FIELDS):
                logging.debug(f"{self.config_path} not found, using command line values only")
                return {}
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            logging.debug(f"Reading configuration file: {self.config_path}")
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Configuration file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError("Configuration file must contain a JSON object")

        logging.debug(f"Configuration contents: {config}")
        return config

    def validate_config(self, config: dict) -> bool:
        """
        Verify that all required fields exist and are valid.

        Args:
            config: Configuration dictionary to validate

        Returns:
            True if configuration is valid

        Raises:
            ConfigurationError: If validation fails
        """
        missing_fields = [
            field for field in self.REQUIRED_FIELDS
            if field not in config
        ]
        if missing_fields:
            raise ConfigurationError(f"Missing required configuration fields: {', '.join(missing_fields)}")

        for field in self.REQUIRED_FIELDS:
            if not isinstance(config[field], str):
                raise ConfigurationError(
                    f"'{field}' must be a string, got {type(config[field]).__name__}"
                )

        ffmpeg_directory = config.get("ffmpeg_directory")
        if ffmpeg_directory is not None and not isinstance(ffmpeg_directory, str):
            raise ConfigurationError(
                f"'ffmpeg_directory' must be a string or null, got {type(ffmpeg_directory).__name__}"
            )

        if not isinstance(config.get("advance_sequence_on_skip", False), bool):
            raise ConfigurationError("'advance_sequence_on_skip' must be a boolean")

        log_level = config.get("log_level", "INFO")
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"'log_level' must be one of {', '.join(LOG_LEVELS)}")

        input_path = Path(config["input_directory_path"])
        if not input_path.exists():
            raise ConfigurationError(f"Input directory does not exist: {input_path}")
        if not input_path.is_dir():
            raise ConfigurationError(f"Input path is not a directory: {input_path}")
        logging.debug(f"Input directory validated: {input_path}")

        output_path = Path(config["output_directory_path"])
        if output_path.exists() and not output_path.is_dir():
            raise ConfigurationError(f"Output path exists but is not a directory: {output_path}")
        logging.debug(f"Output directory path validated: {output_path}")

        return True

    @property
    def input_directory(self) -> Path:
        """Get the input directory path as a Path object."""
        return Path(self._config["input_directory_path"])

    @property
    def output_directory(self) -> Path:
        """Get the output directory path as a Path object."""
        return Path(self._config["output_directory_path"])

    @property
    def ffmpeg_directory(self) -> Optional[Path]:
        """Directory holding ffmpeg/ffprobe, or None to search PATH."""
        value = self._config.get("ffmpeg_directory")
        return Path(value) if value else None

    @property
    def advance_sequence_on_skip(self) -> bool:
        """Whether skipped files consume an output number."""
        return self._config.get("advance_sequence_on_skip", False)

    @property
    def log_level(self) -> str:
        return self._config.get("log_level", "INFO").upper()
