"""Exception types for the GIF to MP4 converter."""

from typing import Optional


class GifConverterError(Exception):
    """Base class for all converter errors."""
    pass


class SetupError(GifConverterError):
    """Error raised before any file is processed; aborts the whole batch."""
    pass


class ConfigurationError(SetupError):
    """Exception raised for configuration-related errors."""
    pass


class EncoderNotFoundError(SetupError):
    """Raised when the ffmpeg/ffprobe executables cannot be located."""
    pass


class OutputDirectoryError(SetupError):
    """Raised when the output directory cannot be created or used."""
    pass


class ProbeError(GifConverterError):
    """Raised when a source file cannot be inspected as media."""
    pass


class EncodeError(GifConverterError):
    """Raised when the external encoder fails for a single conversion plan."""

    def __init__(self, message: str, returncode: Optional[int] = None, diagnostic: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.diagnostic = diagnostic
