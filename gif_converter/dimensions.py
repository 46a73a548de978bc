"""Frame size normalization for H.264 output."""

from gif_converter.data_models import NormalizedDimensions


def round_up_to_even(value: int) -> int:
    """Round a pixel count up to the nearest even number."""
    return value + (value % 2)


def normalize_dimensions(width: int, height: int) -> NormalizedDimensions:
    """
    Round width and height up to even values.

    libx264 with yuv420p chroma subsampling rejects odd frame sizes, so each
    axis grows by at most one pixel.

    Args:
        width: Source width in pixels
        height: Source height in pixels

    Returns:
        NormalizedDimensions with both values even
    """
    return NormalizedDimensions(round_up_to_even(width), round_up_to_even(height))
