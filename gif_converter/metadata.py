"""Fixed metadata block written into every output file."""

from typing import List, Tuple

from gif_converter.data_models import EncoderParameter


METADATA_TAGS: Tuple[Tuple[str, str], ...] = (
    ("title", "Title"),
    ("artist", "@artistName"),
    ("album", "Hits"),
    ("genre", "Internet Culture"),
    ("comment", "Comment"),
    ("date", "2011-06-09"),
    ("copyright", "© 2025 artistName"),
    ("description", "Based on everything"),
    ("encoder", "Media Encoder"),
    ("language", "en"),
    ("rating", "5.0"),
)


def metadata_parameters() -> List[EncoderParameter]:
    """Return one -metadata parameter per tag, in fixed order."""
    return [EncoderParameter("-metadata", f"{key}={value}") for key, value in METADATA_TAGS]
