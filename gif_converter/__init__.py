"""Batch conversion of animated GIFs into padded, tagged MP4 clips."""

__version__ = "1.0.0"
