#!/usr/bin/env python3
"""
GIF to MP4 Converter
Main entry point for the batch conversion system.
"""

from gif_converter.cli import main


if __name__ == "__main__":
    exit(main())
