"""Command line entry point for the GIF to MP4 converter."""

import argparse
import asyncio
import logging
from typing import List, Optional

from gif_converter.batch_runner import BatchRunner
from gif_converter.config_manager import ConfigManager
from gif_converter.console import ConsoleReporter
from gif_converter.conversion_executor import ConversionExecutor
from gif_converter.encoder_locator import locate_encoder
from gif_converter.errors import SetupError
from gif_converter.file_processor import FileProcessor
from gif_converter.media_probe import MediaProbe


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a directory of GIF files into numbered MP4 clips of at least 4 seconds."
    )
    parser.add_argument("--config", default="config.json", help="Path to the JSON configuration file")
    parser.add_argument("--input", help="Input directory (overrides input_directory_path)")
    parser.add_argument("--output", help="Output directory (overrides output_directory_path)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    return parser.parse_args(argv)


def build_runner(config: ConfigManager, reporter: ConsoleReporter) -> BatchRunner:
    """
    Locate the encoder, prepare directories and wire the batch components.

    Raises:
        SetupError: If the encoder or the directories are not usable
    """
    encoder = locate_encoder(config.ffmpeg_directory)

    file_processor = FileProcessor(config.input_directory, config.output_directory)
    file_processor.prepare()

    return BatchRunner(
        file_processor=file_processor,
        probe=MediaProbe(encoder.ffprobe),
        executor=ConversionExecutor(encoder.ffmpeg),
        reporter=reporter,
        advance_sequence_on_skip=config.advance_sequence_on_skip
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the GIF to MP4 converter."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger(__name__)
    reporter = ConsoleReporter(use_color=not args.no_color)

    logger.info("=" * 60)
    logger.info("GIF to MP4 Converter - Starting")
    logger.info("=" * 60)

    try:
        config = ConfigManager(args.config, input_override=args.input, output_override=args.output)
        if not args.verbose:
            logging.getLogger().setLevel(config.log_level)
        logger.info(f"  - Input directory: {config.input_directory}")
        logger.info(f"  - Output directory: {config.output_directory}")

        runner = build_runner(config, reporter)
    except SetupError as e:
        logger.error(f"Fatal setup error: {e}")
        reporter.fatal(e)
        return 1

    try:
        asyncio.run(runner.run())
    except SetupError as e:
        # Input directory could not be listed
        logger.error(f"Fatal setup error: {e}")
        reporter.fatal(e)
        return 1

    logger.info("=" * 60)
    logger.info("GIF to MP4 Converter - Completed")
    logger.info("=" * 60)
    return 0
