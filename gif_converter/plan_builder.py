"""Per-file conversion planning: pad or pass through."""

import logging
from pathlib import Path
from typing import List, Optional

from gif_converter.data_models import (
    TARGET_DURATION,
    ConversionPlan,
    EncoderParameter,
    NormalizedDimensions,
    SourceAsset,
)
from gif_converter.dimensions import normalize_dimensions
from gif_converter.filter_graph import build_pad_filter
from gif_converter.metadata import metadata_parameters


# Shortest pad that survives rendering with three decimals
MIN_PAD_SECONDS = 0.001

PIXEL_FORMAT = "yuv420p"
MOVFLAGS = "+faststart"


def format_duration_cap(seconds: float) -> str:
    """Render the -t value, dropping a trailing '.0' (4.0 -> '4')."""
    return f"{seconds:g}"


class ConversionPlanBuilder:
    """Builds the ordered encoder parameters for a single source file."""

    def __init__(self, target_duration: float = TARGET_DURATION):
        """
        Initialize ConversionPlanBuilder.

        Args:
            target_duration: Minimum output length in seconds; shorter sources are padded
        """
        self.target_duration = target_duration

    def needs_padding(self, asset: SourceAsset) -> bool:
        """Return True if the source is shorter than the target duration."""
        return asset.duration < self.target_duration

    def build_plan(self, asset: SourceAsset, output_path: Path) -> Optional[ConversionPlan]:
        """
        Decide pad vs. no-pad and assemble the conversion plan.

        Args:
            asset: Probed source file
            output_path: Path of the MP4 file to write

        Returns:
            ConversionPlan, or None if the source has no visual stream and
            should be skipped
        """
        if not asset.has_visual_stream:
            logging.debug(f"No visual stream in {asset.path.name}, nothing to plan")
            return None

        dimensions = normalize_dimensions(asset.width, asset.height)
        if (dimensions.width, dimensions.height) != (asset.width, asset.height):
            logging.debug(
                f"Rounded {asset.width}x{asset.height} up to {dimensions.size} for {asset.path.name}"
            )

        uses_padding = self.needs_padding(asset)
        if uses_padding:
            pad_seconds = max(self.target_duration - asset.duration, MIN_PAD_SECONDS)
            logging.debug(
                f"{asset.path.name} lasts {asset.duration:.3f}s, padding {pad_seconds:.3f}s"
            )
            parameters = self._padded_parameters(dimensions, pad_seconds)
        else:
            parameters = self._passthrough_parameters(dimensions)

        return ConversionPlan(
            input_path=asset.path,
            output_path=output_path,
            parameters=tuple(parameters),
            dimensions=dimensions,
            uses_padding=uses_padding,
            duration_cap=self.target_duration,
        )

    def _padded_parameters(
        self,
        dimensions: NormalizedDimensions,
        pad_seconds: float
    ) -> List[EncoderParameter]:
        graph = build_pad_filter(dimensions, pad_seconds)
        return [
            EncoderParameter("-filter_complex", graph.render()),
            EncoderParameter("-map", f"[{graph.output_label}]"),
            EncoderParameter("-pix_fmt", PIXEL_FORMAT),
            EncoderParameter("-movflags", MOVFLAGS),
            *metadata_parameters(),
            EncoderParameter("-t", format_duration_cap(self.target_duration)),
            EncoderParameter("-s", dimensions.size),
        ]

    def _passthrough_parameters(self, dimensions: NormalizedDimensions) -> List[EncoderParameter]:
        # Source already meets the target, keep its natural length
        return [
            EncoderParameter("-pix_fmt", PIXEL_FORMAT),
            EncoderParameter("-movflags", MOVFLAGS),
            *metadata_parameters(),
            EncoderParameter("-s", dimensions.size),
        ]
