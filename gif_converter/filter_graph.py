"""Filter graph construction for padded conversions."""

from dataclasses import dataclass
from typing import Tuple

from gif_converter.data_models import NormalizedDimensions


SOURCE_LABEL = "gif"
PAD_LABEL = "pad"
OUTPUT_LABEL = "outv"
PAD_COLOR = "black"


def format_seconds(seconds: float) -> str:
    """
    Format a duration with three decimals and a '.' separator.

    str.format never consults the locale for the 'f' presentation type,
    so the result is the same on every host.
    """
    return f"{seconds:.3f}"


@dataclass(frozen=True)
class FilterChain:
    """One chain of a filter graph: input pads, filters, output pad."""
    inputs: Tuple[str, ...]
    filters: Tuple[str, ...]
    output: str

    def render(self) -> str:
        parts = []
        if self.inputs:
            parts.append("".join(f"[{label}]" for label in self.inputs))
        parts.append(", ".join(self.filters))
        parts.append(f"[{self.output}]")
        return " ".join(parts)


@dataclass(frozen=True)
class FilterGraph:
    """An ordered set of filter chains for -filter_complex."""
    chains: Tuple[FilterChain, ...]

    @property
    def output_label(self) -> str:
        """Label of the final stream, used with -map."""
        return self.chains[-1].output

    def render(self) -> str:
        """Render the graph in ffmpeg filtergraph syntax."""
        return "; ".join(chain.render() for chain in self.chains)


def build_pad_filter(dimensions: NormalizedDimensions, pad_seconds: float) -> FilterGraph:
    """
    Build the graph that appends a black segment after the source.

    Args:
        dimensions: Output frame size (already even)
        pad_seconds: Length of the black segment, must be positive

    Returns:
        FilterGraph with the rescaled source, the pad and their concatenation

    Raises:
        ValueError: If pad_seconds is not positive
    """
    if pad_seconds <= 0:
        raise ValueError(f"Pad duration must be positive, got {pad_seconds}")

    width, height = dimensions.width, dimensions.height

    source = FilterChain(
        inputs=("0:v",),
        filters=("setpts=PTS-STARTPTS", f"scale={width}:{height}"),
        output=SOURCE_LABEL,
    )
    pad = FilterChain(
        inputs=(),
        filters=(f"color=c={PAD_COLOR}:s={dimensions.size}:d={format_seconds(pad_seconds)}",),
        output=PAD_LABEL,
    )
    # Source first, padding after
    concat = FilterChain(
        inputs=(SOURCE_LABEL, PAD_LABEL),
        filters=("concat=n=2:v=1",),
        output=OUTPUT_LABEL,
    )
    return FilterGraph(chains=(source, pad, concat))
