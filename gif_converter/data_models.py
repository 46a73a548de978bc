"""Data models and dataclasses for the GIF converter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


# Every output is stretched or capped to this many seconds
TARGET_DURATION = 4.0
TARGET_FRAME_RATE = 30
VIDEO_CODEC = "libx264"


@dataclass(frozen=True)
class SourceAsset:
    """Result of probing a single source file."""
    path: Path
    duration: float
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def has_visual_stream(self) -> bool:
        """True when the probe found a video stream with known dimensions."""
        return self.width is not None and self.height is not None


@dataclass(frozen=True)
class NormalizedDimensions:
    """Frame size rounded up to even values."""
    width: int
    height: int

    @property
    def size(self) -> str:
        """Frame size in ffmpeg's WxH notation."""
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class EncoderParameter:
    """A single encoder option: a flag and an optional value."""
    flag: str
    value: Optional[str] = None

    def as_args(self) -> List[str]:
        """Render the parameter as argv entries."""
        if self.value is None:
            return [self.flag]
        return [self.flag, self.value]


@dataclass(frozen=True)
class ConversionPlan:
    """Everything the encoder needs to convert one source file."""
    input_path: Path
    output_path: Path
    parameters: Tuple[EncoderParameter, ...]
    dimensions: NormalizedDimensions
    uses_padding: bool
    duration_cap: float = TARGET_DURATION
    video_codec: str = VIDEO_CODEC
    frame_rate: int = TARGET_FRAME_RATE

    def flags(self) -> List[str]:
        """Flags of all parameters, in order."""
        return [parameter.flag for parameter in self.parameters]

    def value_of(self, flag: str) -> Optional[str]:
        """Value of the first parameter with the given flag, or None."""
        for parameter in self.parameters:
            if parameter.flag == flag:
                return parameter.value
        return None


class FileOutcome(Enum):
    """Outcome of processing a single source file."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class BatchResult:
    """Result of one iteration of the batch loop."""
    sequence: Optional[int]  # None when a skip did not consume a number
    input_name: str
    outcome: FileOutcome
    output_path: Optional[Path] = None
    reason: Optional[str] = None
    elapsed: float = 0.0

    @property
    def attempted(self) -> bool:
        """True for files that were converted or failed trying."""
        return self.outcome is not FileOutcome.SKIPPED


@dataclass
class BatchReport:
    """Final report of a batch run."""
    results: List[BatchResult] = field(default_factory=list)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.outcome is FileOutcome.SUCCESS)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.outcome is FileOutcome.FAILED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.outcome is FileOutcome.SKIPPED)

    @property
    def attempted(self) -> int:
        return self.successful + self.failed

    @property
    def output_names(self) -> List[str]:
        """Names of the files written by successful conversions."""
        return [
            r.output_path.name for r in self.results
            if r.outcome is FileOutcome.SUCCESS and r.output_path is not None
        ]


@dataclass
class StatsSummary:
    """Summary statistics for conversion operations."""
    total_source_mb: float
    total_output_mb: float
    successful_conversions: int
    failed_conversions: int
    skipped_files: int
    padded_conversions: int
    total_runtime: float
