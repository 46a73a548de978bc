"""Statistics tracking for conversion operations."""

import logging
import time
from typing import Optional

from gif_converter.data_models import StatsSummary


BYTES_PER_MB = 1024 * 1024


class StatsTracker:
    """Tracks conversion statistics and generates summary reports."""

    def __init__(self):
        """Initialize StatsTracker with zero counters."""
        self._total_source_bytes = 0
        self._total_output_bytes = 0
        self._successful_conversions = 0
        self._failed_conversions = 0
        self._skipped_files = 0
        self._padded_conversions = 0
        self._start_time: Optional[float] = None
        self._total_conversion_time = 0.0  # Total time spent on successful conversions
        self._current_file_start: Optional[float] = None

    def start_timer(self):
        """Start the overall timer."""
        self._start_time = time.monotonic()

    def start_file_timer(self):
        """Start timer for the current file."""
        self._current_file_start = time.monotonic()

    def end_file_timer(self) -> float:
        """End timer for the current file and return the elapsed seconds."""
        if self._current_file_start is None:
            return 0.0
        elapsed = time.monotonic() - self._current_file_start
        self._current_file_start = None
        return elapsed

    def record_success(self, source_bytes: int, output_bytes: int, padded: bool, elapsed: float) -> None:
        """
        Record a successful conversion.

        Args:
            source_bytes: Size of the source GIF
            output_bytes: Size of the written MP4
            padded: Whether the output was padded to the target duration
            elapsed: Seconds spent on the conversion
        """
        self._successful_conversions += 1
        self._total_source_bytes += source_bytes
        self._total_output_bytes += output_bytes
        self._total_conversion_time += elapsed
        if padded:
            self._padded_conversions += 1
        logging.debug(f"Recorded successful conversion (total: {self._successful_conversions})")

    def record_failure(self) -> None:
        """Record a failed conversion."""
        self._failed_conversions += 1
        logging.debug(f"Recorded failed conversion (total: {self._failed_conversions})")

    def record_skip(self) -> None:
        """Record a file skipped because it has no video stream."""
        self._skipped_files += 1
        logging.debug(f"Recorded skipped file (total: {self._skipped_files})")

    def get_summary(self) -> StatsSummary:
        """
        Return StatsSummary with sizes in megabytes.

        Returns:
            StatsSummary dataclass
        """
        total_runtime = 0.0
        if self._start_time is not None:
            total_runtime = time.monotonic() - self._start_time

        return StatsSummary(
            total_source_mb=self._total_source_bytes / BYTES_PER_MB,
            total_output_mb=self._total_output_bytes / BYTES_PER_MB,
            successful_conversions=self._successful_conversions,
            failed_conversions=self._failed_conversions,
            skipped_files=self._skipped_files,
            padded_conversions=self._padded_conversions,
            total_runtime=total_runtime
        )

    def print_summary(self) -> None:
        """Display formatted statistics report."""
        summary = self.get_summary()

        avg_time_per_file = 0.0
        if summary.successful_conversions > 0:
            avg_time_per_file = self._total_conversion_time / summary.successful_conversions

        print("\n" + "=" * 60)
        print("CONVERSION STATISTICS SUMMARY")
        print("=" * 60)

        if summary.total_runtime > 0:
            print(f"Total Runtime:            {self._format_time(summary.total_runtime)}")
            if summary.successful_conversions > 0:
                print(f"Average Time per File:    {self._format_time(avg_time_per_file)}")

        print(f"Total Source Size:        {summary.total_source_mb:.2f} MB")
        print(f"Total Output Size:        {summary.total_output_mb:.2f} MB")

        print(f"Successful Conversions:   {summary.successful_conversions}")
        if summary.padded_conversions > 0:
            print(f"  - Padded to 4s:         {summary.padded_conversions}")
        print(f"Failed Conversions:       {summary.failed_conversions}")
        print(f"Skipped Files:            {summary.skipped_files}")
        print(f"Total Attempted:          {summary.successful_conversions + summary.failed_conversions}")
        print("=" * 60 + "\n")

        logging.info(
            f"Statistics: {summary.successful_conversions} successful, "
            f"{summary.failed_conversions} failed, "
            f"{summary.skipped_files} skipped, "
            f"runtime: {self._format_time(summary.total_runtime)}"
        )

    def _format_time(self, seconds: float) -> str:
        """
        Format seconds into human-readable time string.

        Args:
            seconds: Time in seconds

        Returns:
            Formatted time string (e.g., "1h 23m 45s" or "5m 30s" or "45s")
        """
        if seconds < 60:
            return f"{seconds:.0f}s"
        elif seconds < 3600:
            minutes = int(seconds // 60)
            secs = int(seconds % 60)
            return f"{minutes}m {secs}s"
        else:
            hours = int(seconds // 3600)
            minutes = int((seconds % 3600) // 60)
            secs = int(seconds % 60)
            return f"{hours}h {minutes}m {secs}s"
