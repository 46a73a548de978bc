"""Sequential batch conversion of a directory of GIF files."""

import logging
from pathlib import Path
from typing import Optional

from gif_converter.console import ConsoleReporter
from gif_converter.conversion_executor import ConversionExecutor
from gif_converter.data_models import BatchReport, BatchResult, FileOutcome
from gif_converter.errors import EncodeError, ProbeError
from gif_converter.file_processor import FileProcessor
from gif_converter.media_probe import MediaProbe
from gif_converter.plan_builder import ConversionPlanBuilder
from gif_converter.stats_tracker import StatsTracker


FIRST_SEQUENCE = 1


def next_sequence(current: int, result: BatchResult, advance_on_skip: bool = False) -> int:
    """
    Output number for the file after `result`.

    Converted and failed files always consume their number. Skipped files
    only consume it when advance_on_skip is set.
    """
    if result.attempted or advance_on_skip:
        return current + 1
    return current


class BatchRunner:
    """Converts every GIF in the input directory, one file at a time."""

    def __init__(
        self,
        file_processor: FileProcessor,
        probe: MediaProbe,
        executor: ConversionExecutor,
        plan_builder: Optional[ConversionPlanBuilder] = None,
        stats: Optional[StatsTracker] = None,
        reporter: Optional[ConsoleReporter] = None,
        advance_sequence_on_skip: bool = False
    ):
        """
        Initialize BatchRunner.

        Args:
            file_processor: Source discovery and output naming
            probe: Reads duration and frame size of each source
            executor: Runs the encoder for each plan
            plan_builder: Decides pad vs. no-pad (default builder if None)
            stats: Statistics collector (new tracker if None)
            reporter: Console output (colour reporter if None)
            advance_sequence_on_skip: Let skipped files consume an output number
        """
        self.file_processor = file_processor
        self.probe = probe
        self.executor = executor
        self.plan_builder = plan_builder or ConversionPlanBuilder()
        self.stats = stats or StatsTracker()
        self.reporter = reporter or ConsoleReporter()
        self.advance_sequence_on_skip = advance_sequence_on_skip

    async def run(self) -> BatchReport:
        """
        Process all GIF files in discovery order.

        Per-file failures are recorded and the batch continues. Setup errors
        from the file processor propagate to the caller.

        Returns:
            BatchReport with one BatchResult per discovered file
        """
        self.stats.start_timer()
        gif_files = self.file_processor.find_gif_files()
        report = BatchReport()

        if not gif_files:
            logging.warning(f"No GIF files found in {self.file_processor.input_dir}")
            self.reporter.no_files(self.file_processor.input_dir)
        else:
            logging.info(f"Found {len(gif_files)} GIF files to process")

        sequence = FIRST_SEQUENCE
        for idx, gif in enumerate(gif_files, 1):
            self.reporter.file_started(gif.name, idx, len(gif_files))
            result = await self.process_file(gif, sequence)
            report.results.append(result)
            sequence = next_sequence(sequence, result, self.advance_sequence_on_skip)

        self.stats.print_summary()
        self.reporter.completed()
        logging.info(
            f"Batch finished: {report.successful} converted, "
            f"{report.failed} failed, {report.skipped} skipped"
        )
        return report

    async def process_file(self, gif: Path, sequence: int) -> BatchResult:
        """
        Probe, plan and convert a single file.

        Args:
            gif: Source file
            sequence: Output number reserved for this file

        Returns:
            BatchResult describing the outcome; never raises
        """
        output_path = self.file_processor.output_path_for(sequence)
        self.stats.start_file_timer()

        try:
            asset = await self.probe.probe(gif)
            plan = self.plan_builder.build_plan(asset, output_path)

            if plan is None:
                elapsed = self.stats.end_file_timer()
                logging.warning(f"No video stream found in {gif.name}, skipping")
                self.stats.record_skip()
                self.reporter.skipped(gif.name)
                return BatchResult(
                    sequence=sequence if self.advance_sequence_on_skip else None,
                    input_name=gif.name,
                    outcome=FileOutcome.SKIPPED,
                    elapsed=elapsed
                )

            await self.executor.execute(plan)

        except (ProbeError, EncodeError) as e:
            return self._record_failure(gif, sequence, str(e))
        except Exception as e:
            logging.error(f"Unexpected error processing {gif.name}: {e}", exc_info=True)
            return self._record_failure(gif, sequence, str(e) or type(e).__name__)

        elapsed = self.stats.end_file_timer()
        self.stats.record_success(
            source_bytes=self.file_processor.get_file_size(gif),
            output_bytes=self.file_processor.get_file_size(output_path),
            padded=plan.uses_padding,
            elapsed=elapsed
        )
        self.reporter.success(gif.name, output_path.name, plan.uses_padding)
        return BatchResult(
            sequence=sequence,
            input_name=gif.name,
            outcome=FileOutcome.SUCCESS,
            output_path=output_path,
            elapsed=elapsed
        )

    def _record_failure(self, gif: Path, sequence: int, reason: str) -> BatchResult:
        elapsed = self.stats.end_file_timer()
        logging.error(f"Conversion failed for {gif.name}: {reason}")
        self.stats.record_failure()
        self.reporter.failure(gif.name, reason)
        return BatchResult(
            sequence=sequence,
            input_name=gif.name,
            outcome=FileOutcome.FAILED,
            reason=reason,
            elapsed=elapsed
        )
