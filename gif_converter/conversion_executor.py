"""Submission of conversion plans to FFmpeg."""

import logging
from typing import List

from gif_converter.data_models import ConversionPlan
from gif_converter.errors import EncodeError
from gif_converter.process_runner import ProcessRunner, run_process


# Characters of ffmpeg stderr kept in error messages
DIAGNOSTIC_TAIL = 500


class ConversionExecutor:
    """Runs FFmpeg for a conversion plan and reports failures as EncodeError."""

    def __init__(self, ffmpeg_path: str = "ffmpeg", runner: ProcessRunner = run_process):
        """
        Initialize ConversionExecutor.

        Args:
            ffmpeg_path: Path to the ffmpeg executable
            runner: Coroutine used to run the ffmpeg process
        """
        self.ffmpeg_path = ffmpeg_path
        self._runner = runner

    def build_command(self, plan: ConversionPlan) -> List[str]:
        """
        Render a plan into an FFmpeg argument list.

        Args:
            plan: Conversion plan to render

        Returns:
            Full command, executable first
        """
        command = [
            self.ffmpeg_path,
            "-hide_banner",
            "-y",  # Overwrite output files
            "-i", str(plan.input_path.absolute()),
            "-c:v", plan.video_codec,
            "-r", str(plan.frame_rate),
        ]
        for parameter in plan.parameters:
            command.extend(parameter.as_args())
        command.append(str(plan.output_path.absolute()))
        return command

    async def execute(self, plan: ConversionPlan) -> None:
        """
        Run a single conversion. No retry.

        Args:
            plan: Conversion plan to execute

        Raises:
            EncodeError: If ffmpeg cannot be started or exits with an error
        """
        command = self.build_command(plan)
        logging.debug(f"FFmpeg command: {' '.join(command)}")

        try:
            result = await self._runner(command)
        except OSError as e:
            raise EncodeError(f"Could not run ffmpeg: {e}") from e

        if result.stderr:
            logging.debug(f"FFmpeg stderr (last {DIAGNOSTIC_TAIL} chars): {result.stderr[-DIAGNOSTIC_TAIL:]}")

        if not result.ok:
            diagnostic = result.stderr.strip()[-DIAGNOSTIC_TAIL:]
            message = diagnostic or f"ffmpeg exited with code {result.returncode}"
            raise EncodeError(message, returncode=result.returncode, diagnostic=diagnostic)

        logging.info(f"Encoded {plan.input_path.name} -> {plan.output_path.name}")
