"""Source inspection using FFprobe."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from gif_converter.data_models import SourceAsset
from gif_converter.errors import ProbeError
from gif_converter.process_runner import ProcessRunner, run_process


def _parse_duration(value: Any) -> Optional[float]:
    """Parse an ffprobe duration field; 'N/A' and missing values give None."""
    if value in (None, "", "N/A"):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class MediaProbe:
    """Reads duration and frame size of source files with FFprobe."""

    def __init__(self, ffprobe_path: str = "ffprobe", runner: ProcessRunner = run_process):
        """
        Initialize MediaProbe.

        Args:
            ffprobe_path: Path to the ffprobe executable
            runner: Coroutine used to run the ffprobe process
        """
        self.ffprobe_path = ffprobe_path
        self._runner = runner

    def build_command(self, path: Path) -> List[str]:
        return [
            self.ffprobe_path,
            "-v", "error",
            "-show_format",
            "-show_streams",
            "-of", "json",
            str(path.absolute())
        ]

    async def probe(self, path: Path) -> SourceAsset:
        """
        Inspect a source file.

        A file without a video stream is returned with width and height set
        to None; that is not an error.

        Args:
            path: Path to the source file

        Returns:
            SourceAsset with duration and dimensions

        Raises:
            ProbeError: If ffprobe cannot run or cannot parse the file
        """
        logging.debug(f"Probing {path.name}")

        try:
            result = await self._runner(self.build_command(path))
        except OSError as e:
            raise ProbeError(f"Could not run ffprobe: {e}") from e

        if not result.ok:
            message = result.stderr.strip() or f"ffprobe exited with code {result.returncode}"
            raise ProbeError(message)

        try:
            info = json.loads(result.stdout or "{}")
        except json.JSONDecodeError as e:
            raise ProbeError(f"Unreadable ffprobe output: {e}") from e

        asset = self.parse_probe_output(path, info)
        if asset.has_visual_stream:
            logging.info(f"Source info: {asset.width}x{asset.height}, duration={asset.duration:.2f}s")
        else:
            logging.debug(f"No video stream reported for {path.name}")
        return asset

    @staticmethod
    def parse_probe_output(path: Path, info: Dict[str, Any]) -> SourceAsset:
        """
        Build a SourceAsset from ffprobe's JSON output.

        Args:
            path: Path of the probed file
            info: Parsed JSON with "format" and "streams" entries

        Returns:
            SourceAsset; dimensions are None when there is no video stream
        """
        streams = info.get("streams") or []
        video = next(
            (s for s in streams if s.get("codec_type") == "video"),
            None
        )

        duration = _parse_duration((info.get("format") or {}).get("duration"))
        if duration is None and video is not None:
            duration = _parse_duration(video.get("duration"))
        if duration is None:
            duration = 0.0

        width = height = None
        if video is not None and video.get("width") and video.get("height"):
            width = int(video["width"])
            height = int(video["height"])

        return SourceAsset(path=path, duration=duration, width=width, height=height)
