"""Shared fakes for the converter tests."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from gif_converter.data_models import SourceAsset
from gif_converter.errors import EncodeError, ProbeError
from gif_converter.process_runner import ProcessResult


class FakeRunner:
    """Records commands and returns canned process results."""

    def __init__(self, result: Optional[ProcessResult] = None, error: Optional[Exception] = None):
        self.result = result or ProcessResult(0, "", "")
        self.error = error
        self.commands: List[List[str]] = []

    async def __call__(self, command: Sequence[str]) -> ProcessResult:
        self.commands.append(list(command))
        if self.error is not None:
            raise self.error
        return self.result


class FakeProbe:
    """Returns preset assets by file name; names listed in `broken` fail."""

    def __init__(self, assets: Dict[str, SourceAsset], broken: Sequence[str] = ()):
        self.assets = assets
        self.broken = set(broken)
        self.calls: List[str] = []

    async def probe(self, path: Path) -> SourceAsset:
        self.calls.append(path.name)
        if path.name in self.broken:
            raise ProbeError("Invalid data found when processing input")
        return self.assets[path.name]


class FakeExecutor:
    """Writes a small output file per plan instead of encoding."""

    def __init__(self, failing_inputs: Sequence[str] = ()):
        self.failing_inputs = set(failing_inputs)
        self.plans = []

    async def execute(self, plan) -> None:
        self.plans.append(plan)
        if plan.input_path.name in self.failing_inputs:
            raise EncodeError("Conversion failed!", returncode=1, diagnostic="Conversion failed!")
        plan.output_path.write_bytes(b"\x00" * 16)


class SilentReporter:
    """ConsoleReporter stand-in that records events."""

    def __init__(self):
        self.events = []

    def file_started(self, name, current, total):
        self.events.append(("start", name))

    def success(self, source_name, output_name, padded):
        self.events.append(("success", source_name, output_name))

    def failure(self, source_name, reason):
        self.events.append(("failure", source_name))

    def skipped(self, source_name):
        self.events.append(("skipped", source_name))

    def no_files(self, directory):
        self.events.append(("no_files",))

    def completed(self):
        self.events.append(("completed",))

    def fatal(self, error):
        self.events.append(("fatal", str(error)))


@pytest.fixture
def gif_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "gifs"
    directory.mkdir()
    return directory


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "mp4"
