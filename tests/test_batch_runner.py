import asyncio
from pathlib import Path

from gif_converter.batch_runner import BatchRunner, next_sequence
from gif_converter.data_models import BatchResult, FileOutcome, SourceAsset
from gif_converter.file_processor import FileProcessor

from conftest import FakeExecutor, FakeProbe, SilentReporter


def make_gifs(directory: Path, *names: str):
    for name in names:
        (directory / name).write_bytes(b"GIF89a")


def make_runner(gif_dir, out_dir, probe, executor, **kwargs):
    file_processor = FileProcessor(gif_dir, out_dir)
    file_processor.prepare()
    return BatchRunner(
        file_processor=file_processor,
        probe=probe,
        executor=executor,
        reporter=SilentReporter(),
        **kwargs
    )


def assets_for(gif_dir, *names, duration=2.5):
    return {name: SourceAsset(gif_dir / name, duration, 100, 100) for name in names}


def discovery_order(gif_dir):
    return [p.name for p in FileProcessor(gif_dir, gif_dir).find_gif_files()]


def test_outputs_are_numbered_in_discovery_order(gif_dir, out_dir):
    make_gifs(gif_dir, "a.gif", "b.gif", "c.gif")
    order = discovery_order(gif_dir)
    executor = FakeExecutor()
    runner = make_runner(gif_dir, out_dir, FakeProbe(assets_for(gif_dir, *order)), executor)

    report = asyncio.run(runner.run())

    assert [p.input_path.name for p in executor.plans] == order
    assert [p.output_path.name for p in executor.plans] == ["1.mp4", "2.mp4", "3.mp4"]
    assert report.successful == 3
    assert sorted(p.name for p in out_dir.iterdir()) == ["1.mp4", "2.mp4", "3.mp4"]


def test_probe_failure_consumes_number_and_batch_continues(gif_dir, out_dir):
    make_gifs(gif_dir, "a.gif", "b.gif", "c.gif")
    order = discovery_order(gif_dir)
    probe = FakeProbe(assets_for(gif_dir, *order), broken=[order[1]])
    runner = make_runner(gif_dir, out_dir, probe, FakeExecutor())

    report = asyncio.run(runner.run())

    assert probe.calls == order
    assert report.successful == 2
    assert report.failed == 1
    assert report.attempted == 3
    assert report.output_names == ["1.mp4", "3.mp4"]
    failed = report.results[1]
    assert failed.outcome is FileOutcome.FAILED
    assert failed.sequence == 2
    assert "Invalid data" in failed.reason


def test_encode_failure_is_recorded(gif_dir, out_dir):
    make_gifs(gif_dir, "a.gif", "b.gif")
    order = discovery_order(gif_dir)
    executor = FakeExecutor(failing_inputs=[order[0]])
    runner = make_runner(gif_dir, out_dir, FakeProbe(assets_for(gif_dir, *order)), executor)

    report = asyncio.run(runner.run())

    assert [r.outcome for r in report.results] == [FileOutcome.FAILED, FileOutcome.SUCCESS]
    assert report.output_names == ["2.mp4"]
    assert runner.stats.get_summary().failed_conversions == 1


def test_skip_does_not_consume_number_by_default(gif_dir, out_dir):
    make_gifs(gif_dir, "a.gif", "b.gif", "c.gif")
    order = discovery_order(gif_dir)
    assets = assets_for(gif_dir, *order)
    assets[order[0]] = SourceAsset(gif_dir / order[0], 1.0)
    runner = make_runner(gif_dir, out_dir, FakeProbe(assets), FakeExecutor())

    report = asyncio.run(runner.run())

    assert report.skipped == 1
    assert report.results[0].sequence is None
    assert report.output_names == ["1.mp4", "2.mp4"]


def test_skip_can_consume_number(gif_dir, out_dir):
    make_gifs(gif_dir, "a.gif", "b.gif")
    order = discovery_order(gif_dir)
    assets = assets_for(gif_dir, *order)
    assets[order[0]] = SourceAsset(gif_dir / order[0], 1.0)
    runner = make_runner(
        gif_dir, out_dir, FakeProbe(assets), FakeExecutor(), advance_sequence_on_skip=True
    )

    report = asyncio.run(runner.run())

    assert report.results[0].sequence == 1
    assert report.output_names == ["2.mp4"]


def test_padding_flag_follows_duration(gif_dir, out_dir):
    make_gifs(gif_dir, "short.gif", "long.gif")
    assets = {
        "short.gif": SourceAsset(gif_dir / "short.gif", 1.0, 64, 64),
        "long.gif": SourceAsset(gif_dir / "long.gif", 6.0, 64, 64),
    }
    executor = FakeExecutor()
    runner = make_runner(gif_dir, out_dir, FakeProbe(assets), executor)

    asyncio.run(runner.run())

    padded = {p.input_path.name: p.uses_padding for p in executor.plans}
    assert padded == {"short.gif": True, "long.gif": False}
    assert runner.stats.get_summary().padded_conversions == 1


def test_empty_directory_completes(gif_dir, out_dir):
    runner = make_runner(gif_dir, out_dir, FakeProbe({}), FakeExecutor())

    report = asyncio.run(runner.run())

    assert report.results == []
    assert ("no_files",) in runner.reporter.events
    assert runner.reporter.events[-1] == ("completed",)


def test_next_sequence():
    success = BatchResult(1, "a.gif", FileOutcome.SUCCESS)
    failure = BatchResult(1, "a.gif", FileOutcome.FAILED)
    skip = BatchResult(None, "a.gif", FileOutcome.SKIPPED)

    assert next_sequence(1, success) == 2
    assert next_sequence(1, failure) == 2
    assert next_sequence(1, skip) == 1
    assert next_sequence(1, skip, advance_on_skip=True) == 2
