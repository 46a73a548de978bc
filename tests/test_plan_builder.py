from pathlib import Path

import pytest

from gif_converter.data_models import SourceAsset
from gif_converter.metadata import METADATA_TAGS
from gif_converter.plan_builder import ConversionPlanBuilder


OUTPUT = Path("out/1.mp4")


def build(duration, width=200, height=150):
    asset = SourceAsset(Path("in/a.gif"), duration, width, height)
    return ConversionPlanBuilder().build_plan(asset, OUTPUT)


def test_short_source_is_padded():
    plan = build(2.5, 101, 99)

    assert plan.uses_padding
    assert plan.duration_cap == 4.0
    assert plan.dimensions.size == "102x100"
    graph = plan.value_of("-filter_complex")
    assert "scale=102:100" in graph
    assert "d=1.500" in graph
    assert plan.value_of("-map") == "[outv]"
    assert plan.value_of("-t") == "4"
    assert plan.value_of("-s") == "102x100"


def test_padded_parameter_order():
    plan = build(1.0)
    assert plan.flags() == (
        ["-filter_complex", "-map", "-pix_fmt", "-movflags"]
        + ["-metadata"] * len(METADATA_TAGS)
        + ["-t", "-s"]
    )


def test_long_source_is_not_padded():
    plan = build(5.0, 200, 150)

    assert not plan.uses_padding
    assert plan.duration_cap == 4.0
    assert "-filter_complex" not in plan.flags()
    assert "-map" not in plan.flags()
    assert "-t" not in plan.flags()
    assert plan.value_of("-s") == "200x150"
    assert plan.flags() == ["-pix_fmt", "-movflags"] + ["-metadata"] * len(METADATA_TAGS) + ["-s"]


def test_exactly_four_seconds_is_not_padded():
    assert not build(4.0).uses_padding


@pytest.mark.parametrize("duration,expected", [(0.0, "4.000"), (3.25, "0.750"), (3.9, "0.100")])
def test_pad_duration_is_remainder_to_four_seconds(duration, expected):
    plan = build(duration)
    assert f"d={expected} [pad]" in plan.value_of("-filter_complex")


def test_common_parameters():
    plan = build(6.0)
    assert plan.value_of("-pix_fmt") == "yuv420p"
    assert plan.value_of("-movflags") == "+faststart"
    assert plan.video_codec == "libx264"
    assert plan.frame_rate == 30
    metadata = [p.value for p in plan.parameters if p.flag == "-metadata"]
    assert metadata[0] == "title=Title"
    assert "copyright=© 2025 artistName" in metadata
    assert len(metadata) == 11


def test_no_visual_stream_returns_none():
    asset = SourceAsset(Path("in/a.gif"), 2.0)
    assert ConversionPlanBuilder().build_plan(asset, OUTPUT) is None


def test_plan_building_is_idempotent():
    asset = SourceAsset(Path("in/a.gif"), 1.2, 33, 17)
    builder = ConversionPlanBuilder()
    assert builder.build_plan(asset, OUTPUT) == builder.build_plan(asset, OUTPUT)


def test_pad_never_renders_as_zero():
    plan = build(3.9996, 10, 10)
    assert plan.uses_padding
    assert "d=0.001 [pad]" in plan.value_of("-filter_complex")
