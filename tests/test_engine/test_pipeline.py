"""Tests for the pipeline orchestrator."""

from tests.conftest import RED_CIRCLE_SVG

from svgrn.engine.context import ConversionContext
from svgrn.engine.pipeline import Pipeline, create_pipeline
from svgrn.engine.registry import Phase, StageRegistry, StageSpec
from svgrn.models.converter_config import ConverterConfig
from svgrn.svg.parser import parse_svg


def _ctx(config: ConverterConfig | None = None) -> ConversionContext:
    parse = parse_svg(RED_CIRCLE_SVG)
    return ConversionContext(config=config or ConverterConfig(), parse=parse, tree=parse.tree)


def test_pipeline_runs_stages():
    reg = StageRegistry()
    results = []

    def s1(ctx: ConversionContext) -> None:
        results.append("s1")

    def s2(ctx: ConversionContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="S04", phase=Phase.MAPPING, fn=s1))
    reg.register(StageSpec(id="S05", phase=Phase.TRANSFORM, fn=s2, dependencies=("S04",)))

    ctx = Pipeline(registry=reg).run(_ctx())

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == {"S04", "S05"}


def test_pipeline_halts_on_error():
    reg = StageRegistry()
    results = []

    def fail(ctx: ConversionContext) -> None:
        raise ValueError("test error")

    def after(ctx: ConversionContext) -> None:
        results.append("after")

    reg.register(StageSpec(id="S04", phase=Phase.MAPPING, fn=fail))
    reg.register(StageSpec(id="S05", phase=Phase.TRANSFORM, fn=after, dependencies=("S04",)))

    ctx = Pipeline(registry=reg).run(_ctx())

    assert "test error" in ctx.errors["S04"]
    assert results == []
    assert ctx.completed_stages == set()


def test_icon_and_replacement_stages_gated_by_default():
    ctx = create_pipeline().run(_ctx())
    assert ctx.completed_stages == {"S04", "S05", "S06", "S09", "S10"}
    assert ctx.errors == {}


def test_icon_stage_runs_when_enabled(icon_config):
    ctx = create_pipeline().run(_ctx(icon_config))
    assert "S07" in ctx.completed_stages
    assert "S08" not in ctx.completed_stages


def test_replacement_stage_runs_with_rules():
    config = ConverterConfig.model_validate({
        "attributes": {"replacements": [{"find": "ff", "replace": "00", "elements": ["circle"]}]},
    })
    ctx = create_pipeline().run(_ctx(config))
    assert "S08" in ctx.completed_stages
    assert ctx.tree.children[0].attributes["fill"] == "#000000"


def test_history_tracks_tree_changes():
    ctx = create_pipeline().run(_ctx())
    assert ctx.history["S04"].name == "Svg"
    # Codegen leaves the tree alone
    assert "S10" not in ctx.history
    assert ctx.code.startswith("import * as React from 'react';")
