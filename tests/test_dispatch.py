"""Tests for the draw-tool dispatcher."""

import pytest

from playsketch.catalog.labels import (
    BlockLabel,
    CoverageLabel,
    GapLabel,
    MotionLabel,
    RouteLabel,
)
from playsketch.classifiers import classify_path
from playsketch.classifiers.results import (
    BlockClassification,
    CoverageClassification,
    GapClassification,
    MotionClassification,
    RouteClassification,
)
from playsketch.config import FieldConfig, set_config
from playsketch.core.enums import DrawTool
from playsketch.core.point import Point


class TestDispatch:
    def test_route(self, pts, config):
        result = classify_path(DrawTool.ROUTE, pts((100, 200), (100, 0)), config=config)
        assert isinstance(result, RouteClassification)
        assert result.label == RouteLabel.GO

    def test_block(self, pts, config):
        result = classify_path(DrawTool.BLOCK, pts((300, 200), (300, 180)), config=config)
        assert isinstance(result, BlockClassification)
        assert result.label == BlockLabel.RUN_BLOCK

    def test_coverage_defaults_alignment_to_first_point(self, pts, config):
        result = classify_path(DrawTool.COVERAGE, pts((350, 100), (350, -50)), config=config)
        assert isinstance(result, CoverageClassification)
        assert result.label == CoverageLabel.DEEP_THIRD

    def test_coverage_uses_explicit_alignment(self, pts, config):
        result = classify_path(
            DrawTool.COVERAGE, pts((350, 50), (350, 20)), player_start_y=100, config=config,
        )
        assert result.label == CoverageLabel.QUARTER

    def test_blitz(self, pts, config):
        result = classify_path(DrawTool.BLITZ, pts((335, 150), (335, 205)), config=config)
        assert isinstance(result, GapClassification)
        assert result.label == GapLabel.STRONG_A

    def test_motion(self, pts, config):
        result = classify_path(DrawTool.MOTION, pts((100, 230), (250, 230)), config=config)
        assert isinstance(result, MotionClassification)
        assert result.label == MotionLabel.JET

    def test_accepts_tool_name(self, pts, config):
        result = classify_path("block", pts((300, 200), (300, 180)), config=config)
        assert result.kind == DrawTool.BLOCK

    def test_unknown_tool(self, pts, config):
        with pytest.raises(ValueError):
            classify_path("sketch", pts((0, 0), (0, 10)), config=config)


class TestEmptyPaths:
    @pytest.mark.parametrize("tool", list(DrawTool))
    def test_every_tool_answers(self, tool, config):
        result = classify_path(tool, [], config=config)
        assert result.kind == tool

    def test_empty_coverage_sits_on_line(self, config):
        result = classify_path(DrawTool.COVERAGE, [], config=config)
        assert result.label == CoverageLabel.MAN
        assert result.endpoint == Point(350, 200)


def test_uses_default_config_when_omitted(pts):
    set_config(FieldConfig(center_x=200.0))
    result = classify_path(DrawTool.BLITZ, pts((190, 150), (190, 205)))
    assert result.label == GapLabel.STRONG_A
