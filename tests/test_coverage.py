"""Tests for coverage zone detection.

Defenders align at y=0 here; a drop toward the offense's end zone is
decreasing y, so a 150 unit drop ends at y=-150.
"""

import pytest

from playsketch.catalog.labels import CoverageLabel
from playsketch.classifiers.coverage import COVERAGE_RULES, detect_coverage_zone
from playsketch.core.enums import Confidence, DrawTool
from playsketch.core.point import Point


class TestDeepZones:
    def test_deep_drop_near_center_is_deep_third(self, pts, config):
        result = detect_coverage_zone(pts((350, 0), (350, -150)), 0, config)
        assert result.label == CoverageLabel.DEEP_THIRD
        assert result.confidence == Confidence.HIGH

    def test_third_band_edge_is_inclusive(self, pts, config):
        result = detect_coverage_zone(pts((430, 0), (430, -150)), 0, config)
        assert result.label == CoverageLabel.DEEP_THIRD

    def test_deep_drop_wide_is_deep_half(self, pts, config):
        result = detect_coverage_zone(pts((200, 0), (200, -150)), 0, config)
        assert result.label == CoverageLabel.DEEP_HALF
        assert result.confidence == Confidence.HIGH


class TestUnderneathZones:
    @pytest.mark.parametrize("drop,expected,confidence", [
        (121, CoverageLabel.DEEP_THIRD, Confidence.HIGH),
        (120, CoverageLabel.QUARTER, Confidence.MEDIUM),
        (100, CoverageLabel.QUARTER, Confidence.MEDIUM),
        (61, CoverageLabel.QUARTER, Confidence.MEDIUM),
        (60, CoverageLabel.HOOK_CURL, Confidence.MEDIUM),
        (40, CoverageLabel.HOOK_CURL, Confidence.MEDIUM),
        (21, CoverageLabel.HOOK_CURL, Confidence.MEDIUM),
        (20, CoverageLabel.MAN, Confidence.LOW),
    ])
    def test_drop_buckets(self, pts, config, drop, expected, confidence):
        result = detect_coverage_zone(pts((350, 100), (350, 100 - drop)), 100, config)
        assert result.label == expected
        assert result.confidence == confidence

    def test_shallow_and_wide_is_flat(self, pts, config):
        result = detect_coverage_zone(pts((450, 100), (550, 95)), 100, config)
        assert result.label == CoverageLabel.FLAT
        assert result.confidence == Confidence.HIGH

    def test_shallow_inside_is_man(self, pts, config):
        result = detect_coverage_zone(pts((350, 100), (360, 90)), 100, config)
        assert result.label == CoverageLabel.MAN
        assert result.confidence == Confidence.LOW

    def test_drop_measured_from_alignment_not_first_point(self, pts, config):
        """The drawn path may start off the player; alignment y decides the drop."""
        result = detect_coverage_zone(pts((350, 50), (350, 20)), 100, config)
        assert result.label == CoverageLabel.QUARTER


class TestEndpoint:
    def test_endpoint_is_last_point(self, pts, config):
        result = detect_coverage_zone(pts((350, 0), (340, -40), (330, -150)), 0, config)
        assert result.endpoint == Point(330, -150)
        assert result.kind == DrawTool.COVERAGE

    def test_single_point_keeps_its_endpoint(self, config):
        result = detect_coverage_zone([Point(320, 80)], 100, config)
        assert result.label == CoverageLabel.MAN
        assert result.confidence == Confidence.LOW
        assert result.endpoint == Point(320, 80)

    def test_empty_path_synthesizes_endpoint(self, config):
        result = detect_coverage_zone([], 100, config)
        assert result.label == CoverageLabel.MAN
        assert result.confidence == Confidence.LOW
        assert result.endpoint == Point(350, 100)

    def test_to_dict_includes_endpoint(self, pts, config):
        data = detect_coverage_zone(pts((350, 0), (350, -150)), 0, config).to_dict()
        assert data["endpoint"] == {"x": 350, "y": -150}
        assert data["label"] == "Deep Third"


def test_rule_order():
    assert [r.label for r in COVERAGE_RULES] == [
        CoverageLabel.DEEP_THIRD,
        CoverageLabel.DEEP_HALF,
        CoverageLabel.QUARTER,
        CoverageLabel.HOOK_CURL,
        CoverageLabel.FLAT,
        CoverageLabel.MAN,
    ]
