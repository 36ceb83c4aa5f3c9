"""Tests for pre-snap motion detection (center x=350, line of scrimmage y=200)."""

import pytest

from playsketch.catalog.labels import MotionLabel
from playsketch.classifiers.motion import MOTION_RULES, detect_motion_type, motion_direction
from playsketch.core.enums import Confidence, DrawTool, MotionDirection
from playsketch.core.point import Point


class TestMotionDirection:
    def test_toward_center(self, config):
        assert motion_direction(Point(250, 230), 100, config) == MotionDirection.TOWARD_CENTER

    def test_away_from_center(self, config):
        assert motion_direction(Point(50, 230), 100, config) == MotionDirection.AWAY_FROM_CENTER

    def test_equal_distance_is_away(self, config):
        assert motion_direction(Point(600, 230), 100, config) == MotionDirection.AWAY_FROM_CENTER


class TestMotionClassifier:
    def test_jet(self, pts, config):
        result = detect_motion_type(pts((100, 230), (250, 230)), 100, config)
        assert result.label == MotionLabel.JET
        assert result.confidence == Confidence.HIGH
        assert result.direction == MotionDirection.TOWARD_CENTER

    def test_jet_needs_depth_behind_line(self, pts, config):
        result = detect_motion_type(pts((100, 210), (250, 210)), 100, config)
        assert result.label == MotionLabel.ACROSS
        assert result.confidence == Confidence.HIGH

    def test_orbit(self, pts, config):
        path = pts((100, 210), (130, 240), (170, 250), (190, 260))
        result = detect_motion_type(path, 100, config)
        assert result.label == MotionLabel.ORBIT
        assert result.confidence == Confidence.MEDIUM

    def test_orbit_needs_more_than_three_points(self, pts, config):
        result = detect_motion_type(pts((100, 210), (150, 250), (190, 260)), 100, config)
        assert result.label != MotionLabel.ORBIT

    def test_across(self, pts, config):
        result = detect_motion_type(pts((200, 210), (300, 215)), 200, config)
        assert result.label == MotionLabel.ACROSS

    def test_return(self, pts, config):
        result = detect_motion_type(pts((200, 210), (150, 210)), 200, config)
        assert result.label == MotionLabel.RETURN
        assert result.confidence == Confidence.MEDIUM
        assert result.direction == MotionDirection.AWAY_FROM_CENTER

    def test_short_move_is_shift(self, pts, config):
        result = detect_motion_type(pts((200, 210), (220, 210)), 200, config)
        assert result.label == MotionLabel.SHIFT
        assert result.confidence == Confidence.LOW

    def test_start_x_defaults_to_first_point(self, pts, config):
        result = detect_motion_type(pts((100, 230), (250, 230)), config=config)
        assert result.label == MotionLabel.JET

    def test_endpoint_and_tag(self, pts, config):
        result = detect_motion_type(pts((100, 230), (250, 230)), 100, config)
        assert result.kind == DrawTool.MOTION
        assert result.endpoint == Point(250, 230)
        assert result.to_dict()["direction"] == "toward-center"


class TestDegenerate:
    @pytest.mark.parametrize("path", [[], [Point(120, 230)]])
    def test_defaults_to_low_shift(self, path, config):
        result = detect_motion_type(path, 100, config)
        assert result.label == MotionLabel.SHIFT
        assert result.confidence == Confidence.LOW

    def test_empty_path_synthesizes_endpoint(self, config):
        result = detect_motion_type([], 100, config)
        assert result.endpoint == Point(100, 200)
        assert result.direction == MotionDirection.AWAY_FROM_CENTER

    def test_single_point_endpoint(self, config):
        assert detect_motion_type([Point(120, 230)], 100, config).endpoint == Point(120, 230)


def test_rule_order():
    assert [r.label for r in MOTION_RULES] == [
        MotionLabel.JET,
        MotionLabel.ORBIT,
        MotionLabel.ACROSS,
        MotionLabel.RETURN,
        MotionLabel.SHIFT,
    ]
