"""Tests for route feature extraction."""

import pytest

from playsketch.classifiers.features import (
    NO_BREAK,
    DistanceBand,
    PathCharacteristics,
    detect_break,
    distance_band,
    extract_characteristics,
    extract_route_features,
    is_moving_inside,
)
from playsketch.core.enums import (
    Curvature,
    Direction,
    EndDirection,
    FieldSide,
    PlayerSide,
)


# =============================================================================
# Break Detection
# =============================================================================


class TestDetectBreak:
    def test_straight_line_has_no_break(self, pts, config):
        assert detect_break(pts((0, 0), (0, -10), (0, -20)), config) == NO_BREAK

    def test_right_angle_cut(self, pts, config):
        assert detect_break(pts((0, 0), (0, -50), (50, -50)), config) == 1

    def test_reports_first_cut(self, pts, config):
        path = pts((0, 0), (0, -10), (0, -50), (50, -50), (50, -100))
        assert detect_break(path, config) == 2

    def test_gentle_turn_is_not_a_break(self, pts, config):
        # About 25 degrees of turn
        assert detect_break(pts((0, 0), (0, -100), (47, -200)), config) == NO_BREAK

    def test_full_reversal_counts(self, pts, config):
        assert detect_break(pts((0, 0), (0, -50), (0, -30)), config) == 1

    def test_seam_wraparound_is_not_a_break(self, pts, config):
        """170 and -170 degrees are 20 degrees apart, not 340."""
        assert detect_break(pts((0, 0), (-100, -17.6), (-200, 0)), config) == NO_BREAK

    def test_two_points_never_break(self, pts, config):
        assert detect_break(pts((0, 0), (50, -50)), config) == NO_BREAK

    def test_threshold_is_configurable(self, pts, config):
        path = pts((0, 0), (0, -100), (47, -200))
        assert detect_break(path, config.with_overrides(break_angle=20.0)) == 1


# =============================================================================
# Inside / Outside
# =============================================================================


class TestIsMovingInside:
    def test_left_side_moving_right(self, config):
        assert is_moving_inside(30, FieldSide.LEFT, config)
        assert not is_moving_inside(-30, FieldSide.LEFT, config)

    def test_right_side_moving_left(self, config):
        assert is_moving_inside(-30, FieldSide.RIGHT, config)
        assert not is_moving_inside(30, FieldSide.RIGHT, config)

    def test_center_uses_tolerance(self, config):
        assert is_moving_inside(10, FieldSide.CENTER, config)
        assert is_moving_inside(-19.9, FieldSide.CENTER, config)
        assert not is_moving_inside(20, FieldSide.CENTER, config)


# =============================================================================
# Distance Bands
# =============================================================================


class TestDistanceBand:
    @pytest.mark.parametrize("distance,expected", [
        (0, DistanceBand.SHORT),
        (79.9, DistanceBand.SHORT),
        (80, DistanceBand.MEDIUM),
        (149.9, DistanceBand.MEDIUM),
        (150, DistanceBand.DEEP),
        (400, DistanceBand.DEEP),
    ])
    def test_bands(self, config, distance, expected):
        assert distance_band(distance, config) == expected

    def test_bands_retune(self, config):
        scaled = config.with_overrides(short_distance=40.0, deep_distance=75.0)
        assert distance_band(60, scaled) == DistanceBand.MEDIUM
        assert distance_band(80, scaled) == DistanceBand.DEEP


# =============================================================================
# Full Extraction
# =============================================================================


class TestExtractRouteFeatures:
    def test_net_movement_signs(self, pts, config):
        features = extract_route_features(pts((100, 300), (130, 250)), player_start_x=100, config=config)
        traits = features.characteristics
        assert traits.net_vertical == 50
        assert traits.net_horizontal == 30
        assert traits.total_distance == pytest.approx((30 ** 2 + 50 ** 2) ** 0.5)

    def test_upfield(self, pts, config):
        traits = extract_route_features(pts((100, 300), (100, 200)), config=config).characteristics
        assert traits.direction == Direction.UPFIELD
        assert traits.end_direction == EndDirection.VERTICAL
        assert traits.curvature == Curvature.STRAIGHT

    def test_back_toward_line(self, pts, config):
        traits = extract_route_features(pts((100, 300), (100, 340)), config=config).characteristics
        assert traits.direction == Direction.DOWNFIELD
        assert traits.end_direction == EndDirection.BACK

    def test_lateral_boundary_is_lateral(self, pts, config):
        """|vertical| equal to half of |horizontal| still counts as lateral."""
        traits = extract_route_features(pts((100, 300), (200, 250)), config=config).characteristics
        assert traits.direction == Direction.LATERAL

    def test_curved_needs_five_points(self, pts, config):
        curve = pts((100, 300), (100, 280), (101, 260), (102, 240), (103, 220))
        assert extract_route_features(curve, config=config).curvature == Curvature.CURVED
        assert extract_route_features(curve[:4], config=config).curvature == Curvature.STRAIGHT

    def test_breaking(self, pts, config):
        features = extract_route_features(pts((100, 300), (100, 220), (140, 220)), config=config)
        assert features.has_major_break
        assert features.break_index == 1
        assert features.curvature == Curvature.BREAKING

    def test_end_direction_uses_final_segment(self, pts, config):
        features = extract_route_features(
            pts((100, 300), (100, 220), (140, 220)), player_start_x=100, config=config,
        )
        assert features.end_direction == EndDirection.INSIDE

    def test_outside_from_right_side(self, pts, config):
        features = extract_route_features(
            pts((500, 300), (500, 220), (540, 220)), player_start_x=500, config=config,
        )
        assert not features.is_moving_inside
        assert features.end_direction == EndDirection.OUTSIDE

    def test_start_x_defaults_to_first_point(self, pts, config):
        features = extract_route_features(pts((500, 300), (460, 300)), config=config)
        assert features.start_side == FieldSide.RIGHT
        assert features.is_moving_inside

    def test_player_side_recorded(self, pts, config):
        features = extract_route_features(
            pts((100, 300), (100, 200)), player_side=PlayerSide.DEFENSE, config=config,
        )
        assert features.player_side == PlayerSide.DEFENSE

    def test_zero_length_path(self, pts, config):
        traits = extract_route_features(pts((100, 300), (100, 300)), config=config).characteristics
        assert traits.total_distance == 0
        assert traits.direction == Direction.LATERAL


class TestExtractCharacteristics:
    def test_degenerate_path_is_zeroed(self, pts, config):
        assert extract_characteristics(pts((1, 1)), config=config) == PathCharacteristics()
        assert extract_characteristics([], config=config) == PathCharacteristics()

    def test_to_dict_uses_plain_values(self, pts, config):
        data = extract_characteristics(pts((100, 300), (100, 200)), config=config).to_dict()
        assert data["direction"] == "upfield"
        assert data["curvature"] == "straight"
        assert data["end_direction"] == "vertical"
