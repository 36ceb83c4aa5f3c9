"""
Field configuration for path classification.

Every threshold the classifiers use lives here so a diagram template can be
retuned without touching decision logic. The two layout values owned by the
diagram renderer (center_x, line_of_scrimmage) can be overridden via
environment variables.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Optional

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class FieldConfig:
    """Diagram layout plus classification thresholds.

    All distances are diagram pixel units, angles are degrees.
    """

    # Diagram layout (supplied by the renderer)
    center_x: float = field(default_factory=lambda: _env_float("PLAYSKETCH_CENTER_X", 350.0))
    line_of_scrimmage: float = field(
        default_factory=lambda: _env_float("PLAYSKETCH_LINE_OF_SCRIMMAGE", 200.0)
    )
    center_band: float = 50.0           # Half-width of the "center" field side

    # Feature extraction
    inside_tolerance: float = 20.0      # Center-aligned players count as inside below this drift
    break_angle: float = 30.0           # Segment turn that counts as a cut
    vertical_angle_min: float = 60.0
    vertical_angle_max: float = 120.0
    lateral_ratio: float = 0.5          # |vertical| <= ratio * |horizontal| -> lateral
    curved_min_points: int = 5
    short_distance: float = 80.0        # short < 80 <= medium < 150 <= deep
    deep_distance: float = 150.0

    # Route rules
    go_max_drift: float = 40.0
    slant_min_rise: float = 20.0
    curl_flat_band: float = 20.0
    deep_option_distance: float = 100.0

    # Blocking rules
    pull_min_lateral: float = 60.0
    pull_min_distance: float = 80.0
    run_block_max_distance: float = 50.0

    # Coverage rules
    deep_zone_drop: float = 120.0
    quarter_drop: float = 60.0
    hook_drop: float = 20.0
    deep_third_band: float = 80.0
    flat_min_offset: float = 150.0

    # Blitz gap buckets (distance of endpoint from center)
    a_gap_max: float = 30.0
    b_gap_max: float = 70.0
    c_gap_max: float = 120.0

    # Motion rules
    jet_min_lateral: float = 100.0
    jet_behind_line: float = 20.0
    orbit_min_points: int = 3
    orbit_min_vertical: float = 30.0
    orbit_min_lateral: float = 60.0
    across_min_lateral: float = 80.0
    across_max_vertical: float = 30.0
    return_min_lateral: float = 40.0

    @classmethod
    def from_env(cls) -> "FieldConfig":
        """Create config from environment variables, failing on bad values."""
        config = cls()
        errors = config.validate()
        if errors:
            logger.warning(f"Invalid field configuration: {errors}")
            raise ValueError("; ".join(errors))
        return config

    def with_overrides(self, **overrides) -> "FieldConfig":
        """Return a copy with some thresholds retuned."""
        return replace(self, **overrides)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.center_band < 0:
            errors.append("center_band must be non-negative")
        if not 0 < self.break_angle < 180:
            errors.append("break_angle must be between 0 and 180 degrees")
        if self.vertical_angle_min >= self.vertical_angle_max:
            errors.append("vertical_angle_min must be below vertical_angle_max")
        if not 0 < self.short_distance < self.deep_distance:
            errors.append("short_distance must be positive and below deep_distance")
        if not self.hook_drop < self.quarter_drop < self.deep_zone_drop:
            errors.append("coverage drops must increase: hook < quarter < deep")
        if not 0 < self.a_gap_max < self.b_gap_max < self.c_gap_max:
            errors.append("gap buckets must increase: A < B < C")
        return errors


# Process-wide default
_config: Optional[FieldConfig] = None


def get_config() -> FieldConfig:
    """Get the default field configuration."""
    global _config
    if _config is None:
        _config = FieldConfig.from_env()
    return _config


def set_config(config: Optional[FieldConfig]) -> None:
    """
    Replace the default field configuration.

    Passing None resets to environment defaults on next access.
    """
    global _config
    _config = config


def resolve_config(config: Optional[FieldConfig]) -> FieldConfig:
    """Explicit config wins over the process default."""
    return config if config is not None else get_config()
