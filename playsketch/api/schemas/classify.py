"""Pydantic schemas for path classification requests and responses."""

from typing import Optional

from pydantic import BaseModel, Field

from playsketch.catalog.motion import MotionDefinition
from playsketch.catalog.zones import ZoneShape
from playsketch.classifiers.results import ClassificationResult
from playsketch.config import FieldConfig
from playsketch.core.enums import DrawTool, PlayerSide
from playsketch.core.point import Point


class PointSchema(BaseModel):
    """Point in diagram pixel space."""

    x: float
    y: float

    def to_point(self) -> Point:
        return Point(self.x, self.y)

    @classmethod
    def from_point(cls, point: Point) -> "PointSchema":
        return cls(x=point.x, y=point.y)


class FieldSchema(BaseModel):
    """Diagram layout supplied by the renderer for this template."""

    center_x: Optional[float] = None
    line_of_scrimmage: Optional[float] = None

    def apply(self, config: FieldConfig) -> FieldConfig:
        overrides = self.model_dump(exclude_none=True)
        return config.with_overrides(**overrides) if overrides else config


class ClassifyRequest(BaseModel):
    """A single drawn path to classify."""

    tool: DrawTool = DrawTool.ROUTE
    path: list[PointSchema] = Field(default_factory=list)
    player_side: PlayerSide = PlayerSide.OFFENSE
    player_start_x: Optional[float] = None
    player_start_y: Optional[float] = None
    field: Optional[FieldSchema] = None


class ZoneSchema(BaseModel):
    center: PointSchema
    width: float
    height: float
    is_deep: bool
    color: str

    @classmethod
    def from_model(cls, zone: ZoneShape) -> "ZoneSchema":
        return cls(
            center=PointSchema.from_point(zone.center),
            width=zone.width,
            height=zone.height,
            is_deep=zone.is_deep,
            color=zone.color,
        )


class ClassifyResponse(BaseModel):
    """Suggested label plus ranked alternatives for the dialog."""

    kind: DrawTool
    label: str
    confidence: str
    options: list[str] = []

    # Classifier-specific extras
    characteristics: Optional[dict] = None
    endpoint: Optional[PointSchema] = None
    direction: Optional[str] = None
    zone: Optional[ZoneSchema] = None

    @classmethod
    def from_result(
        cls,
        result: ClassificationResult,
        options: list[str],
        zone: Optional[ZoneShape] = None,
    ) -> "ClassifyResponse":
        data = result.to_dict()
        endpoint = data.get("endpoint")
        return cls(
            kind=result.kind,
            label=data["label"],
            confidence=data["confidence"],
            options=options,
            characteristics=data.get("characteristics"),
            endpoint=PointSchema(**endpoint) if endpoint else None,
            direction=data.get("direction"),
            zone=ZoneSchema.from_model(zone) if zone else None,
        )


class OptionsResponse(BaseModel):
    tool: DrawTool
    options: list[str]


class MotionTypeSchema(BaseModel):
    name: str
    description: str
    is_legal_at_snap: bool
    requires_set: bool

    @classmethod
    def from_model(cls, motion: MotionDefinition) -> "MotionTypeSchema":
        return cls(
            name=motion.name,
            description=motion.description,
            is_legal_at_snap=motion.is_legal_at_snap,
            requires_set=motion.requires_set,
        )
