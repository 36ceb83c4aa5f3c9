"""Pydantic schemas for API request/response models."""

from playsketch.api.schemas.classify import (
    ClassifyRequest,
    ClassifyResponse,
    FieldSchema,
    MotionTypeSchema,
    OptionsResponse,
    PointSchema,
    ZoneSchema,
)

__all__ = [
    "ClassifyRequest",
    "ClassifyResponse",
    "FieldSchema",
    "MotionTypeSchema",
    "OptionsResponse",
    "PointSchema",
    "ZoneSchema",
]
