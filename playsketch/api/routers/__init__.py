"""API routers for different resource types."""

from playsketch.api.routers.classify import router as classify_router

__all__ = [
    "classify_router",
]
