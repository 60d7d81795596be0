"""API routers package."""

from dca_analyzer.api.routers.analysis import router as analysis_router

__all__ = [
    "analysis_router",
]
