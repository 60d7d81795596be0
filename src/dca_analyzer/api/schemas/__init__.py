"""Pydantic schemas for API request/response."""

from dca_analyzer.api.schemas.analysis import (
    PolicyRequest,
    DcaRequest,
    DcaSeriesRequest,
    PriceObservationRequest,
    LedgerEntryResponse,
    PerformanceResponse,
    DcaResponse,
)

__all__ = [
    "PolicyRequest",
    "DcaRequest",
    "DcaSeriesRequest",
    "PriceObservationRequest",
    "LedgerEntryResponse",
    "PerformanceResponse",
    "DcaResponse",
]
