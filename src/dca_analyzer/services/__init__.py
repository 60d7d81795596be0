"""Services package."""

from dca_analyzer.services.schedule_builder import build_schedule
from dca_analyzer.services.performance import summarize
from dca_analyzer.services.market_data_service import MarketDataService
from dca_analyzer.services.analysis_service import AnalysisService

__all__ = [
    "build_schedule",
    "summarize",
    "MarketDataService",
    "AnalysisService",
]
