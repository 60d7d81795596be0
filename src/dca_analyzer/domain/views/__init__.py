"""View models for service outputs."""

from dca_analyzer.domain.views.analysis import DcaAnalysis

__all__ = [
    "DcaAnalysis",
]
