"""Domain models package."""

from dca_analyzer.core.calendar import Frequency
from dca_analyzer.domain.models.market import PriceObservation
from dca_analyzer.domain.models.policy import InvestmentPolicy
from dca_analyzer.domain.models.ledger import LedgerEntry, PerformanceSummary

__all__ = [
    "Frequency",
    "PriceObservation",
    "InvestmentPolicy",
    "LedgerEntry",
    "PerformanceSummary",
]
