"""View model for a completed DCA analysis."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from dca_analyzer.domain.models import InvestmentPolicy, LedgerEntry, PerformanceSummary


@dataclass
class DcaAnalysis:
    """Schedule and performance produced for one investment policy."""

    policy: InvestmentPolicy
    schedule: list[LedgerEntry] = field(default_factory=list)
    performance: PerformanceSummary = field(default_factory=PerformanceSummary.zero)
    observation_count: int = 0
    generated_at: Optional[datetime] = None

    @property
    def has_data(self) -> bool:
        """Return False when no price data matched the policy."""
        return bool(self.schedule)
