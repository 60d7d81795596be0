"""Analysis service for dollar-cost averaging backtests."""

import logging
from typing import Iterable

from dca_analyzer.core.calendar import now_eastern
from dca_analyzer.domain.models import InvestmentPolicy, PriceObservation
from dca_analyzer.domain.views import DcaAnalysis
from dca_analyzer.services.market_data_service import MarketDataService
from dca_analyzer.services.performance import summarize
from dca_analyzer.services.schedule_builder import build_schedule

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service for running DCA analyses.

    Fetches price history, builds the investment schedule and summarizes it.
    An empty schedule is a normal "no data" result, not an error.
    """

    def __init__(self, market_data_service: MarketDataService):
        self._market = market_data_service

    def analyze(self, policy: InvestmentPolicy) -> DcaAnalysis:
        """
        Run a DCA analysis using history from the market data service.

        Raises ValidationError for an invalid policy and MarketDataError when
        no history can be retrieved.
        """
        policy.validate()
        observations = self._market.get_price_history(
            policy.symbol,
            policy.start_date,
            policy.end_date,
        )
        return self._run(policy, list(observations))

    def analyze_series(
        self,
        policy: InvestmentPolicy,
        observations: Iterable[PriceObservation],
    ) -> DcaAnalysis:
        """Run a DCA analysis on an already-resolved price series."""
        policy.validate()
        return self._run(policy, list(observations))

    def _run(
        self,
        policy: InvestmentPolicy,
        observations: list[PriceObservation],
    ) -> DcaAnalysis:
        """Build and summarize the schedule for a validated policy."""
        schedule = build_schedule(policy, observations)
        performance = summarize(schedule)

        if schedule:
            logger.info(
                "DCA %s %s from %s to %s: %d entries, invested %s, final value %s",
                policy.symbol,
                policy.frequency.value,
                policy.start_date.isoformat(),
                policy.end_date.isoformat(),
                len(schedule),
                performance.total_invested,
                performance.final_value,
            )
        else:
            logger.info(
                "DCA %s from %s to %s: no matching price data (%d observations)",
                policy.symbol,
                policy.start_date.isoformat(),
                policy.end_date.isoformat(),
                len(observations),
            )

        return DcaAnalysis(
            policy=policy,
            schedule=schedule,
            performance=performance,
            observation_count=len(observations),
            generated_at=now_eastern(),
        )
