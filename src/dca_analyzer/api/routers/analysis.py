"""DCA analysis endpoints."""

from fastapi import APIRouter, Depends

from dca_analyzer.api.deps import get_analysis_service
from dca_analyzer.api.schemas import (
    DcaRequest,
    DcaSeriesRequest,
    LedgerEntryResponse,
    PerformanceResponse,
    DcaResponse,
)
from dca_analyzer.domain.views import DcaAnalysis
from dca_analyzer.services import AnalysisService

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _to_response(analysis: DcaAnalysis) -> DcaResponse:
    policy = analysis.policy
    return DcaResponse(
        symbol=policy.symbol,
        frequency=policy.frequency,
        start_date=policy.start_date,
        end_date=policy.end_date,
        has_data=analysis.has_data,
        observation_count=analysis.observation_count,
        schedule=[LedgerEntryResponse.model_validate(e) for e in analysis.schedule],
        performance=PerformanceResponse.model_validate(analysis.performance),
        generated_at=analysis.generated_at,
    )


@router.post("/dca", response_model=DcaResponse)
def run_dca(
    request: DcaRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
) -> DcaResponse:
    """Backtest a DCA policy against the provider's price history."""
    return _to_response(analysis.analyze(request.to_policy()))


@router.post("/dca/series", response_model=DcaResponse)
def run_dca_on_series(
    request: DcaSeriesRequest,
    analysis: AnalysisService = Depends(get_analysis_service),
) -> DcaResponse:
    """Backtest a DCA policy against a caller-supplied price series."""
    observations = [o.to_observation() for o in request.observations]
    return _to_response(analysis.analyze_series(request.to_policy(), observations))
