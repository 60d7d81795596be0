"""Pydantic schemas for DCA analysis endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from dca_analyzer.core.calendar import Frequency, today_eastern
from dca_analyzer.domain.models import InvestmentPolicy, PriceObservation


class PolicyRequest(BaseModel):
    """Investment policy fields shared by the DCA request schemas."""

    symbol: str = Field(..., min_length=1, max_length=20, description="Stock symbol")
    start_date: date = Field(..., description="First day of the investment window")
    end_date: date = Field(..., description="Last day of the investment window")
    frequency: Frequency = Field(..., description="Contribution cadence")
    amount: Decimal = Field(..., gt=0, description="Contribution per cadence tick")
    reinvest_dividends: bool = Field(default=False, description="Buy shares with dividend cash")
    reinvested_dividends_as_principal: bool = Field(
        default=True,
        description="Count reinvested dividend cash toward total invested",
    )

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("symbol must not be blank")
        return v

    @model_validator(mode="after")
    def check_date_range(self) -> "PolicyRequest":
        if self.start_date > self.end_date:
            raise ValueError("start_date must be on or before end_date")
        return self

    def to_policy(self) -> InvestmentPolicy:
        """Convert to a domain InvestmentPolicy."""
        return InvestmentPolicy(
            symbol=self.symbol,
            start_date=self.start_date,
            end_date=self.end_date,
            frequency=self.frequency,
            amount=self.amount,
            reinvest_dividends=self.reinvest_dividends,
            reinvested_dividends_as_principal=self.reinvested_dividends_as_principal,
        )


class DcaRequest(PolicyRequest):
    """Request schema for a DCA analysis over provider history."""

    @model_validator(mode="after")
    def check_end_not_in_future(self) -> "DcaRequest":
        if self.end_date > today_eastern():
            raise ValueError("end_date must not be in the future")
        return self


class PriceObservationRequest(BaseModel):
    """Request schema for one day of caller-supplied price history."""

    date: date
    price: Decimal = Field(..., gt=0)
    dividend: Optional[Decimal] = Field(default=None, ge=0)

    def to_observation(self) -> PriceObservation:
        return PriceObservation(date=self.date, price=self.price, dividend=self.dividend)


class DcaSeriesRequest(PolicyRequest):
    """Request schema for a DCA analysis over a supplied price series."""

    observations: list[PriceObservationRequest] = Field(default_factory=list)


class LedgerEntryResponse(BaseModel):
    """Response schema for one ledger row."""

    model_config = {"from_attributes": True}

    date: date
    amount: Decimal
    shares_purchased: Decimal
    price: Decimal
    total_shares: Decimal
    total_invested: Decimal
    current_value: Decimal
    dividend: Decimal
    cumulative_dividends: Decimal


class PerformanceResponse(BaseModel):
    """Response schema for summary performance metrics."""

    model_config = {"from_attributes": True}

    total_invested: Decimal
    final_value: Decimal
    total_return: Decimal
    percentage_return: Decimal
    annualized_return: Decimal
    dividends_received: Decimal


class DcaResponse(BaseModel):
    """Response schema for a completed DCA analysis."""

    symbol: str
    frequency: Frequency
    start_date: date
    end_date: date
    has_data: bool
    observation_count: int
    schedule: list[LedgerEntryResponse]
    performance: PerformanceResponse
    generated_at: Optional[datetime] = None
