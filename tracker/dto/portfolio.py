from datetime import datetime
from typing import Annotated, List, Optional
from pydantic import Field, StringConstraints

from .base import CamelModel, Money
from .investment import InvestmentDto
from ..services.valuation import Aggregate


class CreatePortfolioRequest(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    description: Optional[str] = Field(default=None, max_length=1000)


class PortfolioDto(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    investments: Optional[List[InvestmentDto]] = None

    @classmethod
    def from_portfolio(cls, portfolio, include_investments: bool = True) -> "PortfolioDto":
        investments = None
        if include_investments:
            investments = [InvestmentDto.from_investment(item) for item in portfolio.investments]
        return cls(
            id=portfolio.id,
            name=portfolio.name,
            description=portfolio.description,
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
            investments=investments,
        )


class PortfolioSummaryDto(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    investment_count: int
    total_value: Money
    total_cost: Money
    total_gain_loss: Money
    total_gain_loss_percentage: Money

    @classmethod
    def from_aggregate(cls, portfolio, totals: Aggregate) -> "PortfolioSummaryDto":
        return cls(
            id=portfolio.id,
            name=portfolio.name,
            description=portfolio.description,
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
            investment_count=totals.count,
            total_value=totals.total_value,
            total_cost=totals.total_cost,
            total_gain_loss=totals.total_gain_loss,
            total_gain_loss_percentage=totals.total_gain_loss_pct,
        )
