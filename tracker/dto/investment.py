from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import Field, StringConstraints, field_validator

from .base import CamelModel, Money
from ..services.valuation import Valuation


class CreateInvestmentRequest(CamelModel):
    symbol: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    shares: Decimal = Field(gt=0)
    purchase_price: Decimal = Field(gt=0)
    purchase_date: date

    @field_validator("symbol")
    @classmethod
    def upper_symbol(cls, v: str) -> str:
        return v.upper()


class InvestmentDto(CamelModel):
    id: int
    symbol: str
    name: str
    shares: Money
    purchase_price: Money
    purchase_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_investment(cls, investment) -> "InvestmentDto":
        return cls(
            id=investment.id,
            symbol=investment.symbol,
            name=investment.name,
            shares=investment.shares,
            purchase_price=investment.purchase_price,
            purchase_date=investment.purchase_date,
            created_at=investment.created_at,
            updated_at=investment.updated_at,
        )


class InvestmentSummaryDto(CamelModel):
    id: int
    symbol: str
    name: str
    shares: Money
    purchase_price: Money
    purchase_date: date
    current_price: Money
    current_value: Money
    total_cost: Money
    gain_loss: Money
    gain_loss_percentage: Money

    @classmethod
    def from_valuation(cls, investment, current_price: Decimal, valuation: Valuation) -> "InvestmentSummaryDto":
        return cls(
            id=investment.id,
            symbol=investment.symbol,
            name=investment.name,
            shares=investment.shares,
            purchase_price=investment.purchase_price,
            purchase_date=investment.purchase_date,
            current_price=current_price,
            current_value=valuation.current_value,
            total_cost=valuation.total_cost,
            gain_loss=valuation.gain_loss,
            gain_loss_percentage=valuation.gain_loss_pct,
        )
