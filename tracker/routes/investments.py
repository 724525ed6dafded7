from typing import List

from fastapi import APIRouter, Depends, status

from ..auth.dependencies import get_current_user
from ..database.models import User
from ..dependencies.portfolio_dependencies import get_investment_service
from ..dto.base import MessageResponse
from ..dto.investment import CreateInvestmentRequest, InvestmentDto, InvestmentSummaryDto
from ..services.investment_service import InvestmentService
from .params import EntityId

router = APIRouter(prefix="/portfolios/{portfolio_id}/investments", tags=["investments"])


@router.get("", response_model=List[InvestmentSummaryDto])
def list_investments(
    portfolio_id: EntityId,
    current_user: User = Depends(get_current_user),
    investment_service: InvestmentService = Depends(get_investment_service),
):
    valuations = investment_service.list_valuations(current_user.id, portfolio_id)
    return [
        InvestmentSummaryDto.from_valuation(investment, current_price, valuation)
        for investment, current_price, valuation in valuations
    ]


@router.post("", response_model=InvestmentDto, status_code=status.HTTP_201_CREATED)
def create_investment(
    portfolio_id: EntityId,
    payload: CreateInvestmentRequest,
    current_user: User = Depends(get_current_user),
    investment_service: InvestmentService = Depends(get_investment_service),
):
    investment = investment_service.create_investment(
        current_user.id,
        portfolio_id,
        symbol=payload.symbol,
        name=payload.name,
        shares=payload.shares,
        purchase_price=payload.purchase_price,
        purchase_date=payload.purchase_date,
    )
    return InvestmentDto.from_investment(investment)


@router.get("/{investment_id}", response_model=InvestmentDto)
def get_investment(
    portfolio_id: EntityId,
    investment_id: EntityId,
    current_user: User = Depends(get_current_user),
    investment_service: InvestmentService = Depends(get_investment_service),
):
    investment = investment_service.get_owned_investment(current_user.id, portfolio_id, investment_id)
    return InvestmentDto.from_investment(investment)


@router.put("/{investment_id}", response_model=InvestmentDto)
def update_investment(
    portfolio_id: EntityId,
    investment_id: EntityId,
    payload: CreateInvestmentRequest,
    current_user: User = Depends(get_current_user),
    investment_service: InvestmentService = Depends(get_investment_service),
):
    investment = investment_service.update_investment(
        current_user.id,
        portfolio_id,
        investment_id,
        symbol=payload.symbol,
        name=payload.name,
        shares=payload.shares,
        purchase_price=payload.purchase_price,
        purchase_date=payload.purchase_date,
    )
    return InvestmentDto.from_investment(investment)


@router.delete("/{investment_id}", response_model=MessageResponse)
def delete_investment(
    portfolio_id: EntityId,
    investment_id: EntityId,
    current_user: User = Depends(get_current_user),
    investment_service: InvestmentService = Depends(get_investment_service),
):
    investment_service.delete_investment(current_user.id, portfolio_id, investment_id)
    return MessageResponse(message="Investment deleted successfully")
