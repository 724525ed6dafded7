from typing import List

from fastapi import APIRouter, Depends, status

from ..auth.dependencies import get_current_user
from ..database.models import User
from ..dependencies.portfolio_dependencies import get_portfolio_service
from ..dto.base import MessageResponse
from ..dto.portfolio import CreatePortfolioRequest, PortfolioDto, PortfolioSummaryDto
from ..services.portfolio_service import PortfolioService
from .params import EntityId

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.get("", response_model=List[PortfolioDto])
def list_portfolios(
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    portfolios = portfolio_service.list_portfolios(current_user.id)
    return [PortfolioDto.from_portfolio(p, include_investments=False) for p in portfolios]


@router.get("/summary", response_model=List[PortfolioSummaryDto])
def portfolio_summaries(
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    summaries = portfolio_service.summarize_portfolios(current_user.id)
    return [PortfolioSummaryDto.from_aggregate(portfolio, totals) for portfolio, totals in summaries]


@router.post("", response_model=PortfolioDto, status_code=status.HTTP_201_CREATED)
def create_portfolio(
    payload: CreatePortfolioRequest,
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    portfolio = portfolio_service.create_portfolio(current_user.id, payload.name, payload.description)
    return PortfolioDto.from_portfolio(portfolio, include_investments=False)


@router.get("/{portfolio_id}", response_model=PortfolioDto)
def get_portfolio(
    portfolio_id: EntityId,
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    portfolio = portfolio_service.get_owned_portfolio(current_user.id, portfolio_id)
    return PortfolioDto.from_portfolio(portfolio)


@router.put("/{portfolio_id}", response_model=PortfolioDto)
def update_portfolio(
    portfolio_id: EntityId,
    payload: CreatePortfolioRequest,
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    portfolio = portfolio_service.update_portfolio(
        current_user.id, portfolio_id, payload.name, payload.description
    )
    return PortfolioDto.from_portfolio(portfolio, include_investments=False)


@router.delete("/{portfolio_id}", response_model=MessageResponse)
def delete_portfolio(
    portfolio_id: EntityId,
    current_user: User = Depends(get_current_user),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
):
    portfolio_service.delete_portfolio(current_user.id, portfolio_id)
    return MessageResponse(message="Portfolio deleted successfully")
