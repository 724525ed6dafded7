from fastapi import Depends
from sqlalchemy.orm import Session

from ..contracts.market import IPriceOracle
from ..database import get_db
from ..database.repositories.investment_repository import InvestmentRepository
from ..database.repositories.portfolio_repository import PortfolioRepository
from ..services.investment_service import InvestmentService
from ..services.portfolio_service import PortfolioService
from .common import get_price_oracle


def get_portfolio_repository(db: Session = Depends(get_db)) -> PortfolioRepository:
    return PortfolioRepository(db)


def get_investment_repository(db: Session = Depends(get_db)) -> InvestmentRepository:
    return InvestmentRepository(db)


def get_portfolio_service(
    portfolio_repo: PortfolioRepository = Depends(get_portfolio_repository),
    price_oracle: IPriceOracle = Depends(get_price_oracle),
) -> PortfolioService:
    return PortfolioService(portfolio_repo=portfolio_repo, price_oracle=price_oracle)


def get_investment_service(
    investment_repo: InvestmentRepository = Depends(get_investment_repository),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
    price_oracle: IPriceOracle = Depends(get_price_oracle),
) -> InvestmentService:
    return InvestmentService(
        investment_repo=investment_repo,
        portfolio_service=portfolio_service,
        price_oracle=price_oracle,
    )
