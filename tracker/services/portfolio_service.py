from typing import List, Optional

from ..auth.permissions import ensure_portfolio_owner
from ..contracts.market import IPriceOracle
from ..core.exceptions import NotFoundError
from ..core.logger import logger
from ..database.models import Portfolio
from ..database.repositories.portfolio_repository import PortfolioRepository
from .valuation import Aggregate, aggregate


class PortfolioService:
    def __init__(self, portfolio_repo: PortfolioRepository, price_oracle: IPriceOracle):
        self.portfolio_repo = portfolio_repo
        self.price_oracle = price_oracle

    def get_owned_portfolio(self, user_id: int, portfolio_id: int) -> Portfolio:
        portfolio = self.portfolio_repo.get_by_id(portfolio_id)
        if portfolio is None:
            raise NotFoundError("Portfolio not found")
        return ensure_portfolio_owner(user_id, portfolio)

    def list_portfolios(self, user_id: int) -> List[Portfolio]:
        return self.portfolio_repo.list_by_user(user_id)

    def create_portfolio(self, user_id: int, name: str, description: Optional[str]) -> Portfolio:
        portfolio = self.portfolio_repo.create(user_id, name, description)
        logger.info(f"Portfolio {portfolio.id} created for user {user_id}")
        return portfolio

    def update_portfolio(self, user_id: int, portfolio_id: int, name: str, description: Optional[str]) -> Portfolio:
        portfolio = self.get_owned_portfolio(user_id, portfolio_id)
        return self.portfolio_repo.update(portfolio, name, description)

    def delete_portfolio(self, user_id: int, portfolio_id: int) -> None:
        portfolio = self.get_owned_portfolio(user_id, portfolio_id)
        count = len(portfolio.investments)
        self.portfolio_repo.delete(portfolio)
        logger.info(f"Portfolio {portfolio_id} deleted with {count} investments by user {user_id}")

    def summarize_portfolios(self, user_id: int) -> List[tuple[Portfolio, Aggregate]]:
        portfolios = self.portfolio_repo.list_by_user(user_id, with_investments=True)
        symbols = [item.symbol for portfolio in portfolios for item in portfolio.investments]
        prices = self.price_oracle.get_current_prices(symbols)
        return [(portfolio, aggregate(portfolio.investments, prices)) for portfolio in portfolios]
