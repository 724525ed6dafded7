from datetime import date
from decimal import Decimal
from typing import List, Tuple

from ..auth.permissions import ensure_investment_in_portfolio
from ..contracts.market import IPriceOracle
from ..core.exceptions import NotFoundError
from ..core.logger import logger
from ..database.models import Investment
from ..database.repositories.investment_repository import InvestmentRepository
from .portfolio_service import PortfolioService
from .valuation import Valuation, valuate


class InvestmentService:
    def __init__(self, investment_repo: InvestmentRepository, portfolio_service: PortfolioService,
                 price_oracle: IPriceOracle):
        self.investment_repo = investment_repo
        self.portfolio_service = portfolio_service
        self.price_oracle = price_oracle

    def get_owned_investment(self, user_id: int, portfolio_id: int, investment_id: int) -> Investment:
        self.portfolio_service.get_owned_portfolio(user_id, portfolio_id)
        investment = self.investment_repo.get_by_id(investment_id)
        if investment is None:
            raise NotFoundError("Investment not found")
        return ensure_investment_in_portfolio(investment, portfolio_id)

    def list_valuations(self, user_id: int, portfolio_id: int) -> List[Tuple[Investment, Decimal, Valuation]]:
        self.portfolio_service.get_owned_portfolio(user_id, portfolio_id)
        result = []
        for investment in self.investment_repo.list_by_portfolio(portfolio_id):
            current_price = self.price_oracle.get_current_price(investment.symbol)
            valuation = valuate(investment.shares, investment.purchase_price, current_price)
            result.append((investment, current_price, valuation))
        return result

    def create_investment(self, user_id: int, portfolio_id: int, symbol: str, name: str,
                          shares: Decimal, purchase_price: Decimal, purchase_date: date) -> Investment:
        self.portfolio_service.get_owned_portfolio(user_id, portfolio_id)
        investment = self.investment_repo.create(
            portfolio_id=portfolio_id,
            symbol=symbol,
            name=name,
            shares=shares,
            purchase_price=purchase_price,
            purchase_date=purchase_date,
        )
        logger.info(f"Investment {investment.id} ({symbol}) added to portfolio {portfolio_id}")
        return investment

    def update_investment(self, user_id: int, portfolio_id: int, investment_id: int, symbol: str,
                          name: str, shares: Decimal, purchase_price: Decimal, purchase_date: date) -> Investment:
        investment = self.get_owned_investment(user_id, portfolio_id, investment_id)
        return self.investment_repo.update(investment, symbol, name, shares, purchase_price, purchase_date)

    def delete_investment(self, user_id: int, portfolio_id: int, investment_id: int) -> None:
        investment = self.get_owned_investment(user_id, portfolio_id, investment_id)
        self.investment_repo.delete(investment)
        logger.info(f"Investment {investment_id} deleted from portfolio {portfolio_id}")
