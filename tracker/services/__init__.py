from .auth_service import AuthService
from .user_service import UserService
from .portfolio_service import PortfolioService
from .investment_service import InvestmentService
from .market_data_service import MockPriceOracle, PriceCache
from .ipo_service import IpoService, FinnhubIpoProvider
from .valuation import valuate, aggregate, Valuation, Aggregate

__all__ = [
    "AuthService",
    "UserService",
    "PortfolioService",
    "InvestmentService",
    "MockPriceOracle",
    "PriceCache",
    "IpoService",
    "FinnhubIpoProvider",
    "valuate",
    "aggregate",
    "Valuation",
    "Aggregate",
]
