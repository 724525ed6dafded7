from .user_repository import UserRepository
from .portfolio_repository import PortfolioRepository
from .investment_repository import InvestmentRepository

__all__ = ["UserRepository", "PortfolioRepository", "InvestmentRepository"]
