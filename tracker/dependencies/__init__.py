from .auth_dependencies import (
    get_auth_service,
    get_user_service,
    get_user_repository,
)
from .market_dependencies import get_ipo_provider, get_ipo_service
from .portfolio_dependencies import (
    get_portfolio_service,
    get_portfolio_repository,
    get_investment_service,
    get_investment_repository,
)
from .common import get_price_oracle

__all__ = [
    "get_auth_service",
    "get_user_service",
    "get_user_repository",
    "get_ipo_provider",
    "get_ipo_service",
    "get_portfolio_service",
    "get_portfolio_repository",
    "get_investment_service",
    "get_investment_repository",
    "get_price_oracle",
]
