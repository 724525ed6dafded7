from ..core.exceptions import ForbiddenError
from ..database.models import Investment, Portfolio


def is_portfolio_owner(user_id: int, portfolio: Portfolio) -> bool:
    return portfolio is not None and portfolio.user_id == user_id


def ensure_portfolio_owner(user_id: int, portfolio: Portfolio) -> Portfolio:
    if not is_portfolio_owner(user_id, portfolio):
        raise ForbiddenError("Access denied")
    return portfolio


def ensure_investment_in_portfolio(investment: Investment, portfolio_id: int) -> Investment:
    if investment.portfolio_id != portfolio_id:
        raise ForbiddenError("Investment does not belong to this portfolio")
    return investment
