from .user import User
from .portfolio import Portfolio
from .investment import Investment

__all__ = ["User", "Portfolio", "Investment"]
