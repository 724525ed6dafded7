from .auth import router as auth_router
from .users import router as users_router
from .portfolios import router as portfolios_router
from .investments import router as investments_router
from .ipo import router as ipo_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "users_router",
    "portfolios_router",
    "investments_router",
    "ipo_router",
    "health_router",
]
