from .database import get_db, create_tables, engine, SessionLocal
from .base import Base, MAX_ID
from .models import User, Portfolio, Investment

__all__ = ["get_db", "create_tables", "engine", "SessionLocal", "Base", "MAX_ID", "User", "Portfolio", "Investment"]
