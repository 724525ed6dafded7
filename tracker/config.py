import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tracker.db")

    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    API_HOST = os.getenv("API_HOST", "127.0.0.1")
    try:
        API_PORT = int(os.getenv("API_PORT", "8000"))
    except (TypeError, ValueError):
        API_PORT = 8000

    API_PREFIX = os.getenv("API_PREFIX", "/api")
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    AUTH_TOKEN_SCHEME = os.getenv("AUTH_TOKEN_SCHEME", "simple").lower()
    if AUTH_TOKEN_SCHEME not in ("simple", "jwt"):
        raise ValueError("AUTH_TOKEN_SCHEME must be 'simple' or 'jwt'")

    SECRET_KEY = os.getenv("SECRET_KEY")
    if AUTH_TOKEN_SCHEME == "jwt" and not SECRET_KEY:
        raise ValueError("SECRET_KEY must be set when AUTH_TOKEN_SCHEME is 'jwt'")

    ALGORITHM = os.getenv("ALGORITHM", "HS256")

    try:
        ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
    except (TypeError, ValueError):
        ACCESS_TOKEN_EXPIRE_MINUTES = 30

    FINNHUB_API_KEY = os.getenv("FINNHUB_API_KEY", "")
    FINNHUB_BASE_URL = os.getenv("FINNHUB_BASE_URL", "https://finnhub.io/api/v1")

    try:
        FINNHUB_TIMEOUT_SECONDS = float(os.getenv("FINNHUB_TIMEOUT_SECONDS", "10"))
    except (TypeError, ValueError):
        FINNHUB_TIMEOUT_SECONDS = 10.0

settings = Settings()
