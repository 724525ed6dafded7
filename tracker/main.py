from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .core.exceptions import AppException
from .core.logger import logger
from .database import create_tables
from .routes import (
    auth_router,
    users_router,
    portfolios_router,
    investments_router,
    ipo_router,
    health_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("Application started successfully")
    yield
    logger.info("Application shutting down")


async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"), "message": error.get("msg")}
        for error in exc.errors()
    ]
    message = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse({"message": message, "errors": errors}, status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse({"message": "Internal server error"}, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="Portfolio Tracker", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(users_router, prefix=settings.API_PREFIX)
    app.include_router(portfolios_router, prefix=settings.API_PREFIX)
    app.include_router(investments_router, prefix=settings.API_PREFIX)
    app.include_router(ipo_router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tracker.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
