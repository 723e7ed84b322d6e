from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.middleware import LoggingMiddleware
from app.api.routes import health, subscriptions
from app.core.config import Settings, settings
from app.core.database import create_db_and_tables, engine
from app.core.exceptions import SubscriptionServiceError
from app.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.logger.info("Starting Subscription Service")
    create_db_and_tables()
    yield
    app.state.logger.info("Shutting down, closing database connections")
    engine.dispose()


async def service_exception_handler(request: Request, exc: SubscriptionServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        errors.append(f"{field}: {error['msg']}")
    return JSONResponse(status_code=400, content={"error": "; ".join(errors)})


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="Subscription Service API",
        description="REST API for managing user subscriptions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.logger = configure_logging(app_settings)

    app.add_exception_handler(SubscriptionServiceError, service_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.add_middleware(LoggingMiddleware, logger=app.state.logger)

    app.include_router(subscriptions.router)
    app.include_router(health.router)
    return app


app = create_app()


def run():
    app.state.logger.info(f"Server starting on port {settings.server.port}")
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
