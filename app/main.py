"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api import health, orders, prices
from app.api.errors import order_intake_exception_handler, request_validation_exception_handler
from app.core.config import settings
from app.core.dependencies import build_services
from app.core.logging import setup_logging
from app.services.ordering.errors import OrderIntakeError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging(settings.log_level)
    app.state.services = build_services(settings)
    logger.info(
        f"[STARTUP] Services ready - model: {settings.completion_model}, "
        f"sheets backend: {settings.sheets_backend}, range: {settings.orders_range}"
    )
    yield
    # Shutdown
    await app.state.services.completion_service.close()


app = FastAPI(
    title="Meat Order Intake",
    description="Turns free-text chat orders into spreadsheet rows",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(OrderIntakeError, order_intake_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

app.include_router(health.router, tags=["health"])
app.include_router(orders.router, tags=["orders"])
app.include_router(prices.router, tags=["prices"])


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
