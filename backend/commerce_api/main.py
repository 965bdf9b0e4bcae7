"""Commerce API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {"error": str, ...} envelope
    - CORS configured from settings (default: any origin)
    - Metrics store and services created in the lifespan, owned by app.state,
      released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI served at /docs/openapi.json next to the interactive docs at /docs
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from commerce_api.api.error_handlers import register_error_handlers
from commerce_api.api.routes import (
    metrics, orders, products, shipping, subscribe, system, users,
)
from commerce_api.config import Settings, get_settings
from commerce_api.core.catalog import catalog_size
from commerce_api.core.metrics_store import MetricsStore
from commerce_api.infrastructure.mailing_list import LoopsClient
from commerce_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)
from commerce_api.services.commerce_service import CommerceService
from commerce_api.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)


def build_mailing_list_client(settings: Settings) -> LoopsClient | None:
    """Loops client when a form id is configured, else None (delivery skipped)."""
    if not settings.loops_form_id:
        return None
    return LoopsClient(
        base_url=settings.loops_base_url,
        form_id=settings.loops_form_id,
        max_retries=settings.loops_max_retries,
        base_delay_ms=settings.loops_base_delay_ms,
        max_delay_ms=settings.loops_max_delay_ms,
        timeout_seconds=settings.loops_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    metrics_store = MetricsStore(products=catalog_size())
    provider = build_mailing_list_client(settings)
    app.state.metrics = metrics_store
    app.state.commerce_service = CommerceService(metrics_store)
    app.state.subscription_service = SubscriptionService(metrics_store, provider)
    logger.info(
        f"{settings.app_title} {settings.app_version} started "
        f"({settings.environment}, mailing list "
        f"{'enabled' if provider else 'disabled'})",
    )
    yield
    if provider:
        await provider.aclose()
    final = metrics_store.close()
    logger.info(f"{settings.app_title} shutting down; final metrics {final.as_dict()}")


settings = get_settings()
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="Products, orders, shipping, users, metrics and newsletter signup",
    docs_url="/docs",
    openapi_url="/docs/openapi.json",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)

# Routes — explicit registration
app.include_router(system.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(shipping.router)
app.include_router(users.router)
app.include_router(metrics.router)
app.include_router(subscribe.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    uvicorn.run(
        "commerce_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
