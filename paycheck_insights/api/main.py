"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from paycheck_insights.api.middleware import RequestIDMiddleware, MetricsMiddleware
from paycheck_insights.api.v1 import ghost_cart, insights, items, projection, subscriptions
from paycheck_insights.infrastructure.observability.logging import setup_logging
from paycheck_insights.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Paycheck Insights",
        description="Financial projection and scoring engine for paychecks, expenses and subscriptions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(projection.router, prefix="/v1", tags=["projections"])
    app.include_router(subscriptions.router, prefix="/v1", tags=["subscriptions"])
    app.include_router(ghost_cart.router, prefix="/v1", tags=["ghost-cart"])
    app.include_router(items.router, prefix="/v1", tags=["items"])

    return app


app = create_app()
