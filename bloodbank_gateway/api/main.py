"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bloodbank_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bloodbank_gateway.api.v1 import compatibility, eligibility, matching, scoring
from bloodbank_gateway.infrastructure.observability.logging import setup_logging
from bloodbank_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Blood Bank Gateway",
        description="Donor matching, eligibility and gamification service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(matching.router, prefix="/v1", tags=["matching"])
    app.include_router(compatibility.router, prefix="/v1", tags=["matching"])
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])
    app.include_router(scoring.router, prefix="/v1", tags=["gamification"])

    return app


app = create_app()
