"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finhealth.api.dependencies import get_benchmarks
from finhealth.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finhealth.api.v1 import analysis
from finhealth.infrastructure.observability.logging import setup_logging
from finhealth.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    # Fail at startup, not mid-request, if the configured weights are inconsistent
    benchmarks = get_benchmarks()

    app = FastAPI(
        title="Financial Health Check",
        description="Financial health score, insights and action plan",
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
        return {
            "status": "ok",
            "service": settings.service_name,
            "benchmark_version": benchmarks.version,
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])

    return app


app = create_app()
