"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_planner.api.dependencies import get_request_id
from budget_planner.api.middleware import RequestIDMiddleware, MetricsMiddleware
from budget_planner.api.v1 import plan, profile, transactions
from budget_planner.infrastructure.observability.logging import setup_logging
from budget_planner.config import settings

# Setup structured logging
setup_logging(settings.log_level)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Budget Planner",
        description="Ledger totals and debt/savings plan service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, prefix="/v1", tags=["ledger"])
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(plan.router, prefix="/v1", tags=["planner"])

    return app


app = create_app()
