from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from .routers.addresses import router as addresses_router

# Core modules
from .core.config import settings
from .core.logging import configure_logging, CorrelationIdMiddleware, REQUEST_ID_HEADER
from .core.metrics import PromMiddleware, metrics_endpoint

def create_app() -> FastAPI:
    """
    App factory for the demo service wrapping the client library.
    """
    configure_logging()

    app = FastAPI(
        title="Three-word address service",
        version=settings.VERSION,
        description="Address recognition and geocoding proxy built on the w3wkit client.",
    )

    allow_origins = [o.strip() for o in settings.ALLOW_ORIGINS.split(",")] if settings.ALLOW_ORIGINS else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.add_middleware(CorrelationIdMiddleware)
    if settings.PROMETHEUS_ENABLED:
        app.add_middleware(PromMiddleware)

    @app.get("/v1/health", tags=["meta"])
    def health():
        return {"status": "ok"}

    if settings.PROMETHEUS_ENABLED:
        app.add_route("/v1/metrics", metrics_endpoint, methods=["GET"])

    app.include_router(addresses_router, prefix="/v1", tags=["addresses"])

    return app

app = create_app()
