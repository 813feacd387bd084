import structlog
from fastapi import FastAPI

from . import __version__
from .config import get_settings
from .infrastructure.logging import configure_logging
from .presentation.api.errors import register_exception_handlers
from .presentation.api.routes import health, submit, track
from .presentation.middleware import CorrelationIdMiddleware, UnhandledErrorMiddleware

logger = structlog.get_logger()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.service_name, settings.log_level)

    app = FastAPI(
        title="Lead Intake API",
        description="Consultation requests and tracking events from the marketing site",
        version=__version__,
        debug=settings.debug,
    )

    register_exception_handlers(app)

    # First added = innermost
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(health.router)
    app.include_router(submit.router)
    app.include_router(track.router)

    logger.info("Application configured", service=settings.service_name)
    return app


app = create_app()


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
