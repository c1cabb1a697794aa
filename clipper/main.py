"""
FastAPI application entry point.

Run with:
    uvicorn clipper.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI

from clipper.core.config.settings import settings
from clipper.core.log_setup import configure_logging
from clipper.api.clips import router as clips_router


def create_app() -> FastAPI:
    configure_logging()
    settings.ensure_dirs()

    app = FastAPI(
        title="Clipper API",
        version="1.0.0",
    )
    app.include_router(clips_router)
    return app


app = create_app()
