from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import router
from app.config.settings import Settings
from app.extraction.handler import ExtractionHandler, build_extraction_handler
from app.logging.logger import Log


def create_app(
    settings: Settings,
    handler: ExtractionHandler | None = None,
) -> FastAPI:
    """Build the FastAPI application around one shared extraction handler."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        Log.info(
            f"Starting PDF text extraction API (env={settings.app_env}, "
            f"engine={settings.pdf_engine})"
        )
        yield
        Log.info("PDF text extraction API shut down")

    app = FastAPI(title="PDF Prompt Ingestion", lifespan=lifespan)
    app.state.settings = settings
    app.state.extraction_handler = handler or build_extraction_handler(settings)
    app.include_router(router)
    return app
