import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from imagery_ui.api.routes import router
from imagery_ui.config import Settings, get_settings
from imagery_ui.controller import ResultSource, SubmissionController
from imagery_ui.services.processing_client import ProcessingClient
from imagery_ui.ui.pages import STATIC_DIR

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, client: Optional[ResultSource] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="AI Product Imagery",
        description="Submit a YouTube URL to the product imagery backend and browse the extracted products",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.controller = SubmissionController(
        client=client or ProcessingClient(settings),
        timeout=settings.request_timeout,
        persist_to_disk=settings.default_save,
    )
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(router, tags=["Product Imagery UI"])

    @app.on_event("startup")
    async def startup_event():
        logger.info("Processing backend: %s", settings.api_base)
        logger.info("Request timeout: %gs", settings.request_timeout)
        if settings.api_base.startswith("http://localhost"):
            logger.info("IMAGERY_API_BASE not set or pointing at localhost; using the local development backend")

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("imagery_ui.main:app", host="0.0.0.0", port=3000, reload=True)
