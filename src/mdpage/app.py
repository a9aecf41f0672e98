from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mdpage.config import DOCUMENT_PATH, LOG_LEVEL
from mdpage.urls.page import page_router

logger = logging.getLogger(__name__)


def _setup_logging(level: str = LOG_LEVEL) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format="%(message)s")
    else:
        logging.getLogger().setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _setup_logging()
    logger.info("[app] serving document=%s", DOCUMENT_PATH)
    yield
    logger.info("[app] shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title="mdpage",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(page_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

app = create_app()
