"""
==============================================================================
Product Console API - Application Entry Point
==============================================================================

FastAPI application serving the product catalog under /api/v1.

Usage:
------
    # Development, with auto reload when DEBUG=true
    python -m product_console.main

    # Production
    APP_ENV=production uvicorn product_console.main:app --host 0.0.0.0

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_console import __version__
from product_console.api import api_router
from product_console.config import Settings, get_settings
from product_console.core.exceptions import register_exception_handlers
from product_console.db import get_database_manager, init_db


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


class Application:
    """
    Builds the FastAPI app and owns its startup and shutdown.

    Interactive docs are served outside production only.
    """

    def __init__(self, app_settings: Settings):
        self._settings = app_settings
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        docs_enabled = not self._settings.is_production

        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Add, search, update and remove catalog products",
            lifespan=self._lifespan,
            docs_url="/docs" if docs_enabled else None,
            redoc_url="/redoc" if docs_enabled else None,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        logger.info(f"🚀 Starting {self._settings.app_name} [{self._settings.app_env}]")
        init_db()
        yield
        logger.info("🛑 Shutting down...")
        get_database_manager().dispose()

    @property
    def app(self) -> FastAPI:
        return self._app


application = Application(settings)
app = application.app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_console.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
