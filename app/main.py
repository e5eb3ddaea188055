from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1.api import api_router
from app.core.config import settings
from app.core.logger import logger
from app.services.records import RecordsStore
from app.storage import build_storage


def create_app(store: Optional[RecordsStore] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Records store to serve; built from settings on startup when omitted

    Returns:
        FastAPI: The configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.PROJECT_NAME} in {settings.ENVIRONMENT} environment")

        records = store or RecordsStore(build_storage(settings))
        logger.debug(f"Storage backend: {records.storage.name}")

        try:
            await records.init()
        except Exception as e:
            logger.critical(f"Records store initialization failed: {e}")
            raise

        app.state.records = records

        yield

        logger.info(f"Shutting down {settings.PROJECT_NAME}")
        await records.close()

    app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_V1_STR)
    app.include_router(api_router, include_in_schema=False)

    return app


app = create_app()
