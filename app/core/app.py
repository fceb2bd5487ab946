from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.main import api_router
from app.services.catalog import catalog_store

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    catalog_store.load()
    logger.info(f"{settings.APP_NAME} {__version__} started ({settings.APP_ENV})")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Fashion recommendations scored against a style profile built from a Pinterest board",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
