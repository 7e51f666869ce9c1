"""
Apiary - FastAPI Application Entry Point

API client backend: stores requests, executes them against remote
servers and keeps an execution history.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import init_db
from .exceptions import register_exception_handlers
from .logging_config import get_logger, setup_logging
from .routers import requests, execute, export, history


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    settings = get_settings()
    setup_logging(settings.log_level.upper())
    init_db()
    logger.info("Apiary started, database: %s", settings.database_url)
    yield
    logger.info("Apiary stopped")


app = FastAPI(
    title="Apiary",
    description="API client backend for executing and recording HTTP requests",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "Apiary",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(requests.router)
app.include_router(execute.router)
app.include_router(export.router)
app.include_router(history.router)
