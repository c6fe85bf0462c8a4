"""
Side-by-Side Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from routers import config, diff, pages
from services.config_manager import ConfigManager
from services.log_context import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    setup_logging(config_manager.get_config()["logging"]["level"])
    logger.info("Starting side-by-side diff backend (config: %s)", config_manager.config_file)

    yield
    logger.info("Shutting down side-by-side diff backend")


app = FastAPI(
    title="Side-by-Side Diff",
    description="Line-aligned comparison of two text documents",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(pages.router, tags=["pages"])
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "sidediff"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_config()["server"]
    uvicorn.run(app, host=server["host"], port=server["port"])
