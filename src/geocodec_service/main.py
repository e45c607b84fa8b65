"""GEOCODEC - geometry interchange service.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from geocodec.formats.wkt_keywords import WKT_KEYWORDS
from geocodec_service.config import settings
from geocodec_service.routers.geometry import router as geometry_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"{settings.app_name} starting")
    logger.info(f"WKT types: {', '.join(WKT_KEYWORDS.values())}")
    if settings.external_crs and settings.internal_crs:
        transformer = getattr(app.state, "transformer", None)
        if transformer is None:
            logger.warning(
                f"CRS pair {settings.external_crs} -> {settings.internal_crs} "
                "configured but no transformer registered; coordinates pass through"
            )
        else:
            logger.info(f"Reprojection: {settings.external_crs} <-> {settings.internal_crs}")
    yield
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)
app.include_router(geometry_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "operational",
        "version": "0.1.0",
        "system": settings.app_name,
    }


def run() -> None:
    """Console entry point."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
