"""ConvertTemp engine — FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from converttemp.config import settings
from converttemp.api.routes_convert import router as convert_router
from converttemp.api.routes_units import router as units_router

VERSION = "0.1.0"


def configure_logging(level: str) -> logging.Logger:
    """Set the package log level and attach a stderr handler once."""
    pkg_logger = logging.getLogger("converttemp")
    pkg_logger.setLevel(getattr(logging, level))
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        pkg_logger.addHandler(handler)
    return pkg_logger


configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Parse smart temperature input, validate it and convert it to eight scales.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(convert_router, prefix="/api")
app.include_router(units_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}
