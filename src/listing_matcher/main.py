"""FastAPI application exposing the listing matcher."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from . import __version__
from .api.router import api_router
from .config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="listing-matcher",
    description="Link free-text product listings to known products",
    version=__version__,
)
app.include_router(api_router)
