"""FastAPI application for ecotrack."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecotrack import __version__
from ecotrack.models import HealthResponse
from ecotrack.routers import ean, screen as screen_router
from ecotrack.screen import Screen

SCREEN_COPY_PATH = Path(__file__).parent / "data" / "screen.yaml"

screen_copy: dict[str, Any] = {}
screen = Screen()


def _load_screen_copy() -> dict[str, Any]:
    """Load the scanner screen's static text from YAML."""
    with open(SCREEN_COPY_PATH) as f:
        data = yaml.safe_load(f)
    return data or {}


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    """Load screen copy on startup."""
    global screen_copy  # noqa: PLW0603
    screen_copy = _load_screen_copy()
    yield


app = FastAPI(
    title="ecotrack",
    description="Barcode scan to product information",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(screen_router.router, prefix="/api/screen", tags=["screen"])
app.include_router(ean.router, prefix="/api/ean", tags=["ean"])


@app.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check."""
    return HealthResponse(version=__version__)
