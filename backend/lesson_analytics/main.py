# backend/lesson_analytics/main.py
"""
FastAPI application exposing the dashboard analytics.
"""

import logging

from fastapi import APIRouter, FastAPI, Response

from . import __version__
from .core.config import settings
from .monitoring.prometheus_metrics import render_latest
from .routes.v1 import analytics as analytics_v1

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Lesson Analytics API",
    description="Coach and client dashboard analytics for the lesson marketplace",
    version=__version__,
)

api_v1 = APIRouter(prefix="/api/v1")
api_v1.include_router(analytics_v1.router, prefix="/analytics")
app.include_router(api_v1)


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


@app.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    payload, content_type = render_latest()
    return Response(content=payload, media_type=content_type)


logger.info(f"Lesson analytics API ready (local timezone {settings.local_timezone})")
