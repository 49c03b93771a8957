"""V1 dashboard analytics endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from ...api.dependencies import get_analytics_service, get_bearer_token
from ...core.exceptions import DomainException
from ...schemas.analytics_responses import (
    AnalyticsComputeRequest,
    ClientDashboardResponse,
    CoachDashboardResponse,
)
from ...services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)

# V1 router - mounted at /api/v1/analytics
router = APIRouter(tags=["analytics"])


@router.get("/coaches/{coach_id}", response_model=CoachDashboardResponse)
def get_coach_dashboard(
    coach_id: str,
    month: int = Query(..., ge=0, le=11, description="Zero-based month (0 = January)"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    token: str = Depends(get_bearer_token),
    service: AnalyticsService = Depends(get_analytics_service),
) -> CoachDashboardResponse:
    """Monthly revenue, occupancy, hot hours and weekly trend for a coach."""

    try:
        return service.coach_dashboard(coach_id, month, year, token)
    except DomainException as exc:
        raise exc.to_http_exception() from exc


@router.get("/clients/{client_id}", response_model=ClientDashboardResponse)
def get_client_dashboard(
    client_id: str,
    month: int = Query(..., ge=0, le=11, description="Zero-based month (0 = January)"),
    year: int = Query(..., ge=1970, le=9999, description="Calendar year"),
    token: str = Depends(get_bearer_token),
    service: AnalyticsService = Depends(get_analytics_service),
) -> ClientDashboardResponse:
    """Monthly lesson habits for a client: favorite types, coaches and hours."""

    try:
        return service.client_dashboard(client_id, month, year, token)
    except DomainException as exc:
        raise exc.to_http_exception() from exc


@router.post("/coach/compute", response_model=CoachDashboardResponse)
def compute_coach_dashboard(
    payload: AnalyticsComputeRequest,
    service: AnalyticsService = Depends(get_analytics_service),
) -> CoachDashboardResponse:
    """Run the coach aggregation over lessons supplied by the caller."""

    try:
        return service.compute_coach(payload.lessons, payload.month, payload.year)
    except DomainException as exc:
        raise exc.to_http_exception() from exc


@router.post("/client/compute", response_model=ClientDashboardResponse)
def compute_client_dashboard(
    payload: AnalyticsComputeRequest,
    service: AnalyticsService = Depends(get_analytics_service),
) -> ClientDashboardResponse:
    """Run the client aggregation over lessons supplied by the caller."""

    try:
        return service.compute_client(payload.lessons, payload.month, payload.year)
    except DomainException as exc:
        raise exc.to_http_exception() from exc
