from __future__ import annotations

from fastapi import APIRouter, status

from helpdesk.db import SessionDep
from helpdesk.schemas.statistics import DashboardStatistics
from helpdesk.services.statistics import get_dashboard_statistics

router = APIRouter()


@router.get(
    "",
    response_model=DashboardStatistics,
    status_code=status.HTTP_200_OK,
    summary="Dashboard statistics",
)
def get_statistics(session: SessionDep) -> DashboardStatistics:
    """Ticket counts by status, priority and category plus team workload."""
    return get_dashboard_statistics(session)
