from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from helpdesk.schemas.ticket import TicketRead


class StatusCounts(BaseModel):
    """Ticket counts across all statuses."""

    total: int = 0
    new: int = 0
    in_progress: int = 0
    resolved: int = 0
    closed: int = 0


class PriorityCounts(BaseModel):
    """Open ticket counts per priority."""

    urgent: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


class CategoryCounts(BaseModel):
    """Open ticket counts per category."""

    hardware: int = 0
    software: int = 0
    network: int = 0
    access: int = 0


class TeamWorkload(BaseModel):
    id: int
    name: str
    assigned_tickets: int = Field(default=0, description="Open tickets assigned to the member")


class DashboardStatistics(BaseModel):
    """Dashboard summary composed from independent read queries."""

    model_config = ConfigDict(populate_by_name=True)

    status: StatusCounts
    priority: PriorityCounts
    category: CategoryCounts
    team_workload: List[TeamWorkload] = Field(default_factory=list, alias="teamWorkload")
    recent_tickets: List[TicketRead] = Field(default_factory=list, alias="recentTickets")
    unassigned_count: int = Field(default=0, alias="unassignedCount")
