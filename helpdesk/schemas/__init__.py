from .attachment import AttachmentRead
from .note import NoteCreate, NoteRead
from .statistics import (
    CategoryCounts,
    DashboardStatistics,
    PriorityCounts,
    StatusCounts,
    TeamWorkload,
)
from .team_member import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from .ticket import TicketCreate, TicketDetail, TicketFilters, TicketRead, TicketUpdate

__all__ = [
    "AttachmentRead",
    "CategoryCounts",
    "DashboardStatistics",
    "NoteCreate",
    "NoteRead",
    "PriorityCounts",
    "StatusCounts",
    "TeamMemberCreate",
    "TeamMemberRead",
    "TeamMemberUpdate",
    "TeamWorkload",
    "TicketCreate",
    "TicketDetail",
    "TicketFilters",
    "TicketRead",
    "TicketUpdate",
]
