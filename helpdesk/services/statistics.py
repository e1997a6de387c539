"""Dashboard statistics.

Each part of the summary is its own read query; they are not run inside a
shared snapshot, so a write landing between them can make the numbers
disagree slightly.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from sqlalchemy import and_, case, func
from sqlmodel import Session, select

from helpdesk.models import TeamMember, Ticket
from helpdesk.models.ticket import TicketCategory, TicketPriority, TicketStatus
from helpdesk.schemas.statistics import (
    CategoryCounts,
    DashboardStatistics,
    PriorityCounts,
    StatusCounts,
    TeamWorkload,
)
from helpdesk.services.queries import recent_tickets

RECENT_TICKETS_LIMIT = 5

_is_open = Ticket.status != TicketStatus.CLOSED.value


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


def _counts_by(session: Session, column, enum: type[Enum], *where) -> Dict[str, int]:
    """Count tickets for every member of ``enum`` in one pass."""
    labels = [member.value for member in enum]
    statement = select(*[_count_where(column == label) for label in labels])
    if where:
        statement = statement.where(*where)
    row = session.exec(statement).one()
    return {label: int(count) for label, count in zip(labels, row)}


def status_counts(session: Session) -> StatusCounts:
    counts = _counts_by(session, Ticket.status, TicketStatus)
    total = session.exec(select(func.count(Ticket.id))).one()
    return StatusCounts(total=total, **counts)


def priority_counts(session: Session) -> PriorityCounts:
    return PriorityCounts(**_counts_by(session, Ticket.priority, TicketPriority, _is_open))


def category_counts(session: Session) -> CategoryCounts:
    return CategoryCounts(**_counts_by(session, Ticket.category, TicketCategory, _is_open))


def team_workload(session: Session) -> list[TeamWorkload]:
    """Open tickets per member, members without tickets included."""
    assigned = func.count(Ticket.id).label("assigned_tickets")
    statement = (
        select(TeamMember.id, TeamMember.name, assigned)
        .outerjoin(Ticket, and_(Ticket.assignee_id == TeamMember.id, _is_open))
        .group_by(TeamMember.id, TeamMember.name)
        .order_by(assigned.desc(), TeamMember.name.asc())
    )
    return [
        TeamWorkload(id=member_id, name=name, assigned_tickets=count)
        for member_id, name, count in session.exec(statement).all()
    ]


def unassigned_count(session: Session) -> int:
    return session.exec(
        select(func.count(Ticket.id)).where(Ticket.assignee_id.is_(None), _is_open)
    ).one()


def get_dashboard_statistics(session: Session) -> DashboardStatistics:
    return DashboardStatistics(
        status=status_counts(session),
        priority=priority_counts(session),
        category=category_counts(session),
        team_workload=team_workload(session),
        recent_tickets=recent_tickets(session, limit=RECENT_TICKETS_LIMIT),
        unassigned_count=unassigned_count(session),
    )
