from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from helpdesk.core.exceptions import DuplicateEmailError, InvalidInputError, NotFoundError
from helpdesk.models import TeamMember, Ticket
from helpdesk.models.ticket import TicketStatus
from helpdesk.schemas.team_member import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate

logger = logging.getLogger(__name__)


def _open_tickets_count():
    return (
        select(func.count(Ticket.id))
        .where(Ticket.assignee_id == TeamMember.id, Ticket.status != TicketStatus.CLOSED.value)
        .correlate(TeamMember)
        .scalar_subquery()
    )


def _to_read(member: TeamMember, open_tickets: int) -> TeamMemberRead:
    member_data = TeamMemberRead.model_validate(member)
    member_data.open_tickets = open_tickets or 0
    return member_data


def list_members(session: Session) -> List[TeamMemberRead]:
    """All team members ordered by name, each with its open ticket count."""
    statement = select(TeamMember, _open_tickets_count()).order_by(TeamMember.name.asc())
    return [_to_read(member, count) for member, count in session.exec(statement).all()]


def get_member(session: Session, member_id: int) -> TeamMemberRead:
    row = session.exec(
        select(TeamMember, _open_tickets_count()).where(TeamMember.id == member_id)
    ).first()
    if row is None:
        raise NotFoundError("Team member not found")
    member, count = row
    return _to_read(member, count)


def _commit_member(session: Session, member: TeamMember) -> None:
    session.add(member)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if "UNIQUE" in str(e.orig).upper():
            raise DuplicateEmailError() from None
        raise
    session.refresh(member)


def create_member(session: Session, member_data: TeamMemberCreate) -> TeamMemberRead:
    name = (member_data.name or "").strip()
    email = (member_data.email or "").strip()
    if not name or not email:
        raise InvalidInputError("Name and email are required")

    member = TeamMember(name=name, email=email)
    _commit_member(session, member)
    logger.info(f"Team member {member.id} ({member.email}) created")
    return _to_read(member, 0)


def _coalesce(value: Optional[str], current: str, label: str) -> str:
    if value is None:
        return current
    value = value.strip()
    if not value:
        raise InvalidInputError(f"{label} cannot be empty")
    return value


def update_member(session: Session, member_id: int, member_update: TeamMemberUpdate) -> TeamMemberRead:
    member = session.get(TeamMember, member_id)
    if not member:
        raise NotFoundError("Team member not found")

    member.name = _coalesce(member_update.name, member.name, "Name")
    member.email = _coalesce(member_update.email, member.email, "Email")
    _commit_member(session, member)
    return get_member(session, member_id)


def delete_member(session: Session, member_id: int) -> None:
    """Delete a member; the store nulls assignee_id on its tickets."""
    member = session.get(TeamMember, member_id)
    if not member:
        raise NotFoundError("Team member not found")
    session.delete(member)
    session.commit()
    logger.info(f"Team member {member_id} deleted")
