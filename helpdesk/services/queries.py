"""Read queries for tickets: filtered listing and single-ticket detail."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import case, or_
from sqlmodel import Session, select

from helpdesk.core.exceptions import NotFoundError
from helpdesk.models import Attachment, Note, TeamMember, Ticket
from helpdesk.models.ticket import TicketPriority, TicketStatus
from helpdesk.schemas.attachment import AttachmentRead
from helpdesk.schemas.note import NoteRead
from helpdesk.schemas.ticket import TicketDetail, TicketFilters, TicketRead

DEFAULT_SORT = "created_at"

# Only these expressions ever reach ORDER BY
SORT_COLUMNS = {
    "created_at": Ticket.created_at,
    "updated_at": Ticket.updated_at,
    "title": Ticket.title,
    "priority": case(
        {member.value: rank for rank, member in enumerate(TicketPriority)},
        value=Ticket.priority,
        else_=len(TicketPriority),
    ),
    "status": case(
        {member.value: rank for rank, member in enumerate(TicketStatus)},
        value=Ticket.status,
        else_=len(TicketStatus),
    ),
}


def resolve_sort(sort: Optional[str], order: Optional[str]):
    """Map user-supplied sort/order to ORDER BY clauses.

    Unknown sort keys fall back to ``created_at``; anything other than
    ``asc`` (any case) means descending. Ties are broken by id in the same
    direction.
    """
    column = SORT_COLUMNS.get(sort or DEFAULT_SORT, SORT_COLUMNS[DEFAULT_SORT])
    if (order or "").lower() == "asc":
        return column.asc(), Ticket.id.asc()
    return column.desc(), Ticket.id.desc()


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _ticket_with_assignee():
    return select(Ticket, TeamMember.name, TeamMember.email).outerjoin(
        TeamMember, Ticket.assignee_id == TeamMember.id
    )


def _to_read(ticket: Ticket, assignee_name: Optional[str], assignee_email: Optional[str]) -> TicketRead:
    ticket_data = TicketRead.model_validate(ticket)
    ticket_data.assignee_name = assignee_name
    ticket_data.assignee_email = assignee_email
    return ticket_data


def list_tickets(session: Session, filters: TicketFilters) -> List[TicketRead]:
    statement = _ticket_with_assignee()

    if filters.status is not None:
        statement = statement.where(Ticket.status == filters.status.value)
    if filters.priority is not None:
        statement = statement.where(Ticket.priority == filters.priority.value)
    if filters.category is not None:
        statement = statement.where(Ticket.category == filters.category.value)
    if filters.assignee_id is not None:
        statement = statement.where(Ticket.assignee_id == filters.assignee_id)
    if filters.search:
        pattern = _like_pattern(filters.search)
        statement = statement.where(
            or_(
                Ticket.title.ilike(pattern, escape="\\"),
                Ticket.description.ilike(pattern, escape="\\"),
                Ticket.reporter_name.ilike(pattern, escape="\\"),
            )
        )

    statement = statement.order_by(*resolve_sort(filters.sort, filters.order))
    rows = session.exec(statement).all()
    return [_to_read(ticket, name, email) for ticket, name, email in rows]


def get_ticket_read(session: Session, ticket_id: int) -> TicketRead:
    row = session.exec(_ticket_with_assignee().where(Ticket.id == ticket_id)).first()
    if row is None:
        raise NotFoundError("Ticket not found")
    ticket, name, email = row
    return _to_read(ticket, name, email)


def recent_tickets(session: Session, limit: int = 5) -> List[TicketRead]:
    statement = _ticket_with_assignee().order_by(Ticket.created_at.desc(), Ticket.id.desc()).limit(limit)
    return [_to_read(ticket, name, email) for ticket, name, email in session.exec(statement).all()]


def ensure_ticket(session: Session, ticket_id: int) -> Ticket:
    ticket = session.get(Ticket, ticket_id)
    if not ticket:
        raise NotFoundError("Ticket not found")
    return ticket


def list_notes(session: Session, ticket_id: int) -> List[NoteRead]:
    notes = session.exec(
        select(Note).where(Note.ticket_id == ticket_id).order_by(Note.created_at.asc(), Note.id.asc())
    ).all()
    return [NoteRead.model_validate(note) for note in notes]


def list_attachments(session: Session, ticket_id: int) -> List[AttachmentRead]:
    attachments = session.exec(
        select(Attachment)
        .where(Attachment.ticket_id == ticket_id)
        .order_by(Attachment.created_at.desc(), Attachment.id.desc())
    ).all()
    return [AttachmentRead.model_validate(att) for att in attachments]


def get_ticket_detail(session: Session, ticket_id: int) -> TicketDetail:
    """Ticket with assignee info, notes (oldest first) and attachments (newest first)."""
    ticket_data = get_ticket_read(session, ticket_id)
    return TicketDetail(
        **ticket_data.model_dump(),
        notes=list_notes(session, ticket_id),
        attachments=list_attachments(session, ticket_id),
    )
