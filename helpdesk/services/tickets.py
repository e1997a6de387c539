from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session, select

from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models import Attachment, TeamMember, Ticket
from helpdesk.models.ticket import TicketCategory, TicketPriority, TicketStatus
from helpdesk.schemas.ticket import TicketCreate, TicketRead, TicketUpdate
from helpdesk.services.queries import ensure_ticket, get_ticket_read
from helpdesk.services.storage import AttachmentStorage

logger = logging.getLogger(__name__)

# Fields written only when the request carries a non-null value
COALESCED_FIELDS = ("title", "description", "reporter_name", "status", "priority", "category")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _ensure_assignee(session: Session, assignee_id: Optional[int]) -> None:
    if assignee_id is not None and session.get(TeamMember, assignee_id) is None:
        raise InvalidInputError("Assignee not found")


def create_ticket(session: Session, ticket_data: TicketCreate) -> TicketRead:
    if _is_blank(ticket_data.title) or _is_blank(ticket_data.reporter_name):
        raise InvalidInputError("Title and reporter name are required")
    _ensure_assignee(session, ticket_data.assignee_id)

    ticket = Ticket(
        title=ticket_data.title,
        description=ticket_data.description or None,
        reporter_name=ticket_data.reporter_name,
        status=(ticket_data.status or TicketStatus.NEW).value,
        priority=(ticket_data.priority or TicketPriority.MEDIUM).value,
        category=(ticket_data.category or TicketCategory.SOFTWARE).value,
        assignee_id=ticket_data.assignee_id,
    )
    session.add(ticket)
    session.commit()
    session.refresh(ticket)

    logger.info(f"Ticket {ticket.id} created by {ticket.reporter_name!r}")
    return get_ticket_read(session, ticket.id)


def update_ticket(session: Session, ticket_id: int, ticket_update: TicketUpdate) -> TicketRead:
    """Apply a partial update.

    Fields that are missing or null keep their stored value. ``assignee_id``
    is the exception: it is always replaced, so a body without it unassigns
    the ticket.
    """
    ticket = ensure_ticket(session, ticket_id)
    for required in ("title", "reporter_name"):
        value = getattr(ticket_update, required)
        if value is not None and _is_blank(value):
            raise InvalidInputError("Title and reporter name cannot be empty")
    _ensure_assignee(session, ticket_update.assignee_id)

    for field in COALESCED_FIELDS:
        value = getattr(ticket_update, field)
        if value is None:
            continue
        if isinstance(value, (TicketStatus, TicketPriority, TicketCategory)):
            value = value.value
        setattr(ticket, field, value)
    ticket.assignee_id = ticket_update.assignee_id

    ticket.touch()
    session.add(ticket)
    session.commit()

    return get_ticket_read(session, ticket_id)


def delete_ticket(session: Session, storage: AttachmentStorage, ticket_id: int) -> None:
    """Hard delete a ticket.

    Notes and attachment rows go with it through ON DELETE CASCADE; the
    attachment files are removed here once the delete is committed.
    """
    ticket = ensure_ticket(session, ticket_id)
    filenames = session.exec(
        select(Attachment.filename).where(Attachment.ticket_id == ticket_id)
    ).all()

    session.delete(ticket)
    session.commit()

    for filename in filenames:
        if not storage.delete(filename):
            logger.warning(f"Attachment file {filename} of ticket {ticket_id} was already missing")
    logger.info(f"Ticket {ticket_id} deleted with {len(filenames)} attachment(s)")
