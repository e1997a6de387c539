from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, status

from helpdesk.api.deps import StorageDep
from helpdesk.db import SessionDep
from helpdesk.models.ticket import TicketCategory, TicketPriority, TicketStatus
from helpdesk.schemas.ticket import (
    TicketCreate,
    TicketDetail,
    TicketFilters,
    TicketRead,
    TicketUpdate,
)
from helpdesk.services import queries, tickets

router = APIRouter()


@router.get(
    "",
    response_model=List[TicketRead],
    status_code=status.HTTP_200_OK,
)
def list_tickets(
    session: SessionDep,
    status_filter: Optional[TicketStatus] = Query(None, alias="status"),
    priority_filter: Optional[TicketPriority] = Query(None, alias="priority"),
    category_filter: Optional[TicketCategory] = Query(None, alias="category"),
    assignee_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    sort: str = Query("created_at"),
    order: str = Query("desc"),
) -> List[TicketRead]:
    """List tickets with optional filters, search and sorting."""
    filters = TicketFilters(
        status=status_filter,
        priority=priority_filter,
        category=category_filter,
        assignee_id=assignee_id,
        search=search,
        sort=sort,
        order=order,
    )
    return queries.list_tickets(session, filters)


@router.get(
    "/{ticket_id}",
    response_model=TicketDetail,
    status_code=status.HTTP_200_OK,
)
def get_ticket(ticket_id: int, session: SessionDep) -> TicketDetail:
    """Get a ticket with its notes and attachments."""
    return queries.get_ticket_detail(session, ticket_id)


@router.post(
    "",
    response_model=TicketRead,
    status_code=status.HTTP_201_CREATED,
)
def create_ticket(ticket_data: TicketCreate, session: SessionDep) -> TicketRead:
    """Create a new ticket."""
    return tickets.create_ticket(session, ticket_data)


@router.put(
    "/{ticket_id}",
    response_model=TicketRead,
    status_code=status.HTTP_200_OK,
)
def update_ticket(ticket_id: int, ticket_update: TicketUpdate, session: SessionDep) -> TicketRead:
    """Update a ticket. Omitting assignee_id unassigns it."""
    return tickets.update_ticket(session, ticket_id, ticket_update)


@router.delete("/{ticket_id}", status_code=status.HTTP_200_OK)
def delete_ticket(ticket_id: int, session: SessionDep, storage: StorageDep) -> dict[str, bool]:
    """Delete a ticket together with its notes and attachments."""
    tickets.delete_ticket(session, storage, ticket_id)
    return {"success": True}
