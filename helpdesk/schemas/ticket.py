from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from helpdesk.models.ticket import TicketCategory, TicketPriority, TicketStatus
from helpdesk.schemas.attachment import AttachmentRead
from helpdesk.schemas.common import UTCDatetime
from helpdesk.schemas.note import NoteRead


class TicketCreate(BaseModel):
    # title and reporter_name are checked by the service so a missing value
    # gets the same 400 message as an empty one
    title: Optional[str] = None
    description: Optional[str] = None
    reporter_name: Optional[str] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    category: Optional[TicketCategory] = None
    assignee_id: Optional[int] = None


class TicketUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    reporter_name: Optional[str] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    category: Optional[TicketCategory] = None
    # Always written: leaving it out of the body unassigns the ticket
    assignee_id: Optional[int] = None


class TicketRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    reporter_name: str
    status: TicketStatus
    priority: TicketPriority
    category: TicketCategory
    assignee_id: Optional[int] = None
    created_at: UTCDatetime
    updated_at: UTCDatetime
    # Assignee info (populated by the query layer)
    assignee_name: Optional[str] = None
    assignee_email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TicketDetail(TicketRead):
    notes: List[NoteRead] = []
    attachments: List[AttachmentRead] = []


class TicketFilters(BaseModel):
    """Query parameters accepted by the ticket list."""

    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    category: Optional[TicketCategory] = None
    assignee_id: Optional[int] = None
    search: Optional[str] = None
    sort: str = "created_at"
    order: str = "desc"
