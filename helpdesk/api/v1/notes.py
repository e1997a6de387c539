from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from helpdesk.db import SessionDep
from helpdesk.schemas.note import NoteCreate, NoteRead
from helpdesk.services import notes, queries

router = APIRouter()


@router.get(
    "/tickets/{ticket_id}/notes",
    response_model=List[NoteRead],
    status_code=status.HTTP_200_OK,
)
def get_ticket_notes(ticket_id: int, session: SessionDep) -> List[NoteRead]:
    """Get all notes for a ticket, oldest first."""
    queries.ensure_ticket(session, ticket_id)
    return queries.list_notes(session, ticket_id)


@router.post(
    "/tickets/{ticket_id}/notes",
    response_model=NoteRead,
    status_code=status.HTTP_201_CREATED,
)
def create_ticket_note(ticket_id: int, note_data: NoteCreate, session: SessionDep) -> NoteRead:
    """Add a note to a ticket."""
    return notes.create_note(session, ticket_id, note_data)
