from __future__ import annotations

from sqlmodel import Session

from helpdesk.core.exceptions import InvalidInputError
from helpdesk.models import Note
from helpdesk.schemas.note import NoteCreate, NoteRead
from helpdesk.services.queries import ensure_ticket


def create_note(session: Session, ticket_id: int, note_data: NoteCreate) -> NoteRead:
    """Add a note and bump the ticket's updated_at in the same commit."""
    author_name = (note_data.author_name or "").strip()
    content = (note_data.content or "").strip()
    if not author_name or not content:
        raise InvalidInputError("Author name and content are required")

    ticket = ensure_ticket(session, ticket_id)

    note = Note(ticket_id=ticket_id, author_name=note_data.author_name, content=note_data.content)
    ticket.touch()
    session.add(note)
    session.add(ticket)
    session.commit()
    session.refresh(note)

    return NoteRead.model_validate(note)
