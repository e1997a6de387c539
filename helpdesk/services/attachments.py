from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from sqlmodel import Session

from helpdesk.core.exceptions import InvalidInputError, NotFoundError
from helpdesk.models import Attachment, Ticket
from helpdesk.schemas.attachment import AttachmentRead
from helpdesk.services.storage import AttachmentStorage

logger = logging.getLogger(__name__)


def create_attachment(
    session: Session,
    storage: AttachmentStorage,
    ticket_id: int,
    source: Optional[BinaryIO],
    original_name: Optional[str],
    mimetype: Optional[str],
) -> AttachmentRead:
    """Store an uploaded file and record it against a ticket.

    The file is written first. If the ticket turns out not to exist, or the
    metadata insert fails, the stored file is removed again.
    """
    if source is None:
        raise InvalidInputError("No file uploaded")

    original_name = original_name or "unknown"
    mimetype = mimetype or "application/octet-stream"
    filename, size = storage.save(source, original_name, mimetype)

    try:
        ticket = session.get(Ticket, ticket_id)
        if not ticket:
            raise NotFoundError("Ticket not found")

        attachment = Attachment(
            ticket_id=ticket_id,
            filename=filename,
            original_name=original_name,
            mimetype=mimetype,
            size=size,
        )
        ticket.touch()
        session.add(attachment)
        session.add(ticket)
        session.commit()
        session.refresh(attachment)
    except Exception:
        session.rollback()
        storage.delete(filename)
        logger.warning(f"Discarded upload {filename} for ticket {ticket_id}")
        raise

    logger.info(f"Attachment {attachment.id} ({original_name!r}, {size} bytes) added to ticket {ticket_id}")
    return AttachmentRead.model_validate(attachment)


def get_attachment(session: Session, attachment_id: int) -> Attachment:
    attachment = session.get(Attachment, attachment_id)
    if not attachment:
        raise NotFoundError("Attachment not found")
    return attachment


def get_attachment_file(session: Session, storage: AttachmentStorage, attachment_id: int) -> tuple[Attachment, Path]:
    attachment = get_attachment(session, attachment_id)
    if not storage.exists(attachment.filename):
        raise NotFoundError("File not found on disk")
    return attachment, storage.path_for(attachment.filename)


def delete_attachment(session: Session, storage: AttachmentStorage, attachment_id: int) -> None:
    """Remove the backing file (if still there) and then the metadata row."""
    attachment = get_attachment(session, attachment_id)
    if not storage.delete(attachment.filename):
        logger.warning(f"Attachment file {attachment.filename} was already missing")

    ticket = session.get(Ticket, attachment.ticket_id)
    if ticket:
        ticket.touch()
        session.add(ticket)
    session.delete(attachment)
    session.commit()
