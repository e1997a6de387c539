from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, File, UploadFile, status
from fastapi.responses import FileResponse

from helpdesk.api.deps import StorageDep
from helpdesk.db import SessionDep
from helpdesk.schemas.attachment import AttachmentRead
from helpdesk.services import attachments, queries

router = APIRouter()


@router.post(
    "/tickets/{ticket_id}/attachments",
    response_model=AttachmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Upload attachment to ticket",
)
def upload_ticket_attachment(
    ticket_id: int,
    session: SessionDep,
    storage: StorageDep,
    file: Optional[UploadFile] = File(None),
) -> AttachmentRead:
    """Upload a file (multipart field ``file``) to a ticket."""
    return attachments.create_attachment(
        session,
        storage,
        ticket_id,
        source=file.file if file else None,
        original_name=file.filename if file else None,
        mimetype=file.content_type if file else None,
    )


@router.get(
    "/tickets/{ticket_id}/attachments",
    response_model=List[AttachmentRead],
    summary="List ticket attachments",
)
def list_ticket_attachments(ticket_id: int, session: SessionDep) -> List[AttachmentRead]:
    """Get the attachments of a ticket, newest first."""
    queries.ensure_ticket(session, ticket_id)
    return queries.list_attachments(session, ticket_id)


@router.get("/attachments/{attachment_id}", summary="Download ticket attachment")
def download_ticket_attachment(attachment_id: int, session: SessionDep, storage: StorageDep):
    """Stream the file inline under its original name."""
    attachment, file_path = attachments.get_attachment_file(session, storage, attachment_id)
    return FileResponse(
        path=str(file_path),
        filename=attachment.original_name,
        media_type=attachment.mimetype,
        content_disposition_type="inline",
    )


@router.delete(
    "/attachments/{attachment_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete ticket attachment",
)
def delete_ticket_attachment(attachment_id: int, session: SessionDep, storage: StorageDep) -> dict[str, bool]:
    """Delete an attachment and its stored file."""
    attachments.delete_attachment(session, storage, attachment_id)
    return {"success": True}
