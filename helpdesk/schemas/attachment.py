from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from helpdesk.schemas.common import UTCDatetime


class AttachmentRead(BaseModel):
    """Schema for reading ticket attachment metadata."""

    id: int
    ticket_id: int
    filename: str
    original_name: str
    mimetype: str
    size: int
    created_at: UTCDatetime

    model_config = ConfigDict(from_attributes=True)
