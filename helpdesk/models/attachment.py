from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from helpdesk.models.common import timestamp_field


class Attachment(SQLModel, table=True):
    """Represents a file attached to a ticket."""

    __tablename__ = "attachments"

    id: Optional[int] = Field(default=None, primary_key=True)
    ticket_id: int = Field(foreign_key="tickets.id", ondelete="CASCADE", index=True)
    # Name on disk; the uploader's file name is kept only in original_name
    filename: str = Field(max_length=255)
    original_name: str = Field(max_length=255)
    mimetype: str = Field(max_length=255, default="application/octet-stream")
    size: int = Field(ge=0)
    created_at: datetime = timestamp_field()
