from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from helpdesk.models.common import timestamp_field


class Note(SQLModel, table=True):
    """Represents a note on a ticket."""

    __tablename__ = "notes"

    id: Optional[int] = Field(default=None, primary_key=True)
    ticket_id: int = Field(foreign_key="tickets.id", ondelete="CASCADE", index=True)
    author_name: str
    content: str
    created_at: datetime = timestamp_field()
