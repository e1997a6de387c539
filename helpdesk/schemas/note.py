from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from helpdesk.schemas.common import UTCDatetime


class NoteCreate(BaseModel):
    # ticket_id is taken from URL path
    author_name: Optional[str] = None
    content: Optional[str] = None


class NoteRead(BaseModel):
    id: int
    ticket_id: int
    author_name: str
    content: str
    created_at: UTCDatetime

    model_config = ConfigDict(from_attributes=True)
