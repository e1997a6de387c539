from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from helpdesk.schemas.common import UTCDatetime


class TeamMemberCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class TeamMemberUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class TeamMemberRead(BaseModel):
    id: int
    name: str
    email: str
    created_at: UTCDatetime
    open_tickets: int = 0

    model_config = ConfigDict(from_attributes=True)
