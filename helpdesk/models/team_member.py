from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from helpdesk.models.common import timestamp_field


class TeamMember(SQLModel, table=True):
    """Support staff member who can be assigned tickets."""

    __tablename__ = "team_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, max_length=255)
    created_at: datetime = timestamp_field()
