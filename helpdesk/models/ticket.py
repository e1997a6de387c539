from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from helpdesk.models.common import timestamp_field, utc_now


class TicketStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TicketCategory(str, Enum):
    HARDWARE = "hardware"
    SOFTWARE = "software"
    NETWORK = "network"
    ACCESS = "access"


def _check_in(column: str, enum: type[Enum]) -> CheckConstraint:
    values = ", ".join(f"'{member.value}'" for member in enum)
    return CheckConstraint(f"{column} IN ({values})", name=f"ck_tickets_{column}")


class Ticket(SQLModel, table=True):
    """Represents a support ticket."""

    __tablename__ = "tickets"
    __table_args__ = (
        _check_in("status", TicketStatus),
        _check_in("priority", TicketPriority),
        _check_in("category", TicketCategory),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    reporter_name: str
    status: str = Field(default=TicketStatus.NEW.value, index=True)
    priority: str = Field(default=TicketPriority.MEDIUM.value, index=True)
    category: str = Field(default=TicketCategory.SOFTWARE.value, index=True)
    assignee_id: Optional[int] = Field(
        default=None,
        foreign_key="team_members.id",
        ondelete="SET NULL",
        nullable=True,
        index=True,
    )
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()

    def touch(self):
        """Updates the updated_at timestamp."""
        self.updated_at = utc_now()
