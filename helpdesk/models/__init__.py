from .attachment import Attachment
from .note import Note
from .team_member import TeamMember
from .ticket import Ticket, TicketCategory, TicketPriority, TicketStatus

__all__ = [
    "Attachment",
    "Note",
    "TeamMember",
    "Ticket",
    "TicketCategory",
    "TicketPriority",
    "TicketStatus",
]
