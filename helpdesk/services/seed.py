from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from helpdesk.models import TeamMember

logger = logging.getLogger(__name__)

DEFAULT_TEAM_MEMBERS = [
    ("John Smith", "john.smith@example.com"),
    ("Jane Doe", "jane.doe@example.com"),
    ("Bob Wilson", "bob.wilson@example.com"),
    ("Alice Johnson", "alice.johnson@example.com"),
]


def seed_team_members(engine: Engine) -> int:
    """Insert the default team when the team table is empty.

    Returns the number of members inserted.
    """
    with Session(engine) as session:
        existing = session.exec(select(func.count(TeamMember.id))).one()
        if existing:
            return 0

        for name, email in DEFAULT_TEAM_MEMBERS:
            session.add(TeamMember(name=name, email=email))
        session.commit()

    logger.info(f"Seeded {len(DEFAULT_TEAM_MEMBERS)} default team members")
    return len(DEFAULT_TEAM_MEMBERS)
