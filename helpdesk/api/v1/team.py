from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from helpdesk.db import SessionDep
from helpdesk.schemas.team_member import TeamMemberCreate, TeamMemberRead, TeamMemberUpdate
from helpdesk.services import team

router = APIRouter()


@router.get("", response_model=List[TeamMemberRead], summary="List team members")
def list_team_members(session: SessionDep) -> List[TeamMemberRead]:
    return team.list_members(session)


@router.get("/{member_id}", response_model=TeamMemberRead, summary="Get team member")
def get_team_member(member_id: int, session: SessionDep) -> TeamMemberRead:
    return team.get_member(session, member_id)


@router.post(
    "",
    response_model=TeamMemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create team member",
)
def create_team_member(payload: TeamMemberCreate, session: SessionDep) -> TeamMemberRead:
    return team.create_member(session, payload)


@router.put("/{member_id}", response_model=TeamMemberRead, summary="Update team member")
def update_team_member(member_id: int, payload: TeamMemberUpdate, session: SessionDep) -> TeamMemberRead:
    """Update name and/or email; omitted fields are kept."""
    return team.update_member(session, member_id, payload)


@router.delete("/{member_id}", summary="Delete team member")
def delete_team_member(member_id: int, session: SessionDep) -> dict[str, bool]:
    """Delete a member; its tickets become unassigned."""
    team.delete_member(session, member_id)
    return {"success": True}
