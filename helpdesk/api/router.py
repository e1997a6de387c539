from fastapi import APIRouter

from helpdesk.api.v1 import attachments, health, notes, stats, team, tickets


api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])
api_router.include_router(notes.router, prefix="", tags=["notes"])
api_router.include_router(attachments.router, prefix="", tags=["attachments"])
api_router.include_router(team.router, prefix="/team", tags=["team"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
