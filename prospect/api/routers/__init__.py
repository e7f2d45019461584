"""API routers for different resource types."""

from prospect.api.routers.players import router as players_router
from prospect.api.routers.teams import router as teams_router

__all__ = [
    "players_router",
    "teams_router",
]
