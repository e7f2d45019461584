"""Teams API router - roster views."""

from typing import Optional

from fastapi import APIRouter

from prospect.api.routers.players import resolve_scheme
from prospect.api.schemas.players import RosterResponse
from prospect.api.services.player_store import get_player_store
from prospect.core.models.view import create_player_view_model

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/{team_id}/roster", response_model=RosterResponse)
async def get_team_roster(team_id: str, scheme: Optional[str] = None) -> RosterResponse:
    """Get a team's roster, generating it on first request."""
    resolved = resolve_scheme(scheme)
    roster = get_player_store().get_roster(team_id)
    return RosterResponse(
        team_id=team_id,
        size=len(roster),
        players=[create_player_view_model(p, resolved) for p in roster],
    )
