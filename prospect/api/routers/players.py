"""Players API router - generation and lookup, views only."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from prospect.api.schemas.players import CreatePlayerRequest, DraftClassResponse
from prospect.api.services.player_store import get_player_store
from prospect.config import get_config
from prospect.core.models.scheme_fit import Scheme, parse_scheme
from prospect.core.models.view import PlayerViewModel, create_player_view_model
from prospect.generators.player import PlayerGenerationOptions

router = APIRouter(tags=["players"])

MAX_DRAFT_CLASS_SIZE = 1000


def resolve_scheme(value: Optional[str]) -> Optional[Scheme]:
    """Parse a scheme query value, mapping unknown names to 422."""
    if value is None:
        return None
    try:
        return parse_scheme(value)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.post(
    "/players",
    response_model=PlayerViewModel,
    status_code=status.HTTP_201_CREATED,
)
async def create_player(request: CreatePlayerRequest) -> PlayerViewModel:
    """Generate a new player and return its view."""
    store = get_player_store()
    player = store.create_player(
        PlayerGenerationOptions(
            position=request.position,
            skill_tier=request.tier,
            for_draft=request.for_draft,
            veteran=request.veteran,
            team_id=request.team_id,
        )
    )
    return create_player_view_model(player, resolve_scheme(request.scheme))


@router.get("/players/{player_id}", response_model=PlayerViewModel)
async def get_player(player_id: str, scheme: Optional[str] = None) -> PlayerViewModel:
    """Get a player's view by ID."""
    player = get_player_store().get_player(player_id)
    if not player:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Player {player_id} not found",
        )
    return create_player_view_model(player, resolve_scheme(scheme))


@router.get("/draft-class", response_model=DraftClassResponse)
async def get_draft_class(
    size: Optional[int] = Query(default=None, ge=1, le=MAX_DRAFT_CLASS_SIZE),
    scheme: Optional[str] = None,
) -> DraftClassResponse:
    """Generate a fresh draft class."""
    store = get_player_store()
    resolved = resolve_scheme(scheme)
    prospects = store.create_draft_class(size or get_config().draft_class_size)
    return DraftClassResponse(
        year=store.current_year,
        size=len(prospects),
        prospects=[create_player_view_model(p, resolved) for p in prospects],
    )
