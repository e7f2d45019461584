"""Pydantic schemas for player endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from prospect.core.enums import Position
from prospect.core.models.scheme_fit import parse_scheme
from prospect.core.models.view import PlayerViewModel
from prospect.generators.skills import SkillTier


class CreatePlayerRequest(BaseModel):
    """Request to generate a single player."""

    position: Optional[Position] = None
    tier: Optional[SkillTier] = None
    for_draft: bool = False
    veteran: bool = False
    team_id: Optional[str] = None
    scheme: Optional[str] = Field(
        default=None,
        description="Scheme to describe fit against, e.g. 'west_coast'",
    )

    @field_validator("scheme")
    @classmethod
    def check_scheme(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            parse_scheme(value)
        return value


class RosterResponse(BaseModel):
    """A team's roster as client-safe views."""

    team_id: str
    size: int
    players: list[PlayerViewModel]


class DraftClassResponse(BaseModel):
    """A generated draft class as client-safe views."""

    year: int
    size: int
    prospects: list[PlayerViewModel]
