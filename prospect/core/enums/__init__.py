"""Game enumerations."""

from prospect.core.enums.positions import (
    DEFENSIVE_POSITIONS,
    OFFENSIVE_POSITIONS,
    SPECIAL_TEAMS_POSITIONS,
    Position,
    PositionGroup,
    SkillGroup,
)

__all__ = [
    "DEFENSIVE_POSITIONS",
    "OFFENSIVE_POSITIONS",
    "SPECIAL_TEAMS_POSITIONS",
    "Position",
    "PositionGroup",
    "SkillGroup",
]
