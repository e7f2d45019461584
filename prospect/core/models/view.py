"""
Client-safe player projection.

``PlayerViewModel`` is the only player representation that may leave the
engine. It is a separate pydantic type rather than a filtered dict: the
skill entries are ``PerceivedSkillRange`` models that only have ``min`` and
``max`` and reject any other field, so a true value has nowhere to go.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from prospect.core.models.injury import get_injury_display
from prospect.core.models.player import Player
from prospect.core.models.role_fit import get_role_fit_description
from prospect.core.models.scheme_fit import Scheme, get_scheme_fit_description
from prospect.core.validation import ValidationResult

# Substrings that must never appear in a serialized view, matched
# case-insensitively. Covers both camelCase and snake_case spellings.
FORBIDDEN_VIEW_TERMS: tuple[str, ...] = (
    "trueValue",
    "true_value",
    "itFactor",
    "it_factor",
    "consistency",
    "streak",
    "roleEffectiveness",
    "role_effectiveness",
    '"effectiveness"',
    "schemeFits",
    "scheme_fits",
    '"offensive"',
    '"defensive"',
    "hiddenTraits",
    "hidden_traits",
    '"positive"',
    '"negative"',
    "overall",
    '"ovr"',
    '"rating"',
)


class _ViewSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PhysicalAttributesView(_ViewSchema):
    """Physical measurements, copied at full fidelity."""

    height: int
    weight: int
    arm_length: float
    hand_size: float
    wingspan: float
    speed: float
    acceleration: int
    agility: int
    strength: int
    vertical_jump: int


class PerceivedSkillRange(_ViewSchema):
    """What scouts believe about a skill. Has no room for the true value."""

    min: int
    max: int


class DraftInfo(_ViewSchema):
    year: int
    round: int
    pick: int


class PlayerViewModel(_ViewSchema):
    """Restricted, serializable projection of a Player."""

    id: str
    name: str
    position: str
    age: int
    experience: int
    team_id: Optional[str] = None
    physical: PhysicalAttributesView
    skill_ranges: dict[str, PerceivedSkillRange]
    known_traits: list[str]
    scheme_fit_description: str
    role_fit_description: str
    injury_display: str
    draft_info: DraftInfo


def create_player_view_model(
    player: Player,
    scheme: Optional[Scheme] = None,
) -> PlayerViewModel:
    """
    Project a player into the client-safe view.

    Args:
        player: Full player record
        scheme: Single scheme to describe fit against (optional)

    Returns:
        A new PlayerViewModel sharing no mutable state with ``player``
    """
    physical = player.physical
    return PlayerViewModel(
        id=str(player.id),
        name=player.full_name,
        position=player.position.value,
        age=player.age,
        experience=player.experience,
        team_id=player.team_id,
        physical=PhysicalAttributesView(
            height=physical.height,
            weight=physical.weight,
            arm_length=physical.arm_length,
            hand_size=physical.hand_size,
            wingspan=physical.wingspan,
            speed=physical.speed,
            acceleration=physical.acceleration,
            agility=physical.agility,
            strength=physical.strength,
            vertical_jump=physical.vertical_jump,
        ),
        skill_ranges={
            name: PerceivedSkillRange(min=skill.perceived_min, max=skill.perceived_max)
            for name, skill in player.skills.items()
        },
        # The reveal list is authoritative; it is not intersected with the
        # traits the player actually has.
        known_traits=list(player.hidden_traits.revealed_to_user),
        scheme_fit_description=get_scheme_fit_description(player.scheme_fits, scheme),
        role_fit_description=get_role_fit_description(player.role_fit),
        injury_display=get_injury_display(player.injury_status),
        draft_info=DraftInfo(
            year=player.draft_year,
            round=player.draft_round,
            pick=player.draft_pick,
        ),
    )


def serialize_view_model(view_model: PlayerViewModel) -> str:
    return view_model.model_dump_json()


def parse_view_model(data: str) -> PlayerViewModel:
    return PlayerViewModel.model_validate_json(data)


def find_privacy_violations(serialized: str) -> list[str]:
    """Forbidden terms present in a serialized view."""
    lowered = serialized.lower()
    return [term for term in FORBIDDEN_VIEW_TERMS if term.lower() in lowered]


def validate_view_model_privacy(
    view_model: Union[PlayerViewModel, str],
) -> ValidationResult:
    """
    Scan a view (or its JSON) for anything that looks like hidden data.

    This is a regression guard on top of the type-level separation.
    """
    serialized = (
        view_model if isinstance(view_model, str) else serialize_view_model(view_model)
    )
    result = ValidationResult()
    for term in find_privacy_violations(serialized):
        result.add(f"forbidden term {term} in view")
    return result
