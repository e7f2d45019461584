"""Player model - the full-fidelity, engine-internal record."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from prospect.core.enums import Position
from prospect.core.models.consistency import (
    ConsistencyProfile,
    validate_consistency_profile,
)
from prospect.core.models.injury import (
    InjuryStatus,
    create_healthy_status,
    validate_injury_status,
)
from prospect.core.models.it_factor import ItFactor, validate_it_factor
from prospect.core.models.physical import PhysicalAttributes, validate_physical_attributes
from prospect.core.models.role_fit import RoleFit, validate_role_fit
from prospect.core.models.scheme_fit import SchemeFits, validate_scheme_fits
from prospect.core.models.skills import TechnicalSkills, validate_technical_skills
from prospect.core.models.traits import HiddenTraits, validate_hidden_traits
from prospect.core.validation import ValidationResult

MIN_AGE = 18
MAX_AGE = 45
DRAFT_ROUNDS = 7
PICKS_PER_ROUND = 32


@dataclass
class Player:
    """
    Represents an individual football player.

    Holds ground truth: true skill values, the It factor, consistency and
    role effectiveness. Never hand this to a client; project it with
    ``create_player_view_model`` instead. Each player owns its sub-records.
    """

    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    position: Position = Position.QB
    age: int = 22
    experience: int = 0

    physical: PhysicalAttributes = field(default_factory=PhysicalAttributes)
    skills: TechnicalSkills = field(default_factory=dict)
    hidden_traits: HiddenTraits = field(default_factory=HiddenTraits)
    it_factor: ItFactor = field(default_factory=ItFactor)
    consistency: ConsistencyProfile = field(default_factory=ConsistencyProfile)
    scheme_fits: SchemeFits = field(default_factory=SchemeFits)
    role_fit: RoleFit = field(default_factory=RoleFit)

    contract_id: Optional[str] = None
    injury_status: InjuryStatus = field(default_factory=create_healthy_status)
    fatigue: int = 0
    morale: int = 75

    college: Optional[str] = None
    team_id: Optional[str] = None
    draft_year: int = 0
    draft_round: int = 0  # 0 = undrafted
    draft_pick: int = 0

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        """Short display name (e.g., 'T. Brady')."""
        if self.first_name:
            return f"{self.first_name[0]}. {self.last_name}"
        return self.last_name

    @property
    def is_rookie(self) -> bool:
        return self.experience == 0

    @property
    def is_undrafted(self) -> bool:
        return self.draft_round == 0


def validate_player(player: Player) -> ValidationResult:
    """Validate the whole entity, reporting every failing field."""
    result = ValidationResult()
    result.check(bool(player.first_name), "first_name: empty")
    result.check(bool(player.last_name), "last_name: empty")
    result.check(isinstance(player.position, Position), "position: not a Position")
    result.check_range("age", player.age, MIN_AGE, MAX_AGE)
    result.check_range("experience", player.experience, 0, MAX_AGE - MIN_AGE)
    if isinstance(player.age, int) and isinstance(player.experience, int):
        result.check(
            player.experience <= player.age - MIN_AGE,
            "experience: longer than the player has been an adult",
        )
    result.check_range("fatigue", player.fatigue, 0, 100)
    result.check_range("morale", player.morale, 0, 100)

    result.merge(validate_physical_attributes(player.physical), prefix="physical")
    position = player.position if isinstance(player.position, Position) else None
    result.merge(validate_technical_skills(player.skills, position), prefix="skills")
    result.merge(validate_hidden_traits(player.hidden_traits), prefix="hidden_traits")
    result.merge(validate_it_factor(player.it_factor), prefix="it_factor")
    result.merge(validate_consistency_profile(player.consistency), prefix="consistency")
    result.merge(validate_scheme_fits(player.scheme_fits), prefix="scheme_fits")
    result.merge(validate_role_fit(player.role_fit), prefix="role_fit")
    result.merge(validate_injury_status(player.injury_status), prefix="injury_status")

    result.check_range("draft_round", player.draft_round, 0, DRAFT_ROUNDS)
    if player.draft_round == 0:
        result.check(player.draft_pick == 0, "draft_pick: set for an undrafted player")
    else:
        first = (player.draft_round - 1) * PICKS_PER_ROUND + 1
        last = player.draft_round * PICKS_PER_ROUND
        result.check_range("draft_pick", player.draft_pick, first, last)
    return result
