"""Role hierarchy and a player's fit within it."""

from dataclasses import dataclass
from enum import Enum

from prospect.core.validation import ValidationResult


class RoleTier(Enum):
    """Roles a player can occupy, declared from highest to lowest."""

    FRANCHISE_CORNERSTONE = "franchise_cornerstone"
    HIGH_END_STARTER = "high_end_starter"
    SOLID_STARTER = "solid_starter"
    QUALITY_ROTATIONAL = "quality_rotational"
    SPECIALIST = "specialist"
    DEPTH = "depth"
    PRACTICE_SQUAD = "practice_squad"

    @property
    def rank(self) -> int:
        """0 for the top of the hierarchy, increasing downward."""
        return ROLE_HIERARCHY.index(self)

    @property
    def display_name(self) -> str:
        return ROLE_DISPLAY_NAMES[self]


ROLE_HIERARCHY: tuple[RoleTier, ...] = tuple(RoleTier)

ROLE_DISPLAY_NAMES: dict[RoleTier, str] = {
    RoleTier.FRANCHISE_CORNERSTONE: "Franchise Cornerstone",
    RoleTier.HIGH_END_STARTER: "High-End Starter",
    RoleTier.SOLID_STARTER: "Solid Starter",
    RoleTier.QUALITY_ROTATIONAL: "Quality Rotational",
    RoleTier.SPECIALIST: "Specialist",
    RoleTier.DEPTH: "Depth",
    RoleTier.PRACTICE_SQUAD: "Practice Squad",
}

EFFECTIVENESS_MIN = 1
EFFECTIVENESS_MAX = 100


@dataclass
class RoleFit:
    """
    Ceiling and current role plus the hidden effectiveness score.

    ``role_effectiveness`` is engine-internal; views only get a sentence.
    """

    ceiling: RoleTier = RoleTier.DEPTH
    current_role: RoleTier = RoleTier.DEPTH
    role_effectiveness: int = 50


def get_role_display_name(role: RoleTier) -> str:
    return ROLE_DISPLAY_NAMES.get(role, "Unknown Role")


# (minimum effectiveness, phrase), checked top down
_EFFECTIVENESS_PHRASES: tuple[tuple[int, str], ...] = (
    (80, "thriving in this role"),
    (60, "performing well in this role"),
    (40, "adequate in this role"),
    (EFFECTIVENESS_MIN, "struggling in this role"),
)


def get_role_fit_description(role_fit: RoleFit) -> str:
    """Qualitative sentence for the current role. Never includes the number."""
    phrase = _EFFECTIVENESS_PHRASES[-1][1]
    for minimum, text in _EFFECTIVENESS_PHRASES:
        if role_fit.role_effectiveness >= minimum:
            phrase = text
            break
    return f"{get_role_display_name(role_fit.current_role)} - {phrase}"


def validate_role_fit(role_fit: RoleFit) -> ValidationResult:
    result = ValidationResult()
    result.check(isinstance(role_fit.ceiling, RoleTier), "ceiling: not a RoleTier")
    result.check(isinstance(role_fit.current_role, RoleTier), "current_role: not a RoleTier")
    if isinstance(role_fit.ceiling, RoleTier) and isinstance(role_fit.current_role, RoleTier):
        result.check(
            role_fit.current_role.rank >= role_fit.ceiling.rank,
            "current_role: ranked above ceiling",
        )
    result.check_range(
        "role_effectiveness",
        role_fit.role_effectiveness,
        EFFECTIVENESS_MIN,
        EFFECTIVENESS_MAX,
    )
    return result
