"""Hidden personality traits and which of them the user has seen."""

from dataclasses import dataclass, field
from enum import Enum

from prospect.core.validation import ValidationResult


class PositiveTrait(Enum):
    CLUTCH = "clutch"
    FILM_JUNKIE = "film_junkie"
    IRON_MAN = "iron_man"
    LEADER = "leader"
    COOL_UNDER_PRESSURE = "cool_under_pressure"
    MOTOR = "motor"
    ROUTE_TECHNICIAN = "route_technician"
    BRICK_WALL = "brick_wall"
    SCHEME_VERSATILE = "scheme_versatile"
    TEAM_FIRST = "team_first"


class NegativeTrait(Enum):
    CHOKES = "chokes"
    LAZY = "lazy"
    INJURY_PRONE = "injury_prone"
    LOCKER_ROOM_CANCER = "locker_room_cancer"
    HOT_HEAD = "hot_head"
    GLASS_HANDS = "glass_hands"
    DISAPPEARS = "disappears"
    SYSTEM_DEPENDENT = "system_dependent"
    DIVA = "diva"


@dataclass
class HiddenTraits:
    """
    A player's traits. ``revealed_to_user`` holds trait names the user has
    discovered; it is the only part a view may show.
    """

    positive: list[PositiveTrait] = field(default_factory=list)
    negative: list[NegativeTrait] = field(default_factory=list)
    revealed_to_user: list[str] = field(default_factory=list)

    @property
    def all_trait_names(self) -> list[str]:
        return [t.value for t in self.positive] + [t.value for t in self.negative]

    def reveal(self, trait_name: str) -> bool:
        """Mark a possessed trait as seen. Returns False if not possessed."""
        if trait_name not in self.all_trait_names:
            return False
        if trait_name not in self.revealed_to_user:
            self.revealed_to_user.append(trait_name)
        return True


def validate_hidden_traits(traits: HiddenTraits) -> ValidationResult:
    result = ValidationResult()
    for trait in traits.positive:
        result.check(isinstance(trait, PositiveTrait), f"positive: unknown trait {trait!r}")
    for trait in traits.negative:
        result.check(isinstance(trait, NegativeTrait), f"negative: unknown trait {trait!r}")
    possessed = set(traits.all_trait_names)
    for name in traits.revealed_to_user:
        result.check(name in possessed, f"revealed_to_user: {name} not possessed")
    return result
