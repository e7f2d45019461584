"""Week-to-week consistency profile (hidden)."""

from dataclasses import dataclass
from enum import Enum

from prospect.core.validation import ValidationResult


class ConsistencyTier(Enum):
    ROCK_SOLID = "rock_solid"
    STEADY = "steady"
    AVERAGE = "average"
    STREAKY = "streaky"
    VOLATILE = "volatile"

    @property
    def score(self) -> int:
        """1-100 score used by role-fit calculations."""
        return CONSISTENCY_SCORES[self]


CONSISTENCY_SCORES: dict[ConsistencyTier, int] = {
    ConsistencyTier.ROCK_SOLID: 90,
    ConsistencyTier.STEADY: 70,
    ConsistencyTier.AVERAGE: 50,
    ConsistencyTier.STREAKY: 35,
    ConsistencyTier.VOLATILE: 20,
}


class StreakState(Enum):
    HOT = "hot"
    COLD = "cold"
    NEUTRAL = "neutral"


@dataclass
class ConsistencyProfile:
    tier: ConsistencyTier = ConsistencyTier.AVERAGE
    current_streak: StreakState = StreakState.NEUTRAL
    streak_games_remaining: int = 0


def validate_consistency_profile(profile: ConsistencyProfile) -> ValidationResult:
    result = ValidationResult()
    result.check(isinstance(profile.tier, ConsistencyTier), "tier: not a ConsistencyTier")
    result.check(
        isinstance(profile.current_streak, StreakState),
        "current_streak: not a StreakState",
    )
    result.check_range("streak_games_remaining", profile.streak_games_remaining, 0, 17)
    if profile.current_streak == StreakState.NEUTRAL:
        result.check(
            profile.streak_games_remaining == 0,
            "streak_games_remaining: set while no streak is active",
        )
    return result
