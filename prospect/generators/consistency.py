"""Consistency profile generation (hidden week-to-week variance)."""

import random
from typing import Optional

from prospect.core.enums import Position, PositionGroup
from prospect.core.models.consistency import ConsistencyProfile, ConsistencyTier, StreakState
from prospect.core.sampling import random_int, resolve_rng, weighted_choice

BASE_TIER_WEIGHTS: dict[ConsistencyTier, float] = {
    ConsistencyTier.ROCK_SOLID: 0.10,
    ConsistencyTier.STEADY: 0.25,
    ConsistencyTier.AVERAGE: 0.35,
    ConsistencyTier.STREAKY: 0.20,
    ConsistencyTier.VOLATILE: 0.10,
}

# Weight moved per point of It factor away from 50
IT_FACTOR_SHIFT = 0.003
SPECIALIST_STREAKY_BONUS = 0.05
MIN_TIER_WEIGHT = 0.01

STREAK_CHANCE = 0.3
STREAK_GAMES_RANGE = (1, 4)


def get_tier_weights(position: Position, it_factor: int) -> dict[ConsistencyTier, float]:
    """
    Tier weights for a player.

    A high It factor pulls weight from the streaky end toward the steady end,
    a low one does the reverse. Kickers and punters lean streaky.
    """
    shift = (it_factor - 50) * IT_FACTOR_SHIFT
    weights = dict(BASE_TIER_WEIGHTS)
    weights[ConsistencyTier.ROCK_SOLID] += shift / 2
    weights[ConsistencyTier.STEADY] += shift / 2
    weights[ConsistencyTier.STREAKY] -= shift / 2
    weights[ConsistencyTier.VOLATILE] -= shift / 2
    if position.group == PositionGroup.SPECIAL_TEAMS:
        weights[ConsistencyTier.STREAKY] += SPECIALIST_STREAKY_BONUS
    return {tier: max(MIN_TIER_WEIGHT, weight) for tier, weight in weights.items()}


def generate_consistency_profile(
    position: Position,
    it_factor: int,
    rng: Optional[random.Random] = None,
) -> ConsistencyProfile:
    """Roll a consistency tier and an opening streak state."""
    rng = resolve_rng(rng)
    tier = weighted_choice(list(get_tier_weights(position, it_factor).items()), rng)

    if rng.random() >= STREAK_CHANCE:
        return ConsistencyProfile(tier=tier)

    streak = StreakState.HOT if rng.random() < 0.5 else StreakState.COLD
    return ConsistencyProfile(
        tier=tier,
        current_streak=streak,
        streak_games_remaining=random_int(*STREAK_GAMES_RANGE, rng),
    )
