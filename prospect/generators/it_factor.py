"""
Generation of the hidden "It" factor.

Values come from a skewed six-tier mixture rather than a bell curve. A
projected draft slot can bump the value upward: better slots correlate with a
higher score without guaranteeing one.
"""

import random
from typing import Optional, Union

from prospect.core.models.it_factor import (
    IT_FACTOR_MAX,
    IT_FACTOR_MIN,
    IT_FACTOR_TIERS,
    ItFactor,
)
from prospect.core.sampling import clamp, random_float, random_int, resolve_rng, weighted_choice
from prospect.generators.skills import SkillTier, coerce_skill_tier

# (max pick, bump chance), checked in order
DRAFT_POSITION_BUMPS: tuple[tuple[int, float], ...] = (
    (10, 0.30),
    (32, 0.20),
    (64, 0.10),
    (100, 0.05),
)

BUMP_RANGE = (5.0, 15.0)

# Fixed draft-slot proxies used when a talent tier is known instead of a pick
SKILL_TIER_DRAFT_POSITIONS: dict[SkillTier, int] = {
    SkillTier.ELITE: 5,
    SkillTier.STARTER: 40,
    SkillTier.BACKUP: 100,
    SkillTier.FRINGE: 200,
}


def get_bump_chance(draft_position: Optional[int]) -> float:
    """Chance of a tier bump for a projected pick. 0 when no pick is given."""
    if draft_position is None:
        return 0.0
    for max_pick, bump_chance in DRAFT_POSITION_BUMPS:
        if draft_position <= max_pick:
            return bump_chance
    return 0.0


def generate_it_factor(
    draft_position: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> ItFactor:
    """
    Sample an It factor.

    Args:
        draft_position: Projected overall pick, if any
        rng: Random stream to draw from

    Returns:
        ItFactor within [1, 100]
    """
    rng = resolve_rng(rng)
    low, high = weighted_choice(
        [((low, high), weight) for _, low, high, weight in IT_FACTOR_TIERS], rng
    )
    value = random_int(low, high, rng)

    bump_chance = get_bump_chance(draft_position)
    if bump_chance > 0 and rng.random() < bump_chance:
        value = min(IT_FACTOR_MAX, value + round(random_float(*BUMP_RANGE, rng)))

    return ItFactor(value=int(clamp(value, IT_FACTOR_MIN, IT_FACTOR_MAX)))


def generate_it_factor_for_skill_tier(
    skill_tier: Union[SkillTier, str, None],
    rng: Optional[random.Random] = None,
) -> ItFactor:
    """Sample an It factor using the tier's fixed draft-slot proxy."""
    tier = coerce_skill_tier(skill_tier)
    return generate_it_factor(SKILL_TIER_DRAFT_POSITIONS.get(tier), rng)
