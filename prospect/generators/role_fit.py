"""
Role ceiling, current role and hidden effectiveness.

Pure functions of already-generated data: average true skill, It factor and
consistency score. Only the current role and a qualitative sentence ever
reach a view.
"""

import random
from typing import Optional

from prospect.core.models.consistency import ConsistencyTier
from prospect.core.models.role_fit import (
    EFFECTIVENESS_MAX,
    EFFECTIVENESS_MIN,
    ROLE_HIERARCHY,
    RoleFit,
    RoleTier,
)
from prospect.core.models.skills import SKILL_MAX, SKILL_MIN, TechnicalSkills
from prospect.core.sampling import clamp, random_float, resolve_rng, weighted_choice
from prospect.generators.skills import get_average_true_skill_value

# Minimum effective skill per ceiling, highest first
ROLE_THRESHOLDS: tuple[tuple[RoleTier, int], ...] = (
    (RoleTier.FRANCHISE_CORNERSTONE, 80),
    (RoleTier.HIGH_END_STARTER, 70),
    (RoleTier.SOLID_STARTER, 60),
    (RoleTier.QUALITY_ROTATIONAL, 52),
    (RoleTier.SPECIALIST, 45),
    (RoleTier.DEPTH, 35),
    (RoleTier.PRACTICE_SQUAD, 1),
)

# Weight by distance below the ceiling
CURRENT_ROLE_WEIGHTS: tuple[float, ...] = (0.3, 0.4, 0.3)

BASE_EFFECTIVENESS = 75
EFFECTIVENESS_NOISE = 10.0


def calculate_it_bonus(it_factor: int) -> float:
    return (it_factor - 50) / 10


def calculate_consistency_bonus(consistency_score: int) -> float:
    return (consistency_score - 50) / 20


def determine_ceiling(effective_skill: float) -> RoleTier:
    """First role whose threshold the effective skill reaches."""
    for role, minimum in ROLE_THRESHOLDS:
        if effective_skill >= minimum:
            return role
    return ROLE_HIERARCHY[-1]


def get_role_threshold_center(role: RoleTier) -> float:
    """Midpoint of a role's band: its minimum and the next higher minimum (or 100)."""
    thresholds = dict(ROLE_THRESHOLDS)
    minimum = thresholds.get(role, SKILL_MIN)
    if role.rank == 0:
        upper = SKILL_MAX
    else:
        upper = thresholds.get(ROLE_HIERARCHY[role.rank - 1], SKILL_MAX)
    return (minimum + upper) / 2


def choose_current_role(ceiling: RoleTier, rng: Optional[random.Random] = None) -> RoleTier:
    """Ceiling or up to two ranks below it, weighted toward one below."""
    options = []
    for distance, weight in enumerate(CURRENT_ROLE_WEIGHTS):
        rank = ceiling.rank + distance
        if rank < len(ROLE_HIERARCHY):
            options.append((ROLE_HIERARCHY[rank], weight))
    return weighted_choice(options, rng)


def generate_role_fit(
    skills: TechnicalSkills,
    it_factor: int,
    consistency_tier: ConsistencyTier,
    rng: Optional[random.Random] = None,
) -> RoleFit:
    """
    Derive a player's role fit.

    Args:
        skills: Generated technical skills
        it_factor: Hidden It factor value
        consistency_tier: Consistency tier (mapped to its score)
        rng: Random stream to draw from

    Returns:
        RoleFit with current role never above the ceiling
    """
    rng = resolve_rng(rng)
    average_skill = get_average_true_skill_value(skills)
    it_bonus = calculate_it_bonus(it_factor)
    consistency_bonus = calculate_consistency_bonus(consistency_tier.score)

    effective_skill = clamp(average_skill + it_bonus + consistency_bonus, SKILL_MIN, SKILL_MAX)
    ceiling = determine_ceiling(effective_skill)
    current_role = choose_current_role(ceiling, rng)

    distance = abs(average_skill - get_role_threshold_center(current_role))
    effectiveness = (
        BASE_EFFECTIVENESS
        - distance
        + 2 * it_bonus
        + 2 * consistency_bonus
        + random_float(-EFFECTIVENESS_NOISE, EFFECTIVENESS_NOISE, rng)
    )

    return RoleFit(
        ceiling=ceiling,
        current_role=current_role,
        role_effectiveness=int(clamp(round(effectiveness), EFFECTIVENESS_MIN, EFFECTIVENESS_MAX)),
    )
