"""
Technical skill generation.

Each skill gets a hidden true value drawn from a position-specific
distribution, plus the perceived range scouts report. The range narrows by
three points per year as the player approaches maturity and collapses onto
the true value at maturity.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from prospect.core.enums import Position, SkillGroup
from prospect.core.models.skills import (
    SKILL_MAX,
    SKILL_MIN,
    SkillValue,
    TechnicalSkills,
    get_skill_names,
)
from prospect.core.sampling import bounded_normal, clamp, normal
from prospect.generators.maturity import get_random_maturity_age

logger = logging.getLogger(__name__)

MAX_RANGE_WIDTH = 16
RANGE_WIDTH_PER_YEAR = 3
FALLBACK_MEAN = 50
FALLBACK_STD_DEV = 15
CORRELATION_BLEND = 0.5


class SkillTier(Enum):
    """Talent tier that shifts every skill's sampling mean."""

    ELITE = "elite"
    STARTER = "starter"
    BACKUP = "backup"
    FRINGE = "fringe"
    RANDOM = "random"


TIER_MODIFIERS: dict[SkillTier, int] = {
    SkillTier.ELITE: 25,
    SkillTier.STARTER: 12,
    SkillTier.BACKUP: 0,
    SkillTier.FRINGE: -12,
    SkillTier.RANDOM: 0,
}


def coerce_skill_tier(tier: Union[SkillTier, str, None]) -> SkillTier:
    """Accept a SkillTier, its string value, or None (random)."""
    if tier is None:
        return SkillTier.RANDOM
    if isinstance(tier, SkillTier):
        return tier
    return SkillTier(tier)


@dataclass(frozen=True)
class SkillDistribution:
    """
    Sampling parameters for one skill.

    ``correlated_with`` only pulls toward skills generated *earlier* in the
    same pass; names that come later in the list are ignored.
    """

    name: str
    mean: float
    std_dev: float
    correlated_with: tuple[str, ...] = ()


def _skill(name: str, mean: float, std_dev: float, *correlated_with: str) -> SkillDistribution:
    return SkillDistribution(name, mean, std_dev, tuple(correlated_with))


# Ordered per group; the order is part of the configuration.
POSITION_SKILL_SETS: dict[SkillGroup, tuple[SkillDistribution, ...]] = {
    SkillGroup.QB: (
        _skill("arm_strength", 60, 15),
        _skill("accuracy", 55, 15, "decision_making"),
        _skill("decision_making", 50, 15, "accuracy", "pocket_presence"),
        _skill("pocket_presence", 50, 15, "decision_making"),
        _skill("play_action", 55, 15),
        _skill("mobility", 50, 18),
        _skill("leadership", 55, 15),
        _skill("presnap", 50, 15, "decision_making"),
    ),
    SkillGroup.RB: (
        _skill("vision", 55, 15, "cut_ability"),
        _skill("cut_ability", 55, 15, "vision"),
        _skill("power", 55, 15),
        _skill("breakaway", 50, 18),
        _skill("catching", 50, 18),
        _skill("pass_protection", 45, 15),
        _skill("fumble_protection", 55, 15),
    ),
    SkillGroup.WR: (
        _skill("route_running", 55, 15, "separation"),
        _skill("catching", 55, 15, "contested", "tracking"),
        _skill("separation", 55, 15, "route_running"),
        _skill("yac", 50, 18),
        _skill("blocking", 40, 15),
        _skill("contested", 50, 15, "catching"),
        _skill("tracking", 55, 15, "catching"),
    ),
    SkillGroup.TE: (
        _skill("blocking", 55, 15),
        _skill("route_running", 50, 15),
        _skill("catching", 55, 15, "contested"),
        _skill("yac", 50, 18),
        _skill("contested", 55, 15, "catching"),
        _skill("sealing", 55, 15, "blocking"),
    ),
    SkillGroup.OL: (
        _skill("pass_block", 55, 15, "footwork"),
        _skill("run_block", 55, 15, "power"),
        _skill("awareness", 50, 15),
        _skill("footwork", 55, 15, "pass_block"),
        _skill("power", 55, 15, "run_block", "sustain"),
        _skill("sustain", 55, 15, "power"),
        _skill("pull_ability", 50, 18),
    ),
    SkillGroup.DL: (
        _skill("pass_rush", 55, 15, "finesse"),
        _skill("run_defense", 55, 15, "power"),
        _skill("power", 55, 15, "run_defense"),
        _skill("finesse", 50, 18, "pass_rush"),
        _skill("awareness", 50, 15),
        _skill("stamina", 55, 15),
        _skill("pursuit", 55, 15),
    ),
    SkillGroup.LB: (
        _skill("tackling", 55, 15, "shed_blocks"),
        _skill("coverage", 50, 18, "zone_coverage"),
        _skill("blitzing", 50, 18),
        _skill("pursuit", 55, 15),
        _skill("awareness", 55, 15),
        _skill("shed_blocks", 55, 15, "tackling"),
        _skill("zone_coverage", 50, 18, "coverage"),
    ),
    SkillGroup.DB: (
        _skill("man_coverage", 55, 15, "press"),
        _skill("zone_coverage", 55, 15, "awareness"),
        _skill("tackling", 50, 15),
        _skill("ball_skills", 55, 15),
        _skill("awareness", 55, 15, "zone_coverage"),
        _skill("closing", 55, 15),
        _skill("press", 50, 18, "man_coverage"),
    ),
    SkillGroup.K: (
        _skill("kick_power", 60, 15),
        _skill("kick_accuracy", 55, 15),
        _skill("clutch", 50, 20),
    ),
    SkillGroup.P: (
        _skill("punt_power", 55, 15, "hang_time"),
        _skill("punt_accuracy", 55, 15, "directional"),
        _skill("hang_time", 55, 15, "punt_power"),
        _skill("directional", 50, 18, "punt_accuracy"),
    ),
}


def calculate_range_width(years_until_maturity: float) -> int:
    """
    Width of the perceived range.

    0 at maturity, three points wider per year before it, capped at 16.
    Negative input is treated as already mature.
    """
    return int(min(MAX_RANGE_WIDTH, max(0, years_until_maturity * RANGE_WIDTH_PER_YEAR)))


def create_perceived_range(
    true_value: int,
    range_width: float,
    rng: Optional[random.Random] = None,
) -> tuple[int, int]:
    """
    Build the (min, max) band scouts report around a true value.

    The band is centred on the true value plus a small scouting error, so it
    usually but not always contains the truth. Near 1 or 100 the clamp can
    make the band narrower on one side.
    """
    if range_width == 0:
        return true_value, true_value

    scout_error = normal(0, range_width * 0.1, rng)
    center = true_value + scout_error
    half_width = range_width / 2

    perceived_min = int(clamp(round(center - half_width), SKILL_MIN, SKILL_MAX))
    perceived_max = int(clamp(round(center + half_width), SKILL_MIN, SKILL_MAX))

    if perceived_min > perceived_max:
        perceived_min, perceived_max = perceived_max, perceived_min
    return perceived_min, perceived_max


def generate_skill_value(
    distribution: SkillDistribution,
    player_age: int,
    maturity_age: int,
    correlated_value: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> SkillValue:
    """
    Generate one skill's true value and perceived range.

    Args:
        distribution: Sampling parameters (tier modifier already applied)
        player_age: Current age
        maturity_age: Age at which the range collapses onto the true value
        correlated_value: Average of already-generated correlated skills
        rng: Random stream to draw from
    """
    mean = distribution.mean
    if correlated_value is not None:
        mean = mean * (1 - CORRELATION_BLEND) + correlated_value * CORRELATION_BLEND

    true_value = round(bounded_normal(mean, distribution.std_dev, SKILL_MIN, SKILL_MAX, rng))

    years_until_maturity = max(0, maturity_age - player_age)
    range_width = calculate_range_width(years_until_maturity)
    perceived_min, perceived_max = create_perceived_range(true_value, range_width, rng)

    return SkillValue(
        true_value=true_value,
        perceived_min=perceived_min,
        perceived_max=perceived_max,
        maturity_age=maturity_age,
    )


def _distributions_for(position: Position) -> dict[str, SkillDistribution]:
    skill_set = POSITION_SKILL_SETS.get(position.skill_group, ())
    return {dist.name: dist for dist in skill_set}


def generate_skills_for_position(
    position: Position,
    player_age: int,
    skill_tier: Union[SkillTier, str, None] = None,
    rng: Optional[random.Random] = None,
    maturity_age: Optional[int] = None,
) -> TechnicalSkills:
    """
    Generate every skill a position is graded on.

    Skills are produced in declaration order so correlations only reach
    backward. A skill missing from the distribution table falls back to
    mean 50 (plus tier modifier), std dev 15.

    Args:
        position: Player's position
        player_age: Current age
        skill_tier: Tier to bias generation toward
        rng: Random stream to draw from
        maturity_age: Fixed maturity age (sampled for the position if None)

    Returns:
        Mapping of skill name to SkillValue
    """
    tier = coerce_skill_tier(skill_tier)
    tier_modifier = TIER_MODIFIERS[tier]
    if maturity_age is None:
        maturity_age = get_random_maturity_age(position, rng)

    distributions = _distributions_for(position)
    skills: TechnicalSkills = {}

    for skill_name in get_skill_names(position):
        distribution = distributions.get(skill_name)
        if distribution is None:
            logger.debug(f"No distribution for {skill_name} ({position.value}), using fallback")
            fallback = SkillDistribution(
                skill_name, FALLBACK_MEAN + tier_modifier, FALLBACK_STD_DEV
            )
            skills[skill_name] = generate_skill_value(
                fallback, player_age, maturity_age, rng=rng
            )
            continue

        generated = [
            skills[name].true_value for name in distribution.correlated_with if name in skills
        ]
        correlated_value = sum(generated) / len(generated) if generated else None

        modified = SkillDistribution(
            name=distribution.name,
            mean=clamp(distribution.mean + tier_modifier, SKILL_MIN, SKILL_MAX),
            std_dev=distribution.std_dev,
            correlated_with=distribution.correlated_with,
        )
        skills[skill_name] = generate_skill_value(
            modified, player_age, maturity_age, correlated_value, rng
        )

    return skills


def get_average_true_skill_value(skills: TechnicalSkills) -> float:
    """Average true value across all skills (engine calculations only)."""
    if not skills:
        return 50.0
    return sum(skill.true_value for skill in skills.values()) / len(skills)
