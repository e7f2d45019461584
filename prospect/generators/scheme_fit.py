"""
Scheme fit scoring.

Each scheme is a static profile of physical preferences, weighted skills and
per-position importance. A player is scored against every scheme on their
side of the ball and the score is bucketed into a FitLevel label.
"""

from dataclasses import dataclass, field
from typing import Optional

from prospect.core.enums import Position
from prospect.core.models.physical import PhysicalAttributes
from prospect.core.models.scheme_fit import (
    FIT_LEVEL_ORDER,
    DefensiveScheme,
    FitLevel,
    OffensiveScheme,
    Scheme,
    SchemeFits,
)
from prospect.core.models.skills import TechnicalSkills
from prospect.core.sampling import clamp

BASE_FIT_SCORE = 50
PHYSICAL_BONUS = 10
SPEED_MISS_MARGIN = 0.2
RATING_MISS_MARGIN = 15
DEFAULT_POSITION_IMPORTANCE = 5

# (minimum score, label), checked top down
FIT_LEVEL_CUTS: tuple[tuple[float, FitLevel], ...] = (
    (80, FitLevel.PERFECT),
    (65, FitLevel.GOOD),
    (45, FitLevel.NEUTRAL),
    (30, FitLevel.POOR),
)


@dataclass(frozen=True)
class SchemeProfile:
    """What a scheme wants from a player. Unset physical preferences are skipped."""

    speed_threshold: Optional[float] = None
    agility_min: Optional[int] = None
    strength_min: Optional[int] = None
    skill_preferences: dict[str, int] = field(default_factory=dict)
    position_importance: dict[Position, int] = field(default_factory=dict)


OFFENSIVE_SCHEME_PROFILES: dict[OffensiveScheme, SchemeProfile] = {
    OffensiveScheme.WEST_COAST: SchemeProfile(
        speed_threshold=4.6,
        agility_min=65,
        skill_preferences={
            "catching": 9,
            "route_running": 8,
            "yac": 8,
            "accuracy": 9,
            "decision_making": 8,
        },
        position_importance={Position.QB: 10, Position.WR: 8, Position.TE: 7, Position.RB: 6},
    ),
    OffensiveScheme.AIR_RAID: SchemeProfile(
        speed_threshold=4.55,
        agility_min=70,
        skill_preferences={
            "arm_strength": 8,
            "accuracy": 9,
            "route_running": 9,
            "separation": 8,
            "catching": 8,
        },
        position_importance={Position.QB: 10, Position.WR: 10, Position.TE: 5, Position.RB: 4},
    ),
    OffensiveScheme.SPREAD_OPTION: SchemeProfile(
        speed_threshold=4.65,
        agility_min=75,
        skill_preferences={
            "mobility": 10,
            "decision_making": 8,
            "vision": 8,
            "cut_ability": 8,
            "breakaway": 7,
        },
        position_importance={Position.QB: 10, Position.RB: 8, Position.WR: 6},
    ),
    OffensiveScheme.POWER_RUN: SchemeProfile(
        strength_min=75,
        skill_preferences={"power": 10, "run_block": 10, "pass_block": 6, "sustain": 8},
        position_importance={
            Position.LT: 9,
            Position.LG: 10,
            Position.C: 8,
            Position.RG: 10,
            Position.RT: 9,
            Position.RB: 8,
            Position.TE: 7,
        },
    ),
    OffensiveScheme.ZONE_RUN: SchemeProfile(
        agility_min=60,
        skill_preferences={
            "footwork": 9,
            "awareness": 8,
            "run_block": 8,
            "pull_ability": 7,
            "vision": 10,
            "cut_ability": 9,
        },
        position_importance={
            Position.LT: 8,
            Position.LG: 9,
            Position.C: 9,
            Position.RG: 9,
            Position.RT: 8,
            Position.RB: 10,
        },
    ),
    OffensiveScheme.PLAY_ACTION: SchemeProfile(
        strength_min=60,
        skill_preferences={
            "play_action": 10,
            "arm_strength": 8,
            "accuracy": 8,
            "route_running": 7,
            "blocking": 7,
            "run_block": 8,
        },
        position_importance={Position.QB: 10, Position.TE: 8, Position.RB: 7, Position.WR: 6},
    ),
}

DEFENSIVE_SCHEME_PROFILES: dict[DefensiveScheme, SchemeProfile] = {
    DefensiveScheme.FOUR_THREE_UNDER: SchemeProfile(
        strength_min=70,
        skill_preferences={"pass_rush": 9, "run_defense": 9, "tackling": 8, "shed_blocks": 8},
        position_importance={Position.DE: 10, Position.DT: 9, Position.OLB: 7, Position.ILB: 8},
    ),
    DefensiveScheme.THREE_FOUR: SchemeProfile(
        strength_min=75,
        skill_preferences={"run_defense": 9, "blitzing": 8, "coverage": 7, "shed_blocks": 9},
        position_importance={Position.DT: 10, Position.OLB: 10, Position.ILB: 9, Position.DE: 8},
    ),
    DefensiveScheme.COVER_THREE: SchemeProfile(
        speed_threshold=4.6,
        skill_preferences={"zone_coverage": 10, "awareness": 9, "ball_skills": 8, "tackling": 7},
        position_importance={Position.FS: 10, Position.CB: 9, Position.SS: 8, Position.ILB: 7},
    ),
    DefensiveScheme.COVER_TWO: SchemeProfile(
        speed_threshold=4.55,
        skill_preferences={"zone_coverage": 9, "tackling": 8, "awareness": 9, "closing": 8},
        position_importance={Position.FS: 10, Position.SS: 10, Position.CB: 8, Position.ILB: 7},
    ),
    DefensiveScheme.MAN_PRESS: SchemeProfile(
        speed_threshold=4.5,
        agility_min=80,
        skill_preferences={"man_coverage": 10, "press": 10, "closing": 8, "ball_skills": 7},
        position_importance={Position.CB: 10, Position.SS: 7, Position.FS: 7},
    ),
    DefensiveScheme.BLITZ_HEAVY: SchemeProfile(
        speed_threshold=4.65,
        agility_min=70,
        skill_preferences={"blitzing": 10, "pass_rush": 9, "tackling": 8, "pursuit": 8},
        position_importance={Position.OLB: 10, Position.ILB: 9, Position.SS: 8, Position.CB: 6},
    ),
}


def _physical_adjustment(physical: PhysicalAttributes, profile: SchemeProfile) -> int:
    adjustment = 0
    # Lower forty time is better
    if profile.speed_threshold is not None:
        if physical.speed <= profile.speed_threshold:
            adjustment += PHYSICAL_BONUS
        elif physical.speed > profile.speed_threshold + SPEED_MISS_MARGIN:
            adjustment -= PHYSICAL_BONUS

    for value, minimum in (
        (physical.agility, profile.agility_min),
        (physical.strength, profile.strength_min),
    ):
        if minimum is None:
            continue
        if value >= minimum:
            adjustment += PHYSICAL_BONUS
        elif value < minimum - RATING_MISS_MARGIN:
            adjustment -= PHYSICAL_BONUS
    return adjustment


def calculate_fit_score(
    position: Position,
    physical: PhysicalAttributes,
    skills: TechnicalSkills,
    profile: SchemeProfile,
) -> float:
    """
    Score a player against one scheme on a 0-100 scale (50 is neutral).

    Uses true skill values. Skills the player lacks are ignored. The
    deviation from 50 is scaled by how much the scheme cares about the
    position (5 when unlisted).
    """
    score = BASE_FIT_SCORE + _physical_adjustment(physical, profile)

    for skill_name, importance in profile.skill_preferences.items():
        skill = skills.get(skill_name)
        if skill is None:
            continue
        weight = importance / 10
        if skill.true_value >= 70:
            score += 8 * weight
        elif skill.true_value >= 55:
            score += 3 * weight
        elif skill.true_value < 40:
            score -= 8 * weight

    position_weight = profile.position_importance.get(position, DEFAULT_POSITION_IMPORTANCE)
    score = BASE_FIT_SCORE + (score - BASE_FIT_SCORE) * (position_weight / 10)
    return clamp(score, 0, 100)


def score_to_fit_level(score: float) -> FitLevel:
    for minimum, level in FIT_LEVEL_CUTS:
        if score >= minimum:
            return level
    return FitLevel.TERRIBLE


def generate_scheme_fits(
    position: Position,
    physical: PhysicalAttributes,
    skills: TechnicalSkills,
) -> SchemeFits:
    """
    Label every scheme for a player.

    Schemes on the other side of the ball are neutral without scoring;
    special teams players are neutral everywhere.
    """
    offensive = {
        scheme: (
            score_to_fit_level(calculate_fit_score(position, physical, skills, profile))
            if position.is_offense
            else FitLevel.NEUTRAL
        )
        for scheme, profile in OFFENSIVE_SCHEME_PROFILES.items()
    }
    defensive = {
        scheme: (
            score_to_fit_level(calculate_fit_score(position, physical, skills, profile))
            if position.is_defense
            else FitLevel.NEUTRAL
        )
        for scheme, profile in DEFENSIVE_SCHEME_PROFILES.items()
    }
    return SchemeFits(offensive=offensive, defensive=defensive)


def get_best_scheme_fit(fits: SchemeFits, is_offense: bool) -> tuple[Scheme, FitLevel]:
    """
    Best scheme on one side of the ball.

    Scans in declaration order and keeps the first scheme at the best level,
    so ties go to the earlier scheme. If every scheme is terrible the first
    scheme is returned.
    """
    schemes = list(OffensiveScheme) if is_offense else list(DefensiveScheme)
    best_scheme: Scheme = schemes[0]
    best_level = FitLevel.TERRIBLE

    for scheme in schemes:
        level = fits.get(scheme)
        if FIT_LEVEL_ORDER.index(level) < FIT_LEVEL_ORDER.index(best_level):
            best_scheme, best_level = scheme, level
    return best_scheme, best_level
