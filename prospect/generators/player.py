"""
Player assembly and batch builders.

A player is built in a fixed order: position, age, physical attributes,
skills, hidden traits, It factor, consistency, scheme fits, then role fit.
Batch builders shape populations through tier-probability mixes.
"""

import logging
import random
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from prospect.core.enums import (
    DEFENSIVE_POSITIONS,
    OFFENSIVE_POSITIONS,
    SPECIAL_TEAMS_POSITIONS,
    Position,
)
from prospect.core.models.injury import create_healthy_status
from prospect.core.models.player import PICKS_PER_ROUND, Player
from prospect.core.models.role_fit import RoleTier
from prospect.core.sampling import random_element, random_int, resolve_rng, weighted_choice
from prospect.generators.consistency import generate_consistency_profile
from prospect.generators.it_factor import generate_it_factor, generate_it_factor_for_skill_tier
from prospect.generators.names import generate_college, generate_full_name
from prospect.generators.physical import generate_physical_attributes
from prospect.generators.role_fit import generate_role_fit
from prospect.generators.scheme_fit import generate_scheme_fits
from prospect.generators.skills import SkillTier, coerce_skill_tier, generate_skills_for_position
from prospect.generators.traits import generate_hidden_traits

logger = logging.getLogger(__name__)

AgeRange = tuple[int, int]

DRAFT_AGE_RANGE: AgeRange = (21, 24)
VETERAN_AGE_RANGE: AgeRange = (25, 35)
FULL_AGE_RANGE: AgeRange = (21, 38)

ROSTER_STARTER_AGE_RANGE: AgeRange = (24, 32)
ROSTER_BACKUP_AGE_RANGE: AgeRange = (22, 30)

# Players are assumed to enter the league at 22
ROOKIE_AGE = 22

ALL_POSITIONS: tuple[Position, ...] = (
    OFFENSIVE_POSITIONS + DEFENSIVE_POSITIONS + SPECIAL_TEAMS_POSITIONS
)

# (first round, last round) by role ceiling; round 0 means undrafted
CEILING_DRAFT_ROUNDS: dict[RoleTier, tuple[int, int]] = {
    RoleTier.FRANCHISE_CORNERSTONE: (1, 1),
    RoleTier.HIGH_END_STARTER: (1, 2),
    RoleTier.SOLID_STARTER: (2, 4),
    RoleTier.QUALITY_ROTATIONAL: (3, 5),
    RoleTier.SPECIALIST: (4, 7),
    RoleTier.DEPTH: (5, 7),
    RoleTier.PRACTICE_SQUAD: (0, 0),
}

ROSTER_COMPOSITION: dict[Position, int] = {
    Position.QB: 3,
    Position.RB: 4,
    Position.WR: 6,
    Position.TE: 3,
    Position.LT: 2,
    Position.LG: 2,
    Position.C: 2,
    Position.RG: 2,
    Position.RT: 2,
    Position.DE: 4,
    Position.DT: 4,
    Position.OLB: 4,
    Position.ILB: 3,
    Position.CB: 6,
    Position.FS: 2,
    Position.SS: 2,
    Position.K: 1,
    Position.P: 1,
}

ROSTER_SIZE = sum(ROSTER_COMPOSITION.values())

TierMix = tuple[tuple[SkillTier, float], ...]

STARTER_TIER_MIX: TierMix = (
    (SkillTier.ELITE, 0.15),
    (SkillTier.STARTER, 0.60),
    (SkillTier.BACKUP, 0.20),
    (SkillTier.FRINGE, 0.05),
)

BACKUP_TIER_MIX: TierMix = (
    (SkillTier.ELITE, 0.02),
    (SkillTier.STARTER, 0.18),
    (SkillTier.BACKUP, 0.50),
    (SkillTier.FRINGE, 0.30),
)

DRAFT_CLASS_TIER_MIX: TierMix = (
    (SkillTier.ELITE, 0.05),
    (SkillTier.STARTER, 0.20),
    (SkillTier.BACKUP, 0.35),
    (SkillTier.FRINGE, 0.40),
)

DEFAULT_DRAFT_CLASS_SIZE = 300
DEFAULT_LEAGUE_SIZE = 32


@dataclass
class PlayerGenerationOptions:
    """Knobs for a single generated player. Every field is optional."""

    position: Optional[Position] = None
    age_range: Optional[AgeRange] = None
    skill_tier: Union[SkillTier, str, None] = None
    for_draft: bool = False
    veteran: bool = False
    college: Optional[str] = None
    team_id: Optional[str] = None


def generate_draft_info(
    ceiling: RoleTier,
    rng: Optional[random.Random] = None,
) -> tuple[int, int]:
    """
    Plausible (round, overall pick) for a veteran with the given ceiling.

    Practice-squad ceilings and unknown roles come back undrafted (0, 0).
    """
    first_round, last_round = CEILING_DRAFT_ROUNDS.get(ceiling, (0, 0))
    if first_round == 0:
        return 0, 0
    draft_round = random_int(first_round, last_round, rng)
    pick = (draft_round - 1) * PICKS_PER_ROUND + random_int(1, PICKS_PER_ROUND, rng)
    return draft_round, pick


def _resolve_age_range(options: PlayerGenerationOptions) -> AgeRange:
    if options.age_range is not None:
        return options.age_range
    if options.for_draft:
        return DRAFT_AGE_RANGE
    if options.veteran:
        return VETERAN_AGE_RANGE
    return FULL_AGE_RANGE


def generate_player(
    options: Optional[PlayerGenerationOptions] = None,
    rng: Optional[random.Random] = None,
    current_year: Optional[int] = None,
) -> Player:
    """
    Generate a complete player.

    Args:
        options: Generation knobs (random position, full age range and
            unbiased talent when omitted)
        rng: Random stream to draw from
        current_year: Year used for draft metadata (defaults to today)

    Returns:
        Fully populated Player
    """
    options = options or PlayerGenerationOptions()
    rng = resolve_rng(rng)
    current_year = current_year if current_year is not None else date.today().year

    position = options.position or random_element(ALL_POSITIONS, rng)
    age = random_int(*_resolve_age_range(options), rng)
    experience = 0 if options.for_draft else max(0, age - ROOKIE_AGE)

    first_name, last_name = generate_full_name(rng)
    physical = generate_physical_attributes(position, rng)

    skill_tier = coerce_skill_tier(options.skill_tier)
    skills = generate_skills_for_position(position, age, skill_tier, rng)
    hidden_traits = generate_hidden_traits(position, rng=rng)

    if skill_tier == SkillTier.RANDOM:
        it_factor = generate_it_factor(rng=rng)
    else:
        it_factor = generate_it_factor_for_skill_tier(skill_tier, rng)

    consistency = generate_consistency_profile(position, it_factor.value, rng)
    scheme_fits = generate_scheme_fits(position, physical, skills)
    role_fit = generate_role_fit(skills, it_factor.value, consistency.tier, rng)

    draft_year = current_year - experience
    draft_round, draft_pick = 0, 0
    if not options.for_draft and experience > 0:
        draft_round, draft_pick = generate_draft_info(role_fit.ceiling, rng)

    return Player(
        id=uuid.UUID(int=rng.getrandbits(128), version=4),
        first_name=first_name,
        last_name=last_name,
        position=position,
        age=age,
        experience=experience,
        physical=physical,
        skills=skills,
        hidden_traits=hidden_traits,
        it_factor=it_factor,
        consistency=consistency,
        scheme_fits=scheme_fits,
        role_fit=role_fit,
        contract_id=None,
        injury_status=create_healthy_status(),
        fatigue=0,
        morale=75,
        college=options.college or generate_college(rng),
        team_id=options.team_id,
        draft_year=draft_year,
        draft_round=draft_round,
        draft_pick=draft_pick,
    )


def generate_roster(
    team_id: str,
    rng: Optional[random.Random] = None,
    current_year: Optional[int] = None,
) -> list[Player]:
    """
    Generate a full roster for one team.

    The first player at each position comes from the starter tier mix, the
    rest from the backup mix.
    """
    rng = resolve_rng(rng)
    roster = []

    for position, count in ROSTER_COMPOSITION.items():
        for depth in range(count):
            is_starter = depth == 0
            tier_mix = STARTER_TIER_MIX if is_starter else BACKUP_TIER_MIX
            options = PlayerGenerationOptions(
                position=position,
                skill_tier=weighted_choice(tier_mix, rng),
                team_id=team_id,
                age_range=ROSTER_STARTER_AGE_RANGE if is_starter else ROSTER_BACKUP_AGE_RANGE,
            )
            roster.append(generate_player(options, rng, current_year))

    logger.debug(f"Generated {len(roster)}-man roster for {team_id}")
    return roster


def generate_league_players(
    num_teams: int = DEFAULT_LEAGUE_SIZE,
    rng: Optional[random.Random] = None,
    current_year: Optional[int] = None,
) -> list[Player]:
    """Generate rosters for ``num_teams`` teams with ids ``team-1`` onward."""
    rng = resolve_rng(rng)
    players = []
    for team_number in range(1, num_teams + 1):
        players.extend(generate_roster(f"team-{team_number}", rng, current_year))
    logger.debug(f"Generated league of {num_teams} teams ({len(players)} players)")
    return players


def generate_draft_class(
    size: int = DEFAULT_DRAFT_CLASS_SIZE,
    rng: Optional[random.Random] = None,
    current_year: Optional[int] = None,
) -> list[Player]:
    """
    Generate a pool of draft-eligible prospects.

    The tier mix leans toward backup and fringe talent so the class forms
    the usual pyramid.
    """
    rng = resolve_rng(rng)
    prospects = [
        generate_player(
            PlayerGenerationOptions(
                for_draft=True,
                skill_tier=weighted_choice(DRAFT_CLASS_TIER_MIX, rng),
            ),
            rng,
            current_year,
        )
        for _ in range(size)
    ]
    logger.debug(f"Generated draft class of {len(prospects)} prospects")
    return prospects
