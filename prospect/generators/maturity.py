"""Ages at which a position's skills are fully known."""

import random
from typing import Optional

from prospect.core.enums import Position, SkillGroup
from prospect.core.sampling import random_int

# Inclusive (earliest, latest) maturity age by skill group. Positions that
# lean on reading the game mature later than those that lean on athleticism.
MATURITY_AGE_RANGES: dict[SkillGroup, tuple[int, int]] = {
    SkillGroup.QB: (27, 30),
    SkillGroup.RB: (23, 25),
    SkillGroup.WR: (24, 27),
    SkillGroup.TE: (25, 28),
    SkillGroup.OL: (25, 28),
    SkillGroup.DL: (25, 27),
    SkillGroup.LB: (24, 27),
    SkillGroup.DB: (24, 26),
    SkillGroup.K: (26, 30),
    SkillGroup.P: (26, 30),
}

DEFAULT_MATURITY_RANGE = (25, 27)


def get_maturity_age_range(position: Position) -> tuple[int, int]:
    return MATURITY_AGE_RANGES.get(position.skill_group, DEFAULT_MATURITY_RANGE)


def get_random_maturity_age(
    position: Position,
    rng: Optional[random.Random] = None,
) -> int:
    """Sample a maturity age uniformly within the position's range."""
    low, high = get_maturity_age_range(position)
    return random_int(low, high, rng)
