"""
Hidden personality trait generation.

Traits are rolled one at a time in shuffled order. Every trait picked shifts
the odds of related traits through ``TRAIT_CORRELATIONS``, so a clutch player
rarely also chokes.
"""

import random
from typing import Optional, Union

from prospect.core.enums import Position
from prospect.core.models.traits import HiddenTraits, NegativeTrait, PositiveTrait
from prospect.core.sampling import clamp, random_int, resolve_rng

Trait = Union[PositiveTrait, NegativeTrait]

MAX_POSITIVE_TRAITS = 3
MAX_NEGATIVE_TRAITS = 2

TRAIT_PROBABILITIES: dict[Trait, float] = {
    PositiveTrait.CLUTCH: 0.08,
    PositiveTrait.FILM_JUNKIE: 0.10,
    PositiveTrait.IRON_MAN: 0.07,
    PositiveTrait.LEADER: 0.06,
    PositiveTrait.COOL_UNDER_PRESSURE: 0.10,
    PositiveTrait.MOTOR: 0.12,
    PositiveTrait.ROUTE_TECHNICIAN: 0.08,
    PositiveTrait.BRICK_WALL: 0.08,
    PositiveTrait.SCHEME_VERSATILE: 0.10,
    PositiveTrait.TEAM_FIRST: 0.12,
    NegativeTrait.CHOKES: 0.06,
    NegativeTrait.LAZY: 0.08,
    NegativeTrait.INJURY_PRONE: 0.10,
    NegativeTrait.LOCKER_ROOM_CANCER: 0.04,
    NegativeTrait.HOT_HEAD: 0.06,
    NegativeTrait.GLASS_HANDS: 0.05,
    NegativeTrait.DISAPPEARS: 0.07,
    NegativeTrait.SYSTEM_DEPENDENT: 0.10,
    NegativeTrait.DIVA: 0.05,
}

P, N = PositiveTrait, NegativeTrait

# Additive probability shifts applied once the key trait is picked
TRAIT_CORRELATIONS: dict[Trait, tuple[tuple[Trait, float], ...]] = {
    P.CLUTCH: ((P.COOL_UNDER_PRESSURE, 0.4), (P.LEADER, 0.2), (N.CHOKES, -0.9)),
    P.FILM_JUNKIE: ((P.SCHEME_VERSATILE, 0.3), (N.LAZY, -0.8)),
    P.IRON_MAN: ((N.INJURY_PRONE, -0.95), (P.MOTOR, 0.2)),
    P.LEADER: (
        (P.TEAM_FIRST, 0.4),
        (P.CLUTCH, 0.2),
        (N.LOCKER_ROOM_CANCER, -0.9),
        (N.DIVA, -0.6),
    ),
    P.COOL_UNDER_PRESSURE: ((P.CLUTCH, 0.3), (N.CHOKES, -0.9), (N.HOT_HEAD, -0.5)),
    P.MOTOR: ((N.LAZY, -0.9), (N.DISAPPEARS, -0.6), (P.TEAM_FIRST, 0.2)),
    P.TEAM_FIRST: ((P.LEADER, 0.3), (N.DIVA, -0.8), (N.LOCKER_ROOM_CANCER, -0.7)),
    N.CHOKES: ((P.CLUTCH, -0.9), (P.COOL_UNDER_PRESSURE, -0.8)),
    N.LAZY: ((P.MOTOR, -0.9), (P.FILM_JUNKIE, -0.7)),
    N.INJURY_PRONE: ((P.IRON_MAN, -0.95),),
    N.LOCKER_ROOM_CANCER: ((P.LEADER, -0.9), (P.TEAM_FIRST, -0.8)),
    N.HOT_HEAD: ((P.COOL_UNDER_PRESSURE, -0.6), (P.LEADER, -0.3)),
    N.DIVA: ((P.TEAM_FIRST, -0.8), (P.LEADER, -0.4)),
}

_OFFENSIVE_LINE_MODIFIERS: dict[Trait, float] = {
    P.BRICK_WALL: 2.0,
    P.TEAM_FIRST: 1.5,
    P.MOTOR: 1.3,
    N.LAZY: 0.7,
}

# Multipliers on base probabilities; unlisted traits use 1.0
POSITION_TRAIT_MODIFIERS: dict[Position, dict[Trait, float]] = {
    Position.QB: {
        P.CLUTCH: 1.5,
        P.LEADER: 2.0,
        P.COOL_UNDER_PRESSURE: 1.5,
        P.FILM_JUNKIE: 1.5,
        N.CHOKES: 1.2,
        N.DIVA: 1.3,
    },
    Position.RB: {P.MOTOR: 1.4, P.IRON_MAN: 1.2, N.INJURY_PRONE: 1.5, N.GLASS_HANDS: 0.8},
    Position.WR: {P.ROUTE_TECHNICIAN: 2.0, P.CLUTCH: 1.2, N.DIVA: 2.0, N.GLASS_HANDS: 1.5},
    Position.TE: {P.SCHEME_VERSATILE: 1.5, P.BRICK_WALL: 1.3},
    Position.LT: _OFFENSIVE_LINE_MODIFIERS,
    Position.LG: _OFFENSIVE_LINE_MODIFIERS,
    Position.C: {
        P.BRICK_WALL: 1.8,
        P.TEAM_FIRST: 1.5,
        P.LEADER: 1.3,
        P.FILM_JUNKIE: 1.4,
        N.LAZY: 0.7,
    },
    Position.RG: _OFFENSIVE_LINE_MODIFIERS,
    Position.RT: _OFFENSIVE_LINE_MODIFIERS,
    Position.DE: {P.MOTOR: 1.8, P.CLUTCH: 1.2, N.HOT_HEAD: 1.3},
    Position.DT: {P.BRICK_WALL: 1.8, P.MOTOR: 1.5},
    Position.OLB: {P.MOTOR: 1.5, P.LEADER: 1.3, N.HOT_HEAD: 1.2},
    Position.ILB: {P.LEADER: 1.8, P.FILM_JUNKIE: 1.5, P.MOTOR: 1.4},
    Position.CB: {P.COOL_UNDER_PRESSURE: 1.5, P.CLUTCH: 1.3, N.CHOKES: 1.3, N.HOT_HEAD: 1.2},
    Position.FS: {P.FILM_JUNKIE: 1.4, P.LEADER: 1.3},
    Position.SS: {P.MOTOR: 1.3, P.CLUTCH: 1.2, N.HOT_HEAD: 1.2},
    Position.K: {P.CLUTCH: 2.0, P.COOL_UNDER_PRESSURE: 2.0, N.CHOKES: 2.0},
    Position.P: {P.COOL_UNDER_PRESSURE: 1.5, N.CHOKES: 1.5},
}

# (max years of experience, share of traits already known)
REVEAL_SHARES: tuple[tuple[int, float], ...] = (
    (1, 0.0),
    (3, 0.4),
    (5, 0.6),
    (7, 0.8),
)
VETERAN_REVEAL_SHARE = 0.95


def get_reveal_share(experience: int) -> float:
    for max_experience, share in REVEAL_SHARES:
        if experience <= max_experience:
            return share
    return VETERAN_REVEAL_SHARE


def calculate_traits_to_reveal(
    experience: int,
    total_traits: int,
    rng: Optional[random.Random] = None,
) -> int:
    """Number of traits a player's reputation has already exposed."""
    if total_traits == 0:
        return 0
    share = get_reveal_share(experience)
    extra = 1 if resolve_rng(rng).random() < share else 0
    return min(total_traits, int(total_traits * share) + extra)


def _roll_traits(
    candidates: list[Trait],
    limit: int,
    modifiers: dict[Trait, float],
    correlation_shifts: dict[Trait, float],
    rng: random.Random,
) -> list:
    selected = []
    rng.shuffle(candidates)
    for trait in candidates:
        if len(selected) >= limit:
            break
        probability = TRAIT_PROBABILITIES[trait] * modifiers.get(trait, 1.0)
        probability = clamp(probability + correlation_shifts.get(trait, 0.0), 0.0, 1.0)
        if rng.random() < probability:
            selected.append(trait)
            for other, shift in TRAIT_CORRELATIONS.get(trait, ()):
                correlation_shifts[other] = correlation_shifts.get(other, 0.0) + shift
    return selected


def generate_hidden_traits(
    position: Position,
    experience: int = 0,
    rng: Optional[random.Random] = None,
) -> HiddenTraits:
    """
    Roll hidden traits for a player.

    Positives are rolled before negatives so their correlations carry over.
    Players with one year of experience or less have nothing revealed.

    Args:
        position: Player's position (shifts base probabilities)
        experience: Years in the league; drives how much is already revealed
        rng: Random stream to draw from
    """
    rng = resolve_rng(rng)
    modifiers = POSITION_TRAIT_MODIFIERS.get(position, {})
    correlation_shifts: dict[Trait, float] = {}

    num_positive = random_int(0, MAX_POSITIVE_TRAITS, rng)
    num_negative = random_int(0, MAX_NEGATIVE_TRAITS, rng)

    positive = _roll_traits(list(PositiveTrait), num_positive, modifiers, correlation_shifts, rng)
    negative = _roll_traits(list(NegativeTrait), num_negative, modifiers, correlation_shifts, rng)

    traits = HiddenTraits(positive=positive, negative=negative)
    names = traits.all_trait_names
    num_to_reveal = calculate_traits_to_reveal(experience, len(names), rng)
    if num_to_reveal:
        traits.revealed_to_user = rng.sample(names, num_to_reveal)
    return traits
