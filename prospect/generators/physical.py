"""Position-conditioned physical attribute generation."""

import random
from dataclasses import dataclass
from typing import Optional

from prospect.core.enums import Position
from prospect.core.models.physical import PhysicalAttributes
from prospect.core.sampling import bounded_normal, clamp, random_float
from prospect.core.validation import ValidationResult

WINGSPAN_RANGE = (68.0, 86.0)
WINGSPAN_MULTIPLIER = (1.02, 1.05)


@dataclass(frozen=True)
class AttributeDistribution:
    """Normal distribution clamped into hard bounds."""

    mean: float
    std_dev: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class PositionPhysicalProfile:
    height: AttributeDistribution
    weight: AttributeDistribution
    arm_length: AttributeDistribution
    hand_size: AttributeDistribution
    speed: AttributeDistribution  # 40-yard dash, lower is better
    acceleration: AttributeDistribution
    agility: AttributeDistribution
    strength: AttributeDistribution
    vertical_jump: AttributeDistribution


def _profile(
    height, weight, arm_length, hand_size, speed, acceleration, agility, strength, vertical_jump
) -> PositionPhysicalProfile:
    return PositionPhysicalProfile(
        height=AttributeDistribution(*height),
        weight=AttributeDistribution(*weight),
        arm_length=AttributeDistribution(*arm_length),
        hand_size=AttributeDistribution(*hand_size),
        speed=AttributeDistribution(*speed),
        acceleration=AttributeDistribution(*acceleration),
        agility=AttributeDistribution(*agility),
        strength=AttributeDistribution(*strength),
        vertical_jump=AttributeDistribution(*vertical_jump),
    )


# Combine-based profiles: (mean, std_dev, min, max) per measurement
POSITION_PHYSICAL_PROFILES: dict[Position, PositionPhysicalProfile] = {
    # Tall, average build, moderate athleticism
    Position.QB: _profile(
        height=(75, 2, 70, 79),
        weight=(220, 12, 195, 250),
        arm_length=(32.5, 0.8, 30, 35),
        hand_size=(9.5, 0.4, 8.5, 10.5),
        speed=(4.85, 0.15, 4.4, 5.3),
        acceleration=(65, 10, 40, 85),
        agility=(60, 10, 35, 85),
        strength=(55, 10, 30, 75),
        vertical_jump=(32, 3, 25, 40),
    ),
    # Shorter, powerful, explosive
    Position.RB: _profile(
        height=(70, 2, 66, 75),
        weight=(210, 15, 175, 245),
        arm_length=(31, 0.8, 29, 34),
        hand_size=(9.2, 0.5, 8.0, 10.5),
        speed=(4.5, 0.12, 4.25, 4.85),
        acceleration=(82, 8, 60, 98),
        agility=(80, 8, 60, 98),
        strength=(70, 10, 45, 90),
        vertical_jump=(36, 3, 28, 44),
    ),
    # Tall, lean, fast
    Position.WR: _profile(
        height=(73, 2.5, 68, 78),
        weight=(195, 15, 165, 230),
        arm_length=(32.5, 1, 30, 35),
        hand_size=(9.3, 0.5, 8.0, 10.5),
        speed=(4.48, 0.1, 4.25, 4.75),
        acceleration=(85, 7, 65, 99),
        agility=(82, 7, 60, 98),
        strength=(55, 10, 35, 80),
        vertical_jump=(38, 3, 30, 46),
    ),
    Position.TE: _profile(
        height=(77, 1.5, 74, 80),
        weight=(250, 12, 225, 280),
        arm_length=(33.5, 0.8, 31, 36),
        hand_size=(9.8, 0.5, 8.5, 11),
        speed=(4.68, 0.12, 4.4, 5.0),
        acceleration=(72, 8, 50, 90),
        agility=(65, 8, 45, 85),
        strength=(75, 8, 55, 95),
        vertical_jump=(34, 3, 26, 42),
    ),
    # Tallest, heaviest, longest arms
    Position.LT: _profile(
        height=(78, 1.5, 75, 80),
        weight=(310, 15, 280, 350),
        arm_length=(34.5, 0.8, 32, 36),
        hand_size=(10, 0.5, 9, 11.5),
        speed=(5.2, 0.15, 4.85, 5.5),
        acceleration=(50, 8, 30, 70),
        agility=(55, 8, 35, 75),
        strength=(85, 7, 65, 100),
        vertical_jump=(28, 3, 24, 36),
    ),
    Position.LG: _profile(
        height=(76, 1.5, 74, 79),
        weight=(315, 15, 290, 355),
        arm_length=(33.5, 0.8, 31, 35),
        hand_size=(10, 0.5, 9, 11),
        speed=(5.25, 0.15, 4.9, 5.5),
        acceleration=(48, 8, 28, 68),
        agility=(50, 8, 30, 70),
        strength=(88, 6, 70, 100),
        vertical_jump=(27, 3, 24, 34),
    ),
    Position.C: _profile(
        height=(75, 1.5, 73, 78),
        weight=(305, 15, 280, 340),
        arm_length=(33, 0.8, 31, 35),
        hand_size=(9.8, 0.5, 9, 11),
        speed=(5.2, 0.15, 4.85, 5.5),
        acceleration=(50, 8, 30, 70),
        agility=(55, 8, 35, 75),
        strength=(85, 7, 65, 100),
        vertical_jump=(27, 3, 24, 34),
    ),
    Position.RG: _profile(
        height=(76, 1.5, 74, 79),
        weight=(315, 15, 290, 355),
        arm_length=(33.5, 0.8, 31, 35),
        hand_size=(10, 0.5, 9, 11),
        speed=(5.25, 0.15, 4.9, 5.5),
        acceleration=(48, 8, 28, 68),
        agility=(50, 8, 30, 70),
        strength=(88, 6, 70, 100),
        vertical_jump=(27, 3, 24, 34),
    ),
    Position.RT: _profile(
        height=(77, 1.5, 75, 80),
        weight=(310, 15, 285, 350),
        arm_length=(34, 0.8, 32, 36),
        hand_size=(10, 0.5, 9, 11.5),
        speed=(5.2, 0.15, 4.85, 5.5),
        acceleration=(50, 8, 30, 70),
        agility=(52, 8, 32, 72),
        strength=(85, 7, 65, 100),
        vertical_jump=(28, 3, 24, 36),
    ),
    Position.DE: _profile(
        height=(76, 1.5, 74, 79),
        weight=(265, 15, 235, 300),
        arm_length=(34, 0.8, 32, 36),
        hand_size=(10, 0.5, 9, 11.5),
        speed=(4.75, 0.12, 4.5, 5.1),
        acceleration=(75, 8, 55, 95),
        agility=(70, 8, 50, 90),
        strength=(82, 7, 60, 98),
        vertical_jump=(32, 3, 26, 40),
    ),
    Position.DT: _profile(
        height=(75, 1.5, 73, 78),
        weight=(305, 18, 275, 365),
        arm_length=(33.5, 0.8, 31, 36),
        hand_size=(10.2, 0.5, 9, 11.5),
        speed=(5.1, 0.15, 4.8, 5.5),
        acceleration=(58, 8, 38, 78),
        agility=(50, 8, 30, 70),
        strength=(90, 5, 75, 100),
        vertical_jump=(28, 3, 24, 36),
    ),
    Position.OLB: _profile(
        height=(74, 1.5, 72, 77),
        weight=(245, 12, 220, 275),
        arm_length=(33, 0.8, 31, 35),
        hand_size=(9.8, 0.5, 8.5, 11),
        speed=(4.65, 0.12, 4.4, 4.95),
        acceleration=(78, 8, 58, 95),
        agility=(72, 8, 52, 92),
        strength=(75, 8, 55, 92),
        vertical_jump=(34, 3, 28, 42),
    ),
    Position.ILB: _profile(
        height=(73, 1.5, 71, 76),
        weight=(240, 12, 215, 270),
        arm_length=(32.5, 0.8, 30, 35),
        hand_size=(9.8, 0.5, 8.5, 11),
        speed=(4.7, 0.12, 4.45, 5.0),
        acceleration=(75, 8, 55, 92),
        agility=(70, 8, 50, 90),
        strength=(78, 8, 58, 95),
        vertical_jump=(35, 3, 28, 42),
    ),
    Position.CB: _profile(
        height=(71, 2, 68, 76),
        weight=(190, 10, 170, 215),
        arm_length=(31.5, 0.8, 29, 34),
        hand_size=(9.2, 0.5, 8, 10.5),
        speed=(4.45, 0.08, 4.25, 4.65),
        acceleration=(88, 6, 70, 99),
        agility=(85, 6, 68, 98),
        strength=(55, 10, 35, 80),
        vertical_jump=(38, 3, 32, 46),
    ),
    Position.FS: _profile(
        height=(72, 1.5, 69, 75),
        weight=(200, 10, 180, 220),
        arm_length=(31.5, 0.8, 29, 34),
        hand_size=(9.3, 0.5, 8, 10.5),
        speed=(4.5, 0.1, 4.3, 4.75),
        acceleration=(85, 7, 65, 98),
        agility=(82, 7, 62, 96),
        strength=(60, 10, 40, 85),
        vertical_jump=(38, 3, 30, 45),
    ),
    Position.SS: _profile(
        height=(72, 1.5, 70, 76),
        weight=(210, 10, 190, 230),
        arm_length=(32, 0.8, 30, 34),
        hand_size=(9.5, 0.5, 8.5, 10.5),
        speed=(4.55, 0.1, 4.35, 4.8),
        acceleration=(82, 7, 62, 95),
        agility=(78, 7, 58, 92),
        strength=(68, 10, 48, 88),
        vertical_jump=(36, 3, 28, 44),
    ),
    # Kickers are athletes too, just not big ones
    Position.K: _profile(
        height=(72, 2, 68, 77),
        weight=(195, 12, 170, 220),
        arm_length=(31, 1, 28, 34),
        hand_size=(9, 0.5, 7.5, 10.5),
        speed=(4.9, 0.2, 4.5, 5.4),
        acceleration=(55, 12, 30, 80),
        agility=(55, 12, 30, 80),
        strength=(50, 12, 25, 75),
        vertical_jump=(30, 4, 24, 40),
    ),
    Position.P: _profile(
        height=(74, 2, 70, 78),
        weight=(210, 12, 180, 235),
        arm_length=(32, 1, 29, 35),
        hand_size=(9.2, 0.5, 8, 10.5),
        speed=(4.85, 0.2, 4.5, 5.3),
        acceleration=(55, 12, 30, 80),
        agility=(55, 12, 30, 80),
        strength=(55, 12, 30, 80),
        vertical_jump=(31, 4, 24, 40),
    ),
}


def _sample(
    dist: AttributeDistribution,
    rng: Optional[random.Random],
    mean_shift: float = 0.0,
) -> float:
    return bounded_normal(dist.mean + mean_shift, dist.std_dev, dist.minimum, dist.maximum, rng)


def generate_physical_attributes(
    position: Position,
    rng: Optional[random.Random] = None,
) -> PhysicalAttributes:
    """
    Generate physical measurements for a position.

    Height is drawn first. Weight and arm length lean toward the height
    draw, strength and vertical jump toward (and away from) the weight draw,
    and wingspan is derived from height rather than sampled on its own.

    Args:
        position: Player's position
        rng: Random stream to draw from

    Returns:
        PhysicalAttributes within the position's published ranges
    """
    profile = POSITION_PHYSICAL_PROFILES[position]

    height = round(_sample(profile.height, rng))

    # Taller players tend to be heavier and longer
    height_deviation = (height - profile.height.mean) / profile.height.std_dev
    weight = round(
        _sample(profile.weight, rng, height_deviation * profile.weight.std_dev * 0.5)
    )
    arm_length = round(
        _sample(profile.arm_length, rng, height_deviation * profile.arm_length.std_dev * 0.3),
        1,
    )

    multiplier = random_float(*WINGSPAN_MULTIPLIER, rng=rng)
    wingspan = round(clamp(height * multiplier, *WINGSPAN_RANGE), 1)

    hand_size = round(_sample(profile.hand_size, rng), 1)
    speed = round(_sample(profile.speed, rng), 2)

    acceleration = round(_sample(profile.acceleration, rng))
    agility = round(_sample(profile.agility, rng))

    # Heavier players are a bit stronger and jump a bit lower
    weight_deviation = (weight - profile.weight.mean) / profile.weight.std_dev
    strength = round(
        _sample(profile.strength, rng, weight_deviation * profile.strength.std_dev * 0.2)
    )
    vertical_jump = round(_sample(profile.vertical_jump, rng, -weight_deviation * 1.5))

    return PhysicalAttributes(
        height=height,
        weight=weight,
        arm_length=arm_length,
        hand_size=hand_size,
        wingspan=wingspan,
        speed=speed,
        acceleration=acceleration,
        agility=agility,
        strength=strength,
        vertical_jump=vertical_jump,
    )


def validate_physical_for_position(
    physical: PhysicalAttributes,
    position: Position,
) -> ValidationResult:
    """Check measurements against one position's published ranges."""
    profile = POSITION_PHYSICAL_PROFILES[position]
    result = ValidationResult()
    for name in (
        "height",
        "weight",
        "arm_length",
        "hand_size",
        "speed",
        "acceleration",
        "agility",
        "strength",
        "vertical_jump",
    ):
        dist: AttributeDistribution = getattr(profile, name)
        result.check_range(name, getattr(physical, name), dist.minimum, dist.maximum)
    result.check_range("wingspan", physical.wingspan, *WINGSPAN_RANGE)
    return result
