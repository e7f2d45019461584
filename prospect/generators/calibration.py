"""
Population calibration summaries.

Numeric checks on the shape of generated populations: skill means by tier,
It factor tier proportions, physical means by position. Used by the
``summary`` CLI command and by the statistical tests.

Output is aggregate only. Nothing here identifies an individual player's
hidden values.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from prospect.core.enums import Position
from prospect.core.models.it_factor import ItFactorTier, get_it_factor_tier
from prospect.core.models.player import Player
from prospect.generators.it_factor import generate_it_factor
from prospect.generators.physical import generate_physical_attributes
from prospect.generators.player import generate_draft_class
from prospect.generators.skills import SkillTier, generate_skills_for_position

PERCENTILES = (10, 50, 90)


@dataclass
class DistributionSummary:
    """Mean, spread and percentiles of one sample."""

    count: int
    mean: float
    std_dev: float
    percentiles: dict[int, float] = field(default_factory=dict)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "DistributionSummary":
        data = np.asarray(list(values), dtype=float)
        if data.size == 0:
            return cls(count=0, mean=0.0, std_dev=0.0)
        return cls(
            count=int(data.size),
            mean=float(np.mean(data)),
            std_dev=float(np.std(data)),
            percentiles={
                p: float(v) for p, v in zip(PERCENTILES, np.percentile(data, PERCENTILES))
            },
        )


def it_factor_tier_proportions(
    samples: int = 2000,
    draft_position: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> dict[ItFactorTier, float]:
    """Share of sampled It factors landing in each tier."""
    tiers = [
        get_it_factor_tier(generate_it_factor(draft_position, rng).value)
        for _ in range(samples)
    ]
    counts = {tier: 0 for tier in ItFactorTier}
    for tier in tiers:
        counts[tier] += 1
    return {tier: count / samples for tier, count in counts.items()}


def skill_tier_means(
    position: Position = Position.QB,
    age: int = 24,
    samples: int = 30,
    rng: Optional[random.Random] = None,
) -> dict[SkillTier, DistributionSummary]:
    """Average true skill per player, summarized for each tier."""
    summaries = {}
    for tier in SkillTier:
        averages = []
        for _ in range(samples):
            skills = generate_skills_for_position(position, age, tier, rng)
            averages.append(np.mean([s.true_value for s in skills.values()]))
        summaries[tier] = DistributionSummary.from_values(averages)
    return summaries


def physical_means_by_position(
    attribute: str = "height",
    samples: int = 100,
    rng: Optional[random.Random] = None,
) -> dict[Position, float]:
    """Mean of one physical attribute for every position."""
    return {
        position: float(
            np.mean(
                [
                    getattr(generate_physical_attributes(position, rng), attribute)
                    for _ in range(samples)
                ]
            )
        )
        for position in Position
    }


def perceived_width_summary(players: Iterable[Player]) -> DistributionSummary:
    """Perceived-range widths across every skill of every player."""
    return DistributionSummary.from_values(
        skill.range_width for player in players for skill in player.skills.values()
    )


def summarize_draft_class(
    size: int = 300,
    rng: Optional[random.Random] = None,
    current_year: Optional[int] = None,
) -> dict:
    """
    Generate a draft class and summarize its shape.

    Returns:
        Dict with the class size, per-position counts and the
        perceived-range width summary
    """
    prospects = generate_draft_class(size, rng, current_year)
    positions = np.array([p.position.value for p in prospects])
    labels, counts = np.unique(positions, return_counts=True)
    return {
        "size": len(prospects),
        "positions": {str(label): int(count) for label, count in zip(labels, counts)},
        "range_width": perceived_width_summary(prospects),
    }


def format_summary(
    tier_means: dict[SkillTier, DistributionSummary],
    it_proportions: dict[ItFactorTier, float],
    heights: dict[Position, float],
) -> str:
    """Render summaries as a plain-text table."""
    lines = ["Skill tier     mean    std    p10    p50    p90"]
    for tier, summary in tier_means.items():
        p = summary.percentiles
        lines.append(
            f"{tier.value:<12} {summary.mean:6.1f} {summary.std_dev:6.1f} "
            f"{p.get(10, 0):6.1f} {p.get(50, 0):6.1f} {p.get(90, 0):6.1f}"
        )
    lines.append("")
    lines.append("It factor tier   share")
    for tier, share in it_proportions.items():
        lines.append(f"{tier.value:<14} {share:7.1%}")
    lines.append("")
    lines.append("Position  mean height (in)")
    for position, height in heights.items():
        lines.append(f"{position.value:<8} {height:8.1f}")
    return "\n".join(lines)
