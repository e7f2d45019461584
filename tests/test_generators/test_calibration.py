"""Population-level checks on generated players."""

import pytest

from prospect.core.enums import Position
from prospect.core.models.it_factor import ItFactorTier
from prospect.generators.calibration import (
    DistributionSummary,
    format_summary,
    it_factor_tier_proportions,
    perceived_width_summary,
    physical_means_by_position,
    skill_tier_means,
    summarize_draft_class,
)
from prospect.generators.skills import SkillTier


class TestDistributionSummary:
    def test_from_values(self):
        summary = DistributionSummary.from_values([1, 2, 3])
        assert summary.count == 3
        assert summary.mean == pytest.approx(2.0)
        assert summary.percentiles[50] == pytest.approx(2.0)

    def test_empty(self):
        summary = DistributionSummary.from_values([])
        assert summary.count == 0
        assert summary.mean == 0.0
        assert summary.percentiles == {}


class TestPopulationShape:
    """Generated populations have the intended shape."""

    def test_it_factor_proportions_sum_to_one(self, rng):
        proportions = it_factor_tier_proportions(samples=500, rng=rng)
        assert set(proportions) == set(ItFactorTier)
        assert sum(proportions.values()) == pytest.approx(1.0)

    def test_tier_means_ordered(self, rng):
        means = skill_tier_means(samples=20, rng=rng)
        assert means[SkillTier.ELITE].mean > means[SkillTier.FRINGE].mean + 20
        assert means[SkillTier.ELITE].mean > means[SkillTier.STARTER].mean
        assert means[SkillTier.STARTER].mean > means[SkillTier.BACKUP].mean

    def test_linemen_outweigh_corners(self, rng):
        weights = physical_means_by_position("weight", samples=50, rng=rng)
        assert weights[Position.LG] > weights[Position.CB] + 60

    def test_draft_class_summary(self, rng):
        summary = summarize_draft_class(size=20, rng=rng, current_year=2025)
        assert summary["size"] == 20
        assert sum(summary["positions"].values()) == 20
        assert summary["range_width"].count > 0

    def test_draft_class_wider_than_veterans(self, rng, roster):
        summary = summarize_draft_class(size=40, rng=rng, current_year=2025)
        assert summary["range_width"].mean > perceived_width_summary(roster).mean

    def test_roster_widths(self, roster):
        summary = perceived_width_summary(roster)
        assert summary.count == sum(len(p.skills) for p in roster)

    def test_format_summary_headers(self, rng):
        text = format_summary(
            skill_tier_means(samples=5, rng=rng),
            it_factor_tier_proportions(samples=50, rng=rng),
            physical_means_by_position(samples=5, rng=rng),
        )
        assert "Skill tier" in text
        assert "It factor tier" in text
        assert "mean height" in text
        assert "elite" in text
