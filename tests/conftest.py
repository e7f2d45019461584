"""Shared pytest fixtures for Prospect tests."""

import random

import pytest

from prospect.core.enums import Position
from prospect.core.models.player import Player
from prospect.core.sampling import make_rng
from prospect.generators.player import PlayerGenerationOptions, generate_player, generate_roster
from prospect.generators.skills import SkillTier

CURRENT_YEAR = 2025


# =============================================================================
# Random Stream Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random stream so statistical tests are deterministic."""
    return make_rng(1234)


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def veteran_qb(rng) -> Player:
    """A starter-tier quarterback with some league experience."""
    return generate_player(
        PlayerGenerationOptions(
            position=Position.QB,
            skill_tier=SkillTier.STARTER,
            age_range=(27, 30),
            team_id="team-1",
        ),
        rng,
        CURRENT_YEAR,
    )


@pytest.fixture
def draft_prospect(rng) -> Player:
    """A draft-eligible cornerback."""
    return generate_player(
        PlayerGenerationOptions(position=Position.CB, for_draft=True),
        rng,
        CURRENT_YEAR,
    )


@pytest.fixture
def roster(rng) -> list[Player]:
    """A full generated roster for one team."""
    return generate_roster("team-1", rng, CURRENT_YEAR)
