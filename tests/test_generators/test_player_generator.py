"""Tests for player assembly and the batch builders."""

from collections import Counter

import pytest

from prospect.core.enums import Position
from prospect.core.models.player import validate_player
from prospect.core.models.role_fit import RoleTier
from prospect.core.models.view import create_player_view_model, serialize_view_model
from prospect.core.sampling import make_rng
from prospect.generators.player import (
    BACKUP_TIER_MIX,
    DRAFT_CLASS_TIER_MIX,
    ROSTER_COMPOSITION,
    ROSTER_SIZE,
    STARTER_TIER_MIX,
    VETERAN_AGE_RANGE,
    PlayerGenerationOptions,
    generate_draft_class,
    generate_draft_info,
    generate_league_players,
    generate_player,
    generate_roster,
)

CURRENT_YEAR = 2025


class TestGeneratePlayer:
    """Test single-player assembly."""

    def test_defaults(self, rng):
        player = generate_player(rng=rng, current_year=CURRENT_YEAR)
        assert validate_player(player), validate_player(player).errors
        assert 21 <= player.age <= 38
        assert player.morale == 75
        assert player.fatigue == 0
        assert player.contract_id is None
        assert player.injury_status.is_healthy
        assert player.college

    def test_requested_position_and_team(self, rng):
        player = generate_player(
            PlayerGenerationOptions(position=Position.TE, team_id="team-9"),
            rng,
            CURRENT_YEAR,
        )
        assert player.position == Position.TE
        assert player.team_id == "team-9"

    def test_age_range_respected(self, rng):
        for _ in range(50):
            player = generate_player(PlayerGenerationOptions(age_range=(30, 31)), rng, CURRENT_YEAR)
            assert player.age in (30, 31)
            assert player.experience == player.age - 22

    def test_draft_prospect(self, rng):
        for _ in range(50):
            player = generate_player(PlayerGenerationOptions(for_draft=True), rng, CURRENT_YEAR)
            assert 21 <= player.age <= 24
            assert player.experience == 0
            assert player.draft_year == CURRENT_YEAR
            assert player.draft_round == 0
            assert player.draft_pick == 0
            assert player.hidden_traits.revealed_to_user == []

    def test_veteran_draft_history_consistent(self, rng):
        for _ in range(100):
            player = generate_player(PlayerGenerationOptions(age_range=(26, 34)), rng, CURRENT_YEAR)
            assert player.draft_year == CURRENT_YEAR - player.experience
            if player.role_fit.ceiling == RoleTier.PRACTICE_SQUAD:
                assert player.is_undrafted
            result = validate_player(player)
            assert result, result.errors

    def test_veteran_age_context(self, rng):
        for _ in range(50):
            player = generate_player(PlayerGenerationOptions(veteran=True), rng, CURRENT_YEAR)
            assert VETERAN_AGE_RANGE[0] <= player.age <= VETERAN_AGE_RANGE[1]
            assert player.experience == player.age - 22

    def test_explicit_age_range_overrides_veteran(self, rng):
        options = PlayerGenerationOptions(veteran=True, age_range=(23, 23))
        assert generate_player(options, rng, CURRENT_YEAR).age == 23

    def test_twenty_two_year_old_veteran_undrafted(self, rng):
        player = generate_player(PlayerGenerationOptions(age_range=(22, 22)), rng, CURRENT_YEAR)
        assert player.experience == 0
        assert player.draft_round == 0

    def test_string_tier_accepted(self, rng):
        player = generate_player(PlayerGenerationOptions(skill_tier="elite"), rng, CURRENT_YEAR)
        assert validate_player(player)

    def test_unknown_tier_raises(self, rng):
        with pytest.raises(ValueError):
            generate_player(PlayerGenerationOptions(skill_tier="legend"), rng, CURRENT_YEAR)

    def test_seeded_generation_reproducible(self):
        first = generate_player(rng=make_rng(42), current_year=CURRENT_YEAR)
        second = generate_player(rng=make_rng(42), current_year=CURRENT_YEAR)
        assert first.id == second.id
        assert serialize_view_model(create_player_view_model(first)) == serialize_view_model(
            create_player_view_model(second)
        )


class TestDraftInfo:
    """Draft round and pick back-filled from the role ceiling."""

    def test_practice_squad_undrafted(self, rng):
        assert generate_draft_info(RoleTier.PRACTICE_SQUAD, rng) == (0, 0)

    def test_franchise_first_round(self, rng):
        for _ in range(100):
            draft_round, pick = generate_draft_info(RoleTier.FRANCHISE_CORNERSTONE, rng)
            assert draft_round == 1
            assert 1 <= pick <= 32

    def test_pick_matches_round(self, rng):
        for _ in range(200):
            draft_round, pick = generate_draft_info(RoleTier.DEPTH, rng)
            assert 5 <= draft_round <= 7
            assert (draft_round - 1) * 32 < pick <= draft_round * 32


class TestRoster:
    """Test roster generation."""

    def test_composition_sums_to_fifty_three(self):
        assert ROSTER_SIZE == 53
        assert set(ROSTER_COMPOSITION) == set(Position)

    def test_mixes_sum_to_one(self):
        for mix in (STARTER_TIER_MIX, BACKUP_TIER_MIX, DRAFT_CLASS_TIER_MIX):
            assert sum(weight for _, weight in mix) == pytest.approx(1.0)

    def test_exact_headcounts(self, roster):
        assert len(roster) == ROSTER_SIZE
        counts = Counter(player.position for player in roster)
        assert counts[Position.QB] == 3
        assert counts[Position.K] == 1
        assert counts[Position.P] == 1
        assert dict(counts) == ROSTER_COMPOSITION

    def test_every_player_valid(self, roster):
        for player in roster:
            result = validate_player(player)
            assert result, f"{player.position.value}: {result.errors}"

    def test_team_and_ages(self, roster):
        assert all(player.team_id == "team-1" for player in roster)
        assert all(22 <= player.age <= 32 for player in roster)

    def test_unique_ids(self, roster):
        assert len({player.id for player in roster}) == len(roster)


class TestLeagueAndDraftClass:
    """Test league- and class-scale builders."""

    def test_league_team_ids(self, rng):
        players = generate_league_players(num_teams=2, rng=rng, current_year=CURRENT_YEAR)
        assert len(players) == 2 * ROSTER_SIZE
        assert {player.team_id for player in players} == {"team-1", "team-2"}

    def test_draft_class_size_and_shape(self, rng):
        prospects = generate_draft_class(size=120, rng=rng, current_year=CURRENT_YEAR)
        assert len(prospects) == 120
        assert all(p.experience == 0 and p.draft_year == CURRENT_YEAR for p in prospects)
        assert all(validate_player(p) for p in prospects)

    def test_draft_class_pyramid(self, rng):
        """Few prospects project as franchise players."""
        prospects = generate_draft_class(size=300, rng=rng, current_year=CURRENT_YEAR)
        ceilings = Counter(p.role_fit.ceiling for p in prospects)
        assert ceilings[RoleTier.FRANCHISE_CORNERSTONE] < len(prospects) * 0.2
