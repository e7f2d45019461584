"""Tests for role fit and scheme fit derivation."""

import pytest

from prospect.core.enums import Position
from prospect.core.models.consistency import ConsistencyTier
from prospect.core.models.physical import PhysicalAttributes
from prospect.core.models.role_fit import RoleTier, validate_role_fit
from prospect.core.models.scheme_fit import (
    DefensiveScheme,
    FitLevel,
    OffensiveScheme,
    SchemeFits,
    validate_scheme_fits,
)
from prospect.core.models.skills import SkillValue
from prospect.generators.physical import generate_physical_attributes
from prospect.generators.role_fit import (
    ROLE_THRESHOLDS,
    calculate_consistency_bonus,
    calculate_it_bonus,
    choose_current_role,
    determine_ceiling,
    generate_role_fit,
    get_role_threshold_center,
)
from prospect.generators.scheme_fit import (
    DEFENSIVE_SCHEME_PROFILES,
    OFFENSIVE_SCHEME_PROFILES,
    calculate_fit_score,
    generate_scheme_fits,
    get_best_scheme_fit,
    score_to_fit_level,
)
from prospect.generators.skills import SkillTier, generate_skills_for_position


def _skills(value, *names):
    return {name: SkillValue(value, value, value, 26) for name in names}


# =============================================================================
# Role Fit
# =============================================================================


class TestRoleCeiling:
    """Test ceiling thresholds."""

    def test_thresholds_descend(self):
        minimums = [minimum for _, minimum in ROLE_THRESHOLDS]
        assert minimums == sorted(minimums, reverse=True)
        assert [role for role, _ in ROLE_THRESHOLDS] == list(RoleTier)

    @pytest.mark.parametrize(
        "skill,role",
        [
            (95, RoleTier.FRANCHISE_CORNERSTONE),
            (80, RoleTier.FRANCHISE_CORNERSTONE),
            (79.9, RoleTier.HIGH_END_STARTER),
            (52, RoleTier.QUALITY_ROTATIONAL),
            (40, RoleTier.DEPTH),
            (1, RoleTier.PRACTICE_SQUAD),
            (0, RoleTier.PRACTICE_SQUAD),
        ],
    )
    def test_determine_ceiling(self, skill, role):
        assert determine_ceiling(skill) == role

    def test_bonuses(self):
        assert calculate_it_bonus(50) == 0
        assert calculate_it_bonus(100) == 5
        assert calculate_consistency_bonus(90) == 2
        assert calculate_consistency_bonus(20) == -1.5

    def test_threshold_centers(self):
        assert get_role_threshold_center(RoleTier.FRANCHISE_CORNERSTONE) == 90
        assert get_role_threshold_center(RoleTier.HIGH_END_STARTER) == 75
        assert get_role_threshold_center(RoleTier.PRACTICE_SQUAD) == 18


class TestCurrentRole:
    """Current role sits at or up to two ranks below the ceiling."""

    @pytest.mark.parametrize("ceiling", list(RoleTier))
    def test_never_above_ceiling(self, ceiling, rng):
        for _ in range(100):
            role = choose_current_role(ceiling, rng)
            assert 0 <= role.rank - ceiling.rank <= 2

    def test_bottom_of_hierarchy(self, rng):
        for _ in range(20):
            assert choose_current_role(RoleTier.PRACTICE_SQUAD, rng) == RoleTier.PRACTICE_SQUAD

    def test_one_below_most_common(self, rng):
        roles = [choose_current_role(RoleTier.HIGH_END_STARTER, rng) for _ in range(3000)]
        assert roles.count(RoleTier.SOLID_STARTER) > roles.count(RoleTier.HIGH_END_STARTER)
        assert roles.count(RoleTier.SOLID_STARTER) > roles.count(RoleTier.QUALITY_ROTATIONAL)


class TestGenerateRoleFit:
    """Test the full derivation."""

    def test_strong_player_high_ceiling(self, rng):
        fit = generate_role_fit(_skills(90, "a", "b"), 90, ConsistencyTier.ROCK_SOLID, rng)
        assert fit.ceiling == RoleTier.FRANCHISE_CORNERSTONE

    def test_weak_player_low_ceiling(self, rng):
        fit = generate_role_fit(_skills(20, "a", "b"), 10, ConsistencyTier.VOLATILE, rng)
        assert fit.ceiling == RoleTier.PRACTICE_SQUAD
        assert fit.current_role == RoleTier.PRACTICE_SQUAD

    def test_always_valid(self, rng):
        for tier in (SkillTier.ELITE, SkillTier.FRINGE, SkillTier.RANDOM):
            for _ in range(50):
                skills = generate_skills_for_position(Position.OLB, 25, tier, rng)
                fit = generate_role_fit(skills, rng.randint(1, 100), ConsistencyTier.AVERAGE, rng)
                result = validate_role_fit(fit)
                assert result, result.errors

    def test_effectiveness_within_noise_of_formula(self, rng):
        """Effectiveness is 75 minus distance from the role center plus bonuses, +/-10."""
        it_bonus = calculate_it_bonus(70)
        consistency_bonus = calculate_consistency_bonus(ConsistencyTier.STEADY.score)
        for _ in range(200):
            fit = generate_role_fit(_skills(65, "a", "b"), 70, ConsistencyTier.STEADY, rng)
            expected = (
                75
                - abs(65 - get_role_threshold_center(fit.current_role))
                + 2 * it_bonus
                + 2 * consistency_bonus
            )
            assert abs(fit.role_effectiveness - expected) <= 10.5


# =============================================================================
# Scheme Fit
# =============================================================================


class TestFitLevelCuts:
    """Test score to label mapping."""

    @pytest.mark.parametrize(
        "score,level",
        [
            (100, FitLevel.PERFECT),
            (80, FitLevel.PERFECT),
            (79.9, FitLevel.GOOD),
            (65, FitLevel.GOOD),
            (45, FitLevel.NEUTRAL),
            (44.9, FitLevel.POOR),
            (30, FitLevel.POOR),
            (29.9, FitLevel.TERRIBLE),
            (0, FitLevel.TERRIBLE),
        ],
    )
    def test_cut_points(self, score, level):
        assert score_to_fit_level(score) == level


class TestFitScore:
    """Test per-scheme scoring."""

    def test_profiles_cover_every_scheme(self):
        assert set(OFFENSIVE_SCHEME_PROFILES) == set(OffensiveScheme)
        assert set(DEFENSIVE_SCHEME_PROFILES) == set(DefensiveScheme)

    def test_ideal_press_corner(self):
        physical = PhysicalAttributes(speed=4.4, agility=85)
        skills = _skills(90, "man_coverage", "press", "closing", "ball_skills")
        profile = DEFENSIVE_SCHEME_PROFILES[DefensiveScheme.MAN_PRESS]
        assert calculate_fit_score(Position.CB, physical, skills, profile) == pytest.approx(98)

    def test_unlisted_position_weight_halves_deviation(self):
        physical = PhysicalAttributes(speed=4.4, agility=85)
        skills = _skills(90, "man_coverage", "press", "closing", "ball_skills")
        profile = DEFENSIVE_SCHEME_PROFILES[DefensiveScheme.MAN_PRESS]
        assert calculate_fit_score(Position.DE, physical, skills, profile) == pytest.approx(74)

    def test_poor_fit(self):
        physical = PhysicalAttributes(speed=4.9, agility=50)
        skills = _skills(30, "man_coverage", "press", "closing", "ball_skills")
        profile = DEFENSIVE_SCHEME_PROFILES[DefensiveScheme.MAN_PRESS]
        score = calculate_fit_score(Position.CB, physical, skills, profile)
        assert score == pytest.approx(2)
        assert score_to_fit_level(score) == FitLevel.TERRIBLE

    def test_middling_misses_are_neutral(self):
        # Speed just over the threshold and agility a little short: no change
        physical = PhysicalAttributes(speed=4.6, agility=70)
        profile = DEFENSIVE_SCHEME_PROFILES[DefensiveScheme.MAN_PRESS]
        assert calculate_fit_score(Position.CB, physical, {}, profile) == 50

    def test_missing_skills_ignored(self):
        physical = PhysicalAttributes(strength=70)
        profile = OFFENSIVE_SCHEME_PROFILES[OffensiveScheme.POWER_RUN]
        assert calculate_fit_score(Position.LG, physical, {}, profile) == 50


class TestGenerateSchemeFits:
    """Test fit maps for whole players."""

    def test_defender_neutral_on_offense(self, rng):
        physical = generate_physical_attributes(Position.CB, rng)
        skills = generate_skills_for_position(Position.CB, 25, SkillTier.ELITE, rng)
        fits = generate_scheme_fits(Position.CB, physical, skills)
        assert validate_scheme_fits(fits)
        assert all(level == FitLevel.NEUTRAL for level in fits.offensive.values())

    def test_offense_neutral_on_defense(self, rng):
        physical = generate_physical_attributes(Position.WR, rng)
        skills = generate_skills_for_position(Position.WR, 25, rng=rng)
        fits = generate_scheme_fits(Position.WR, physical, skills)
        assert all(level == FitLevel.NEUTRAL for level in fits.defensive.values())

    @pytest.mark.parametrize("position", [Position.K, Position.P])
    def test_specialists_neutral_everywhere(self, position, rng):
        physical = generate_physical_attributes(position, rng)
        skills = generate_skills_for_position(position, 28, SkillTier.ELITE, rng)
        fits = generate_scheme_fits(position, physical, skills)
        assert set(fits.offensive.values()) == {FitLevel.NEUTRAL}
        assert set(fits.defensive.values()) == {FitLevel.NEUTRAL}

    def test_elite_corners_fit_some_schemes(self, rng):
        levels = set()
        for _ in range(30):
            physical = generate_physical_attributes(Position.CB, rng)
            skills = generate_skills_for_position(Position.CB, 25, SkillTier.ELITE, rng)
            levels.update(generate_scheme_fits(Position.CB, physical, skills).defensive.values())
        assert levels & {FitLevel.PERFECT, FitLevel.GOOD}


class TestBestSchemeFit:
    """Best fit scans in declaration order."""

    def test_all_neutral_returns_first(self):
        assert get_best_scheme_fit(SchemeFits(), True) == (
            OffensiveScheme.WEST_COAST,
            FitLevel.NEUTRAL,
        )

    def test_first_best_wins_ties(self):
        fits = SchemeFits()
        fits.offensive[OffensiveScheme.AIR_RAID] = FitLevel.GOOD
        fits.offensive[OffensiveScheme.PLAY_ACTION] = FitLevel.GOOD
        assert get_best_scheme_fit(fits, True) == (OffensiveScheme.AIR_RAID, FitLevel.GOOD)

    def test_defensive_side(self):
        fits = SchemeFits()
        fits.defensive[DefensiveScheme.BLITZ_HEAVY] = FitLevel.PERFECT
        assert get_best_scheme_fit(fits, False) == (DefensiveScheme.BLITZ_HEAVY, FitLevel.PERFECT)

    def test_all_terrible_returns_first(self):
        fits = SchemeFits()
        for scheme in DefensiveScheme:
            fits.defensive[scheme] = FitLevel.TERRIBLE
        assert get_best_scheme_fit(fits, False) == (
            DefensiveScheme.FOUR_THREE_UNDER,
            FitLevel.TERRIBLE,
        )
