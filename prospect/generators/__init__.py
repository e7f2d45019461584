"""Player generators."""

from prospect.generators.physical import generate_physical_attributes
from prospect.generators.skills import (
    SkillTier,
    calculate_range_width,
    create_perceived_range,
    generate_skill_value,
    generate_skills_for_position,
    get_average_true_skill_value,
)
from prospect.generators.it_factor import generate_it_factor, generate_it_factor_for_skill_tier
from prospect.generators.role_fit import generate_role_fit
from prospect.generators.scheme_fit import (
    generate_scheme_fits,
    get_best_scheme_fit,
    score_to_fit_level,
)
from prospect.generators.player import (
    PlayerGenerationOptions,
    generate_draft_class,
    generate_league_players,
    generate_player,
    generate_roster,
)

__all__ = [
    # Attribute generation
    "generate_physical_attributes",
    "SkillTier",
    "calculate_range_width",
    "create_perceived_range",
    "generate_skill_value",
    "generate_skills_for_position",
    "get_average_true_skill_value",
    "generate_it_factor",
    "generate_it_factor_for_skill_tier",
    # Fit derivation
    "generate_role_fit",
    "generate_scheme_fits",
    "get_best_scheme_fit",
    "score_to_fit_level",
    # Player and batch generation
    "PlayerGenerationOptions",
    "generate_player",
    "generate_roster",
    "generate_league_players",
    "generate_draft_class",
]
