"""Player data models."""

from prospect.core.models.consistency import (
    ConsistencyProfile,
    ConsistencyTier,
    StreakState,
    validate_consistency_profile,
)
from prospect.core.models.injury import (
    InjurySeverity,
    InjuryStatus,
    create_healthy_status,
    get_injury_display,
    validate_injury_status,
)
from prospect.core.models.it_factor import (
    InvalidItFactorError,
    ItFactor,
    ItFactorTier,
    validate_it_factor,
)
from prospect.core.models.physical import PhysicalAttributes, validate_physical_attributes
from prospect.core.models.player import Player, validate_player
from prospect.core.models.role_fit import (
    RoleFit,
    RoleTier,
    get_role_display_name,
    get_role_fit_description,
    validate_role_fit,
)
from prospect.core.models.scheme_fit import (
    DefensiveScheme,
    FitLevel,
    OffensiveScheme,
    SchemeFits,
    get_scheme_fit_description,
    parse_scheme,
    validate_scheme_fits,
)
from prospect.core.models.skills import (
    SKILL_NAMES_BY_GROUP,
    SkillValue,
    TechnicalSkills,
    validate_skill_value,
    validate_technical_skills,
)
from prospect.core.models.traits import (
    HiddenTraits,
    NegativeTrait,
    PositiveTrait,
    validate_hidden_traits,
)
from prospect.core.models.view import (
    PerceivedSkillRange,
    PlayerViewModel,
    create_player_view_model,
    parse_view_model,
    serialize_view_model,
    validate_view_model_privacy,
)

__all__ = [
    "ConsistencyProfile",
    "ConsistencyTier",
    "DefensiveScheme",
    "FitLevel",
    "HiddenTraits",
    "InjurySeverity",
    "InjuryStatus",
    "InvalidItFactorError",
    "ItFactor",
    "ItFactorTier",
    "NegativeTrait",
    "OffensiveScheme",
    "PerceivedSkillRange",
    "PhysicalAttributes",
    "Player",
    "PlayerViewModel",
    "PositiveTrait",
    "RoleFit",
    "RoleTier",
    "SKILL_NAMES_BY_GROUP",
    "SchemeFits",
    "SkillValue",
    "StreakState",
    "TechnicalSkills",
    "create_healthy_status",
    "create_player_view_model",
    "get_injury_display",
    "get_role_display_name",
    "get_role_fit_description",
    "get_scheme_fit_description",
    "parse_scheme",
    "serialize_view_model",
    "validate_consistency_profile",
    "validate_hidden_traits",
    "validate_injury_status",
    "validate_it_factor",
    "validate_physical_attributes",
    "validate_player",
    "validate_role_fit",
    "validate_scheme_fits",
    "validate_skill_value",
    "validate_technical_skills",
    "validate_view_model_privacy",
]
