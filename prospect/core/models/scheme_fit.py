"""Offensive/defensive schemes and qualitative fit labels."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from prospect.core.validation import ValidationResult


class OffensiveScheme(Enum):
    """Offensive systems a player can be evaluated against."""

    WEST_COAST = "west_coast"
    AIR_RAID = "air_raid"
    SPREAD_OPTION = "spread_option"
    POWER_RUN = "power_run"
    ZONE_RUN = "zone_run"
    PLAY_ACTION = "play_action"


class DefensiveScheme(Enum):
    """Defensive systems a player can be evaluated against."""

    FOUR_THREE_UNDER = "four_three_under"
    THREE_FOUR = "three_four"
    COVER_THREE = "cover_three"
    COVER_TWO = "cover_two"
    MAN_PRESS = "man_press"
    BLITZ_HEAVY = "blitz_heavy"


Scheme = Union[OffensiveScheme, DefensiveScheme]


class FitLevel(Enum):
    """Fit labels, best first."""

    PERFECT = "perfect"
    GOOD = "good"
    NEUTRAL = "neutral"
    POOR = "poor"
    TERRIBLE = "terrible"


FIT_LEVEL_ORDER: tuple[FitLevel, ...] = tuple(FitLevel)

SCHEME_DISPLAY_NAMES: dict[Scheme, str] = {
    OffensiveScheme.WEST_COAST: "West Coast",
    OffensiveScheme.AIR_RAID: "Air Raid",
    OffensiveScheme.SPREAD_OPTION: "Spread Option",
    OffensiveScheme.POWER_RUN: "Power Run",
    OffensiveScheme.ZONE_RUN: "Zone Run",
    OffensiveScheme.PLAY_ACTION: "Play Action",
    DefensiveScheme.FOUR_THREE_UNDER: "4-3 Under",
    DefensiveScheme.THREE_FOUR: "3-4",
    DefensiveScheme.COVER_THREE: "Cover 3",
    DefensiveScheme.COVER_TWO: "Cover 2",
    DefensiveScheme.MAN_PRESS: "Man Press",
    DefensiveScheme.BLITZ_HEAVY: "Blitz Heavy",
}


def _all_neutral(schemes) -> dict:
    return {scheme: FitLevel.NEUTRAL for scheme in schemes}


@dataclass
class SchemeFits:
    """Fit label for every defined scheme. Engine-internal."""

    offensive: dict[OffensiveScheme, FitLevel] = field(
        default_factory=lambda: _all_neutral(OffensiveScheme)
    )
    defensive: dict[DefensiveScheme, FitLevel] = field(
        default_factory=lambda: _all_neutral(DefensiveScheme)
    )

    def get(self, scheme: Scheme) -> FitLevel:
        if isinstance(scheme, OffensiveScheme):
            return self.offensive.get(scheme, FitLevel.NEUTRAL)
        return self.defensive.get(scheme, FitLevel.NEUTRAL)


def parse_scheme(value: str) -> Scheme:
    """Look up a scheme of either side by its value, e.g. ``"west_coast"``."""
    for enum_cls in (OffensiveScheme, DefensiveScheme):
        try:
            return enum_cls(value)
        except ValueError:
            continue
    raise ValueError(f"Unknown scheme: {value}")


_FIT_PHRASES: dict[FitLevel, str] = {
    FitLevel.PERFECT: "Excellent fit for the {name} scheme",
    FitLevel.GOOD: "Good fit for the {name} scheme",
    FitLevel.NEUTRAL: "Average fit for the {name} scheme",
    FitLevel.POOR: "Poor fit for the {name} scheme",
    FitLevel.TERRIBLE: "Very poor fit for the {name} scheme",
}


def get_scheme_fit_description(fits: SchemeFits, scheme: Optional[Scheme]) -> str:
    """One qualitative sentence for a single scheme."""
    if scheme is None:
        return "Scheme fit unknown"
    name = SCHEME_DISPLAY_NAMES.get(scheme, scheme.value)
    return _FIT_PHRASES[fits.get(scheme)].format(name=name)


def validate_scheme_fits(fits: SchemeFits) -> ValidationResult:
    """Every scheme of both sides must carry a FitLevel."""
    result = ValidationResult()
    for scheme in OffensiveScheme:
        result.check(
            isinstance(fits.offensive.get(scheme), FitLevel),
            f"offensive.{scheme.value}: missing fit level",
        )
    for scheme in DefensiveScheme:
        result.check(
            isinstance(fits.defensive.get(scheme), FitLevel),
            f"defensive.{scheme.value}: missing fit level",
        )
    return result
