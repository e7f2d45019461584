"""
The hidden "It" factor.

A single 1-100 scalar feeding clutch-performance modifiers. Engine-internal
only: it never appears in any view model, log record or API response.
"""

from dataclasses import dataclass
from enum import Enum

from prospect.core.validation import ValidationResult

IT_FACTOR_MIN = 1
IT_FACTOR_MAX = 100


class InvalidItFactorError(ValueError):
    """Raised when an ItFactor is built from a literal outside [1, 100]."""


class ItFactorTier(Enum):
    """Internal classification of the It factor. Never displayed."""

    TRANSCENDENT = "transcendent"
    WINNER = "winner"
    SOLID = "solid"
    AVERAGE = "average"
    FADES = "fades"
    LIABILITY = "liability"


# (tier, low, high, weight). Ranges partition [1, 100]; weights sum to 1 and
# lean toward the middle rather than following a bell curve.
IT_FACTOR_TIERS: tuple[tuple[ItFactorTier, int, int, float], ...] = (
    (ItFactorTier.TRANSCENDENT, 95, 100, 0.02),
    (ItFactorTier.WINNER, 85, 94, 0.08),
    (ItFactorTier.SOLID, 70, 84, 0.20),
    (ItFactorTier.AVERAGE, 40, 69, 0.40),
    (ItFactorTier.FADES, 20, 39, 0.20),
    (ItFactorTier.LIABILITY, 1, 19, 0.10),
)


@dataclass(frozen=True)
class ItFactor:
    """Hidden intangible score. Building one from a bad literal fails fast."""

    value: int = 50

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidItFactorError(
                f"It factor must be an integer, got {type(self.value).__name__}"
            )
        if not IT_FACTOR_MIN <= self.value <= IT_FACTOR_MAX:
            raise InvalidItFactorError(
                f"It factor must be within [{IT_FACTOR_MIN}, {IT_FACTOR_MAX}]"
            )

    @property
    def tier(self) -> ItFactorTier:
        return get_it_factor_tier(self.value)


def get_it_factor_tier(value: int) -> ItFactorTier:
    """Classify a raw value into its tier."""
    for tier, low, high, _ in IT_FACTOR_TIERS:
        if low <= value <= high:
            return tier
    return ItFactorTier.LIABILITY if value < IT_FACTOR_MIN else ItFactorTier.TRANSCENDENT


def validate_it_factor(it_factor: ItFactor) -> ValidationResult:
    result = ValidationResult()
    result.check_range("value", it_factor.value, IT_FACTOR_MIN, IT_FACTOR_MAX)
    return result
