"""Injury status and its display string."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from prospect.core.validation import ValidationResult


class InjurySeverity(Enum):
    NONE = "none"
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    SEASON_ENDING = "season_ending"


@dataclass
class InjuryStatus:
    severity: InjurySeverity = InjurySeverity.NONE
    injury_type: Optional[str] = None
    weeks_remaining: int = 0

    @property
    def is_healthy(self) -> bool:
        return self.severity == InjurySeverity.NONE


def create_healthy_status() -> InjuryStatus:
    return InjuryStatus()


def get_injury_display(status: InjuryStatus) -> str:
    """Short status for rosters: Healthy, Questionable, Out (N weeks)..."""
    if status.is_healthy:
        return "Healthy"
    if status.severity == InjurySeverity.SEASON_ENDING:
        return "Out for season"
    if status.severity == InjurySeverity.MINOR and status.weeks_remaining <= 1:
        return "Questionable"
    weeks = status.weeks_remaining
    return f"Out ({weeks} week{'s' if weeks != 1 else ''})"


def validate_injury_status(status: InjuryStatus) -> ValidationResult:
    result = ValidationResult()
    result.check(isinstance(status.severity, InjurySeverity), "severity: not an InjurySeverity")
    result.check_range("weeks_remaining", status.weeks_remaining, 0, 52)
    if status.severity == InjurySeverity.NONE:
        result.check(status.weeks_remaining == 0, "weeks_remaining: set on a healthy player")
        result.check(status.injury_type is None, "injury_type: set on a healthy player")
    return result
