"""Physical measurements - always visible to every consumer."""

from dataclasses import dataclass

from prospect.core.validation import ValidationResult


@dataclass
class PhysicalAttributes:
    """
    Combine-style measurements for a player.

    Heights and wingspans are in inches, weight in pounds, speed is a 40-yard
    dash time in seconds (lower is faster). Acceleration, agility and strength
    are on a 1-100 scale.
    """

    height: int = 72
    weight: int = 215
    arm_length: float = 32.0
    hand_size: float = 9.5
    wingspan: float = 74.5
    speed: float = 4.7
    acceleration: int = 70
    agility: int = 70
    strength: int = 70
    vertical_jump: int = 33

    @property
    def height_display(self) -> str:
        """Height in feet and inches (e.g., 6'2\")."""
        feet = self.height // 12
        inches = self.height % 12
        return f"{feet}'{inches}\""


# League-wide published ranges, the union of every position profile.
PHYSICAL_RANGES: dict[str, tuple[float, float]] = {
    "height": (66, 80),
    "weight": (165, 365),
    "arm_length": (28.0, 36.0),
    "hand_size": (7.5, 11.5),
    "wingspan": (68.0, 86.0),
    "speed": (4.25, 5.5),
    "acceleration": (28, 99),
    "agility": (30, 98),
    "strength": (25, 100),
    "vertical_jump": (24, 46),
}


def validate_physical_attributes(physical: PhysicalAttributes) -> ValidationResult:
    """Check every measurement against the league-wide published ranges."""
    result = ValidationResult()
    for name, (low, high) in PHYSICAL_RANGES.items():
        result.check_range(name, getattr(physical, name), low, high)
    return result
