"""Structured validation results."""

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """
    Outcome of validating a generated record.

    Truthy when no errors were found, so ``if validate_player(p):`` keeps
    working as a plain boolean check while ``errors`` says what failed.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def add(self, message: str) -> None:
        self.errors.append(message)

    def check(self, condition: bool, message: str) -> None:
        """Record ``message`` when ``condition`` is false."""
        if not condition:
            self.errors.append(message)

    def merge(self, other: "ValidationResult", prefix: str = "") -> None:
        """Fold another result in, prefixing its messages with a field path."""
        for error in other.errors:
            self.errors.append(f"{prefix}.{error}" if prefix else error)

    def check_range(self, name: str, value: float, low: float, high: float) -> None:
        """Record an error when ``value`` falls outside ``[low, high]``."""
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            self.errors.append(f"{name}: expected a number, got {type(value).__name__}")
        elif not low <= value <= high:
            self.errors.append(f"{name}: {value} outside [{low}, {high}]")
