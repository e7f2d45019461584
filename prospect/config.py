"""
Generator configuration.

Controls seeding, the calendar year used for draft metadata, and batch
sizes. All settings can be overridden via environment variables. Generators
never read this directly; the CLI and API build ``rng`` and ``current_year``
from it and pass them down.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from prospect.core.sampling import make_rng

MIN_YEAR = 1920
MAX_YEAR = 2200
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass
class GeneratorConfig:
    """Settings for generation runs."""

    # Unset means a fresh, non-reproducible stream
    seed: Optional[int] = field(default_factory=lambda: _optional_int("PROSPECT_SEED"))
    current_year: int = field(
        default_factory=lambda: int(os.getenv("PROSPECT_CURRENT_YEAR", date.today().year))
    )

    # Batch sizes
    draft_class_size: int = field(
        default_factory=lambda: int(os.getenv("PROSPECT_DRAFT_CLASS_SIZE", "300"))
    )
    league_size: int = field(default_factory=lambda: int(os.getenv("PROSPECT_LEAGUE_SIZE", "32")))

    log_level: str = field(
        default_factory=lambda: os.getenv("PROSPECT_LOG_LEVEL", "WARNING").upper()
    )

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.draft_class_size <= 0:
            errors.append("PROSPECT_DRAFT_CLASS_SIZE must be positive")
        if self.league_size <= 0:
            errors.append("PROSPECT_LEAGUE_SIZE must be positive")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"PROSPECT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if not MIN_YEAR <= self.current_year <= MAX_YEAR:
            errors.append(f"PROSPECT_CURRENT_YEAR must be within {MIN_YEAR}-{MAX_YEAR}")
        return errors

    def make_rng(self) -> random.Random:
        """Random stream for a run, seeded when ``seed`` is set."""
        return make_rng(self.seed)

    @property
    def logging_level(self) -> int:
        """Numeric level; unknown names fall back to WARNING."""
        if self.log_level not in LOG_LEVELS:
            return logging.WARNING
        return logging.getLevelName(self.log_level)


# Singleton config instance
_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get the global generator configuration."""
    global _config
    if _config is None:
        _config = GeneratorConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` re-reads the environment."""
    global _config
    _config = None
