"""
Technical skills with true-vs-perceived duality.

Every skill carries a hidden true value and the scouting range the user is
shown instead. The range collapses onto the true value once the player
reaches maturity age.
"""

from dataclasses import dataclass
from typing import Optional

from prospect.core.enums import Position, SkillGroup
from prospect.core.validation import ValidationResult

SKILL_MIN = 1
SKILL_MAX = 100


@dataclass(frozen=True)
class SkillValue:
    """A single skill: hidden true value plus the perceived range."""

    true_value: int
    perceived_min: int
    perceived_max: int
    maturity_age: int

    @property
    def range_width(self) -> int:
        return self.perceived_max - self.perceived_min

    @property
    def is_revealed(self) -> bool:
        """True once scouting has collapsed onto a single value."""
        return self.perceived_min == self.perceived_max


TechnicalSkills = dict[str, SkillValue]


# Skill names graded for each group. Order matters: skills are generated
# top to bottom and correlations only look at skills already generated.
SKILL_NAMES_BY_GROUP: dict[SkillGroup, tuple[str, ...]] = {
    SkillGroup.QB: (
        "arm_strength",
        "accuracy",
        "decision_making",
        "pocket_presence",
        "play_action",
        "mobility",
        "leadership",
        "presnap",
    ),
    SkillGroup.RB: (
        "vision",
        "cut_ability",
        "power",
        "breakaway",
        "catching",
        "pass_protection",
        "fumble_protection",
    ),
    SkillGroup.WR: (
        "route_running",
        "catching",
        "separation",
        "yac",
        "blocking",
        "contested",
        "tracking",
    ),
    SkillGroup.TE: (
        "blocking",
        "route_running",
        "catching",
        "yac",
        "contested",
        "sealing",
    ),
    SkillGroup.OL: (
        "pass_block",
        "run_block",
        "awareness",
        "footwork",
        "power",
        "sustain",
        "pull_ability",
    ),
    SkillGroup.DL: (
        "pass_rush",
        "run_defense",
        "power",
        "finesse",
        "awareness",
        "stamina",
        "pursuit",
    ),
    SkillGroup.LB: (
        "tackling",
        "coverage",
        "blitzing",
        "pursuit",
        "awareness",
        "shed_blocks",
        "zone_coverage",
    ),
    SkillGroup.DB: (
        "man_coverage",
        "zone_coverage",
        "tackling",
        "ball_skills",
        "awareness",
        "closing",
        "press",
    ),
    SkillGroup.K: (
        "kick_power",
        "kick_accuracy",
        "clutch",
    ),
    SkillGroup.P: (
        "punt_power",
        "punt_accuracy",
        "hang_time",
        "directional",
    ),
}


def get_skill_names(position: Position) -> tuple[str, ...]:
    """Skill names a position is graded on."""
    return SKILL_NAMES_BY_GROUP[position.skill_group]


def validate_skill_value(skill: SkillValue) -> ValidationResult:
    result = ValidationResult()
    result.check_range("true_value", skill.true_value, SKILL_MIN, SKILL_MAX)
    result.check_range("perceived_min", skill.perceived_min, SKILL_MIN, SKILL_MAX)
    result.check_range("perceived_max", skill.perceived_max, SKILL_MIN, SKILL_MAX)
    result.check(
        skill.perceived_min <= skill.perceived_max,
        f"perceived_min {skill.perceived_min} > perceived_max {skill.perceived_max}",
    )
    result.check_range("maturity_age", skill.maturity_age, 18, 40)
    return result


def validate_technical_skills(
    skills: TechnicalSkills,
    position: Optional[Position] = None,
) -> ValidationResult:
    """
    Validate every skill, and when ``position`` is given, that the skill set
    matches that position's group exactly.
    """
    result = ValidationResult()
    result.check(len(skills) > 0, "no skills generated")
    for name, skill in skills.items():
        result.merge(validate_skill_value(skill), prefix=name)

    if position is not None:
        expected = set(get_skill_names(position))
        actual = set(skills)
        for name in sorted(expected - actual):
            result.add(f"missing skill {name} for {position.value}")
        for name in sorted(actual - expected):
            result.add(f"unexpected skill {name} for {position.value}")
    return result
