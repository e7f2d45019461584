"""Position definitions for football players."""

from enum import Enum, auto


class PositionGroup(Enum):
    """High-level position groupings."""

    OFFENSE = auto()
    DEFENSE = auto()
    SPECIAL_TEAMS = auto()


class SkillGroup(Enum):
    """Positions that share a technical skill set."""

    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    OL = "OL"
    DL = "DL"
    LB = "LB"
    DB = "DB"
    K = "K"
    P = "P"


class Position(Enum):
    """Individual player positions."""

    # Offense - Skill positions
    QB = "QB"  # Quarterback
    RB = "RB"  # Running Back
    WR = "WR"  # Wide Receiver
    TE = "TE"  # Tight End

    # Offense - Line
    LT = "LT"  # Left Tackle
    LG = "LG"  # Left Guard
    C = "C"  # Center
    RG = "RG"  # Right Guard
    RT = "RT"  # Right Tackle

    # Defense - Line
    DE = "DE"  # Defensive End
    DT = "DT"  # Defensive Tackle

    # Defense - Linebackers
    OLB = "OLB"  # Outside Linebacker
    ILB = "ILB"  # Inside Linebacker

    # Defense - Secondary
    CB = "CB"  # Cornerback
    FS = "FS"  # Free Safety
    SS = "SS"  # Strong Safety

    # Special Teams
    K = "K"  # Kicker
    P = "P"  # Punter

    @property
    def group(self) -> PositionGroup:
        """Get the position group for this position."""
        if self in OFFENSIVE_POSITIONS:
            return PositionGroup.OFFENSE
        if self in DEFENSIVE_POSITIONS:
            return PositionGroup.DEFENSE
        return PositionGroup.SPECIAL_TEAMS

    @property
    def skill_group(self) -> SkillGroup:
        """Get the skill set this position is graded on."""
        return _SKILL_GROUPS[self]

    @property
    def is_offense(self) -> bool:
        return self.group == PositionGroup.OFFENSE

    @property
    def is_defense(self) -> bool:
        return self.group == PositionGroup.DEFENSE

    @property
    def is_lineman(self) -> bool:
        """Check if this is a lineman position (offense or defense)."""
        return self.skill_group in (SkillGroup.OL, SkillGroup.DL)


OFFENSIVE_POSITIONS: tuple[Position, ...] = (
    Position.QB,
    Position.RB,
    Position.WR,
    Position.TE,
    Position.LT,
    Position.LG,
    Position.C,
    Position.RG,
    Position.RT,
)

DEFENSIVE_POSITIONS: tuple[Position, ...] = (
    Position.DE,
    Position.DT,
    Position.OLB,
    Position.ILB,
    Position.CB,
    Position.FS,
    Position.SS,
)

SPECIAL_TEAMS_POSITIONS: tuple[Position, ...] = (
    Position.K,
    Position.P,
)

_SKILL_GROUPS: dict[Position, SkillGroup] = {
    Position.QB: SkillGroup.QB,
    Position.RB: SkillGroup.RB,
    Position.WR: SkillGroup.WR,
    Position.TE: SkillGroup.TE,
    Position.LT: SkillGroup.OL,
    Position.LG: SkillGroup.OL,
    Position.C: SkillGroup.OL,
    Position.RG: SkillGroup.OL,
    Position.RT: SkillGroup.OL,
    Position.DE: SkillGroup.DL,
    Position.DT: SkillGroup.DL,
    Position.OLB: SkillGroup.LB,
    Position.ILB: SkillGroup.LB,
    Position.CB: SkillGroup.DB,
    Position.FS: SkillGroup.DB,
    Position.SS: SkillGroup.DB,
    Position.K: SkillGroup.K,
    Position.P: SkillGroup.P,
}
