"""
In-memory player store for the API.

Full players never leave this module except as view models. Rosters are
generated once per team id and kept, so repeated reads are stable. Only the
most recent draft class is kept.
"""

import logging
import random
from typing import Optional

from prospect.config import get_config
from prospect.core.models.player import Player
from prospect.generators.player import (
    PlayerGenerationOptions,
    generate_draft_class,
    generate_player,
    generate_roster,
)

logger = logging.getLogger(__name__)


class PlayerStore:
    """Holds generated players keyed by id, plus team rosters."""

    def __init__(self, rng: Optional[random.Random] = None, current_year: Optional[int] = None):
        config = get_config()
        self.rng = rng if rng is not None else config.make_rng()
        self.current_year = current_year if current_year is not None else config.current_year
        self._players: dict[str, Player] = {}
        self._rosters: dict[str, list[str]] = {}
        self._draft_class: list[str] = []

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def roster_count(self) -> int:
        return len(self._rosters)

    def _add(self, player: Player) -> Player:
        self._players[str(player.id)] = player
        return player

    def get_player(self, player_id: str) -> Optional[Player]:
        return self._players.get(player_id)

    def create_player(self, options: PlayerGenerationOptions) -> Player:
        return self._add(generate_player(options, self.rng, self.current_year))

    def get_roster(self, team_id: str) -> list[Player]:
        """Return the team's roster, generating it on first request."""
        if team_id not in self._rosters:
            roster = generate_roster(team_id, self.rng, self.current_year)
            self._rosters[team_id] = [str(self._add(p).id) for p in roster]
            logger.info(f"Generated roster for {team_id}")
        return [self._players[player_id] for player_id in self._rosters[team_id]]

    def create_draft_class(self, size: int) -> list[Player]:
        """Generate a fresh class, replacing the previously stored one."""
        for player_id in self._draft_class:
            self._players.pop(player_id, None)
        prospects = generate_draft_class(size, self.rng, self.current_year)
        self._draft_class = [str(self._add(p).id) for p in prospects]
        return prospects

    def clear(self) -> None:
        self._players.clear()
        self._rosters.clear()
        self._draft_class.clear()


_store: Optional[PlayerStore] = None


def get_player_store() -> PlayerStore:
    """Get the process-wide store, building it from config on first use."""
    global _store
    if _store is None:
        _store = PlayerStore()
    return _store


def reset_player_store(store: Optional[PlayerStore] = None) -> None:
    """Replace (or drop) the process-wide store."""
    global _store
    _store = store
