"""API services."""

from prospect.api.services.player_store import PlayerStore, get_player_store, reset_player_store

__all__ = ["PlayerStore", "get_player_store", "reset_player_store"]
