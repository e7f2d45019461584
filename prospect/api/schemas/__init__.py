"""Pydantic schemas for API request/response models."""

from prospect.api.schemas.players import (
    CreatePlayerRequest,
    DraftClassResponse,
    RosterResponse,
)

__all__ = [
    "CreatePlayerRequest",
    "DraftClassResponse",
    "RosterResponse",
]
