"""Pydantic data models for the lineup setter."""

from .enums import ACTIVE_SLOTS, Availability, Position, Slot
from .lineup import Lineup
from .player import Player

__all__ = [
    # Enums
    "ACTIVE_SLOTS",
    "Availability",
    "Position",
    "Slot",
    # Models
    "Lineup",
    "Player",
]
