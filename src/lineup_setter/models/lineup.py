"""Lineup Pydantic model."""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ACTIVE_SLOTS, Slot
from .player import Player


class Lineup(BaseModel):
    """Partition of a player pool into active slots and reserve.

    A lineup is produced fresh by the allocator and never mutated; the
    submission client and the CLI only read it.
    """

    model_config = ConfigDict(frozen=True)

    centers: Tuple[Player, ...] = Field(default=(), description="Center slots")
    guards: Tuple[Player, ...] = Field(default=(), description="Guard slots")
    forwards: Tuple[Player, ...] = Field(default=(), description="Forward slots")
    gfc: Tuple[Player, ...] = Field(default=(), description="Flex slots, any position")
    reserve: Tuple[Player, ...] = Field(default=(), description="Everyone not starting")

    @model_validator(mode='after')
    def check_capacities(self) -> 'Lineup':
        """Reject slots holding more players than they have room for."""
        for slot in ACTIVE_SLOTS:
            filled = len(self.slot_players(slot))
            if filled > slot.capacity:
                raise ValueError(
                    f"{slot.value} holds {filled} players, capacity is {slot.capacity}"
                )
        return self

    def slot_players(self, slot: Slot) -> Tuple[Player, ...]:
        """Players assigned to a slot, in assignment order."""
        return getattr(self, slot.value)

    @property
    def starters(self) -> Tuple[Player, ...]:
        """Active players in slot fill order."""
        return tuple(p for slot in ACTIVE_SLOTS for p in self.slot_players(slot))

    @property
    def players(self) -> Tuple[Player, ...]:
        """Every player in the lineup, starters first."""
        return self.starters + self.reserve

    def assignments(self) -> Dict[str, Slot]:
        """Map each player id to the slot holding it."""
        result: Dict[str, Slot] = {}
        for slot in (*ACTIVE_SLOTS, Slot.RESERVE):
            for player in self.slot_players(slot):
                result[player.id] = slot
        return result

    def slot_of(self, player_id: str) -> Optional[Slot]:
        """Slot holding the given player, or None if absent."""
        return self.assignments().get(player_id)
