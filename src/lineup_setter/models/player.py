"""Player Pydantic model."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Availability, Position


class Player(BaseModel):
    """A rostered player as reported by the league host."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable host player identifier")
    name: str = Field(..., description="Player display name")
    positions: Tuple[Position, ...] = Field(
        ...,
        min_length=1,
        description="Eligible positions in host display order"
    )
    availability: Availability = Field(..., description="Game-day availability")
    rank: int = Field(..., ge=0, description="Host ranking, lower is better")

    @field_validator('id', mode='before')
    @classmethod
    def normalize_id(cls, v: Any) -> Any:
        """Coerce numeric ids to strings; hosts emit both."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('positions', mode='before')
    @classmethod
    def normalize_positions(cls, v: Any) -> Any:
        """Split comma-separated codes and drop repeated positions."""
        if isinstance(v, str):
            v = [part for part in v.split(',') if part.strip()]
        if not isinstance(v, (list, tuple)):
            return v

        positions = []
        for raw in v:
            position = Position(raw.strip() if isinstance(raw, str) else raw)
            if position not in positions:
                positions.append(position)
        return tuple(positions)

    @field_validator('availability', mode='before')
    @classmethod
    def normalize_availability(cls, v: Any) -> Availability:
        """Normalize availability from ordinals, names and host labels."""
        if isinstance(v, bool):
            raise ValueError("availability must be a status, not a boolean")
        return Availability(v)

    @field_validator('rank', mode='before')
    @classmethod
    def reject_boolean_rank(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("rank must be an integer, not a boolean")
        return v

    def is_eligible(self, position: Position) -> bool:
        """Return True if the player can fill the given position."""
        return position in self.positions

    @property
    def primary_position(self) -> Position:
        """First listed position, used when the player sits in reserve."""
        return self.positions[0]
