"""Enumerations for roster data validation."""

from enum import Enum, IntEnum
from typing import Any, Optional


class Position(str, Enum):
    """Basketball position a player is eligible at."""

    G = "G"
    F = "F"
    C = "C"

    @classmethod
    def _missing_(cls, value: Any) -> Optional["Position"]:
        """Accept lowercase codes and long position names."""
        if not isinstance(value, str):
            return None

        position_map = {
            'G': cls.G,
            'F': cls.F,
            'C': cls.C,
            'GUARD': cls.G,
            'FORWARD': cls.F,
            'CENTER': cls.C,
        }
        return position_map.get(value.strip().upper())


class Availability(IntEnum):
    """Game-day availability, ordered from most to least desirable to start."""

    PLAYING = 0
    QUESTIONABLE = 1
    NOT_PLAYING = 2
    INJURED = 3

    @property
    def label(self) -> str:
        """Label used by the league host for this status."""
        return _AVAILABILITY_LABELS[self]

    @classmethod
    def _missing_(cls, value: Any) -> Optional["Availability"]:
        """Accept member names and the host's status labels."""
        if isinstance(value, str):
            status_str = value.strip().lower().replace('_', ' ')
            if status_str.isdigit():
                return cls._value2member_map_.get(int(status_str))

            status_map = {
                'playing': cls.PLAYING,
                'active': cls.PLAYING,
                'questionable': cls.QUESTIONABLE,
                'game time decision': cls.QUESTIONABLE,
                'gtd': cls.QUESTIONABLE,
                'not playing': cls.NOT_PLAYING,
                'notplaying': cls.NOT_PLAYING,
                'no game': cls.NOT_PLAYING,
                'injured': cls.INJURED,
            }
            return status_map.get(status_str)
        return None


_AVAILABILITY_LABELS = {
    Availability.PLAYING: 'playing',
    Availability.QUESTIONABLE: 'questionable',
    Availability.NOT_PLAYING: 'no game',
    Availability.INJURED: 'injured',
}


class Slot(str, Enum):
    """Lineup slot a player can be assigned to."""

    CENTERS = "centers"
    GUARDS = "guards"
    FORWARDS = "forwards"
    GFC = "gfc"
    RESERVE = "reserve"

    @property
    def capacity(self) -> Optional[int]:
        """Fixed number of players the slot holds; None means unbounded."""
        return SLOT_CAPACITY.get(self)

    @property
    def code(self) -> Optional[str]:
        """Position code the league host expects for an active slot."""
        return SLOT_CODES.get(self)


SLOT_CAPACITY = {
    Slot.CENTERS: 2,
    Slot.GUARDS: 4,
    Slot.FORWARDS: 4,
    Slot.GFC: 2,
}

SLOT_CODES = {
    Slot.CENTERS: 'C',
    Slot.GUARDS: 'G',
    Slot.FORWARDS: 'F',
    Slot.GFC: 'G-F-C',
}

# Active slots in the order they are filled
ACTIVE_SLOTS = (Slot.CENTERS, Slot.GUARDS, Slot.FORWARDS, Slot.GFC)
