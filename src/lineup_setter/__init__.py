"""Fantasy basketball lineup setter.

Allocates a rostered player pool to center, guard, forward and flex slots
and commits the result to the league host, retrying unreliable calls with
exponential backoff.
"""

from .version import __version__
from .allocator import allocate, player_sort_key
from .config import AppSettings, get_settings
from .models import Availability, Lineup, Player, Position, Slot
from .resilience import RetryPolicy, retry

__all__ = [
    "__version__",
    "AppSettings",
    "get_settings",
    "allocate",
    "player_sort_key",
    "retry",
    "RetryPolicy",
    "Availability",
    "Lineup",
    "Player",
    "Position",
    "Slot",
]
