"""Roster allocation: maps a player pool onto lineup slots.

Slots are filled in a fixed precedence: centers, guards, forwards, then
flex, which draws from the whole pool. Each slot takes the best untaken
candidate from its own sorted pool. Whoever is left over lands in reserve,
sorted the same way.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .errors import RosterValidationError
from .lineup_logging import get_logger
from .models import Lineup, Player, Position, Slot

logger = get_logger(__name__)

# Slot fill order and the position that qualifies a player for each pool.
# Flex has no qualifying position: every player is a flex candidate.
SLOT_PLAN: Tuple[Tuple[Slot, Optional[Position]], ...] = (
    (Slot.CENTERS, Position.C),
    (Slot.GUARDS, Position.G),
    (Slot.FORWARDS, Position.F),
    (Slot.GFC, None),
)


def player_sort_key(player: Player) -> Tuple[int, int]:
    """Ordering key for candidates: most available first, then best rank."""
    return (int(player.availability), player.rank)


def validate_pool(players: Sequence[Player]) -> None:
    """Reject pools that cannot be partitioned without losing players.

    Raises:
        RosterValidationError: If two players share an id.
    """
    counts = Counter(p.id for p in players)
    duplicates = sorted(pid for pid, count in counts.items() if count > 1)
    if duplicates:
        raise RosterValidationError(
            f"Duplicate player ids in roster: {', '.join(duplicates)}",
            duplicate_ids=duplicates,
        )


def build_candidate_pools(players: Sequence[Player]) -> Dict[Slot, List[str]]:
    """Collect sorted candidate ids for each active slot.

    Pools start in input order and are sorted with a stable sort, so players
    tied on availability and rank keep their input order.
    """
    by_id = {p.id: p for p in players}
    pools: Dict[Slot, List[str]] = {}

    for slot, position in SLOT_PLAN:
        ids = [p.id for p in players if position is None or p.is_eligible(position)]
        pools[slot] = sorted(ids, key=lambda pid: player_sort_key(by_id[pid]))

    return pools


def take_next(pool: Sequence[str], taken: Set[str]) -> Optional[str]:
    """Claim the first id in ``pool`` that is not in ``taken``.

    The claimed id is added to ``taken``. Returns None when the pool has no
    untaken candidates left.
    """
    for player_id in pool:
        if player_id not in taken:
            taken.add(player_id)
            return player_id
    return None


def allocate(players: Sequence[Player]) -> Lineup:
    """Assign a player pool to centers, guards, forwards, flex and reserve.

    Args:
        players: Pool of players, in host order. May be empty.

    Returns:
        A new Lineup in which every input player appears exactly once.

    Raises:
        RosterValidationError: If player ids are not unique.
    """
    players = list(players)
    validate_pool(players)

    by_id = {p.id: p for p in players}
    pools = build_candidate_pools(players)
    taken: Set[str] = set()
    assigned: Dict[Slot, List[Player]] = {}

    for slot, _ in SLOT_PLAN:
        assigned[slot] = []
        for _ in range(slot.capacity):
            player_id = take_next(pools[slot], taken)
            if player_id is None:
                break
            assigned[slot].append(by_id[player_id])

    reserve = [by_id[pid] for pid in pools[Slot.GFC] if pid not in taken]

    logger.debug(
        "Lineup allocated",
        pool_size=len(players),
        centers=len(assigned[Slot.CENTERS]),
        guards=len(assigned[Slot.GUARDS]),
        forwards=len(assigned[Slot.FORWARDS]),
        gfc=len(assigned[Slot.GFC]),
        reserve=len(reserve),
    )

    return Lineup(
        centers=tuple(assigned[Slot.CENTERS]),
        guards=tuple(assigned[Slot.GUARDS]),
        forwards=tuple(assigned[Slot.FORWARDS]),
        gfc=tuple(assigned[Slot.GFC]),
        reserve=tuple(reserve),
    )
