"""Player sources feeding the allocator."""

import json
from pathlib import Path
from typing import Any, Dict, List, Protocol, Sequence, Union

from pydantic import ValidationError

from .errors import RosterSourceError
from .lineup_logging import get_logger
from .models import Player

logger = get_logger(__name__)


class PlayerSource(Protocol):
    """Anything that can produce the current player pool.

    Implementations handle login, navigation and page extraction; rows that
    cannot be parsed are dropped before the pool is returned.
    """

    async def fetch_players(self) -> List[Player]:
        ...


def parse_player_rows(rows: Sequence[Dict[str, Any]], source: str = "unknown") -> List[Player]:
    """Validate raw player rows, skipping the ones that do not parse.

    Args:
        rows: Dictionaries with id, name, positions, availability and rank
        source: Label used in log events

    Returns:
        Players in row order
    """
    players: List[Player] = []
    for index, row in enumerate(rows):
        try:
            players.append(Player.model_validate(row))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed player row",
                source=source,
                row_index=index,
                player_id=row.get('id') if isinstance(row, dict) else None,
                error_count=e.error_count(),
                errors=[err['msg'] for err in e.errors()],
            )

    logger.info("Parsed player rows", source=source, rows=len(rows), players=len(players))
    return players


class JsonRosterSource:
    """Reads the player pool from a JSON export of the team page.

    The file holds either a list of player rows or an object with a
    ``players`` list.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _load_rows(self) -> List[Dict[str, Any]]:
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except FileNotFoundError as e:
            raise RosterSourceError(f"Roster file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise RosterSourceError(f"Roster file is not valid JSON: {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise RosterSourceError(f"Roster file could not be read: {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get('players')
        if not isinstance(data, list):
            raise RosterSourceError(f"Roster file must contain a list of players: {self.path}")
        return data

    async def fetch_players(self) -> List[Player]:
        logger.info("Loading roster file", path=str(self.path))
        return parse_player_rows(self._load_rows(), source=str(self.path))


class StaticPlayerSource:
    """Serves a fixed, already-fetched player pool."""

    def __init__(self, players: Sequence[Player]) -> None:
        self.players = list(players)

    async def fetch_players(self) -> List[Player]:
        return list(self.players)
