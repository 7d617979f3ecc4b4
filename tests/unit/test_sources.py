"""Tests for player sources."""

import json

import pytest

from lineup_setter.errors import RosterSourceError
from lineup_setter.models import Availability, Position
from lineup_setter.sources import JsonRosterSource, StaticPlayerSource, parse_player_rows
from tests.helpers import ids, make_player


ROWS = [
    {"id": "1647481", "name": "Nikola Vucevic", "positions": "C", "availability": "playing", "rank": 28},
    {"id": 2842761, "name": "Luke Kennard", "positions": ["F", "G"], "availability": "no game", "rank": 32},
    {"id": "2202574", "name": "Malik Beasley", "positions": "G", "availability": 3, "rank": 232},
]


class TestParsePlayerRows:
    def test_valid_rows(self):
        players = parse_player_rows(ROWS)

        assert ids(players) == ["1647481", "2842761", "2202574"]
        assert players[1].positions == (Position.F, Position.G)
        assert players[1].availability is Availability.NOT_PLAYING
        assert players[2].availability is Availability.INJURED

    def test_malformed_rows_dropped(self):
        rows = ROWS + [
            {"id": "x1", "name": "No Positions", "positions": [], "availability": 0, "rank": 1},
            {"id": "x2", "name": "Bad Rank", "positions": "G", "availability": 0, "rank": "n/a"},
            {"id": "x3", "name": "Bad Status", "positions": "G", "availability": "suspended", "rank": 4},
            {"name": "No Id", "positions": "G", "availability": 0, "rank": 4},
            "not a row",
        ]
        players = parse_player_rows(rows)
        assert ids(players) == ["1647481", "2842761", "2202574"]


class TestJsonRosterSource:
    """Roster file loading."""

    @pytest.mark.asyncio
    async def test_reads_list(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps(ROWS), encoding="utf-8")

        players = await JsonRosterSource(path).fetch_players()
        assert ids(players) == ["1647481", "2842761", "2202574"]

    @pytest.mark.asyncio
    async def test_reads_players_object(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"team": 13, "players": ROWS[:1]}), encoding="utf-8")

        players = await JsonRosterSource(str(path)).fetch_players()
        assert ids(players) == ["1647481"]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(RosterSourceError, match="not found"):
            await JsonRosterSource(tmp_path / "missing.json").fetch_players()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RosterSourceError, match="not valid JSON"):
            await JsonRosterSource(path).fetch_players()

    @pytest.mark.asyncio
    async def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_bytes(b"\xff\xfe[")
        with pytest.raises(RosterSourceError, match="could not be read") as exc_info:
            await JsonRosterSource(path).fetch_players()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_directory_path(self, tmp_path):
        with pytest.raises(RosterSourceError, match="could not be read") as exc_info:
            await JsonRosterSource(tmp_path).fetch_players()
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_wrong_shape(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"roster": []}), encoding="utf-8")
        with pytest.raises(RosterSourceError, match="list of players"):
            await JsonRosterSource(path).fetch_players()


@pytest.mark.asyncio
async def test_static_source_returns_copy():
    players = [make_player("a", ["G"])]
    source = StaticPlayerSource(players)

    fetched = await source.fetch_players()
    fetched.append(make_player("b", ["F"]))

    assert ids(await source.fetch_players()) == ["a"]
