"""Test configuration and fixtures for the lineup setter test suite."""

import os
import sys
import pathlib

# Force test-safe defaults before any other imports
os.environ.setdefault('ENV', 'TEST')
os.environ.setdefault('ACCESS_TOKEN', 'test-token')
os.environ.setdefault('LEAGUE_URL', 'http://league.test')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

# Ensure tests can import from src/
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from lineup_setter.config import get_settings
from lineup_setter.models import Availability
from tests.helpers import make_player


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached; tests that touch env vars need a fresh copy."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sleeps():
    """Fake asyncio.sleep that records requested waits in seconds."""
    recorded = []

    async def fake_sleep(seconds):
        recorded.append(seconds)

    fake_sleep.calls = recorded
    return fake_sleep


@pytest.fixture
def full_roster():
    """Sixteen-man roster taken from a real team page."""
    return [
        make_player('1647481', ['C'], Availability.PLAYING, 28, 'Nikola Vucevic'),
        make_player('2152455', ['C'], Availability.PLAYING, 96, 'Domantas Sabonis'),
        make_player('2135526', ['G'], Availability.PLAYING, 119, 'Spencer Dinwiddie'),
        make_player('2355022', ['G'], Availability.PLAYING, 263, 'Malik Monk'),
        make_player('1646202', ['G'], Availability.NOT_PLAYING, 10, 'Kemba Walker'),
        make_player('1622555', ['G'], Availability.NOT_PLAYING, 30, 'Russell Westbrook'),
        make_player('2135532', ['F'], Availability.PLAYING, 100, 'Aaron Gordon'),
        make_player('2135570', ['F'], Availability.PLAYING, 117, 'T.J. Warren'),
        make_player('2106818', ['F'], Availability.PLAYING, 207, "DeAndre' Bembry"),
        make_player('1905196', ['F'], Availability.PLAYING, 211, 'Norman Powell'),
        make_player('1231870', ['C'], Availability.PLAYING, 187, 'Marc Gasol'),
        make_player('2842761', ['F', 'G'], Availability.NOT_PLAYING, 32, 'Luke Kennard'),
        make_player('1992781', ['F'], Availability.NOT_PLAYING, 60, 'Harrison Barnes'),
        make_player('555988', ['G'], Availability.NOT_PLAYING, 66, 'Lou Williams'),
        make_player('2153012', ['C'], Availability.NOT_PLAYING, 237, 'Jakob Poeltl'),
        make_player('2202574', ['G'], Availability.INJURED, 232, 'Malik Beasley'),
    ]
