"""Lineup submission to the league host's transaction API."""

import json
from datetime import date, datetime
from typing import Any, Dict, Optional
from urllib.parse import urlencode
from zoneinfo import ZoneInfo

import httpx

from .config import AppSettings, get_settings
from .errors import LineupSubmissionError, SubmissionNotAllowedError
from .lineup_logging import get_logger
from .models import ACTIVE_SLOTS, Lineup

logger = get_logger(__name__)

API_VERSION = '2.0'


def scoring_period(tz_name: str, now: Optional[datetime] = None) -> date:
    """Today's date in the league's timezone."""
    tz = ZoneInfo(tz_name)
    current = now.astimezone(tz) if now is not None else datetime.now(tz)
    return current.date()


def build_lineup_payload(lineup: Lineup, team_id: int, point_date: date) -> Dict[str, Any]:
    """Serialize a lineup into the host's player-id to slot mapping.

    Starters are keyed by their slot code; reserve players keep their first
    listed position.
    """
    active: Dict[str, Dict[str, str]] = {}
    for slot in ACTIVE_SLOTS:
        for player in lineup.slot_players(slot):
            active[player.id] = {'pos': slot.code}

    reserve = {p.id: {'pos': p.primary_position.value} for p in lineup.reserve}

    return {
        'team': str(team_id),
        'active': active,
        'reserve': reserve,
        'point': point_date.strftime('%Y%m%d'),
    }


def build_lineup_params(
    lineup: Lineup,
    team_id: int,
    access_token: str,
    point_date: date,
) -> Dict[str, str]:
    """Form fields for the lineup transaction request."""
    payload = build_lineup_payload(lineup, team_id, point_date)
    return {
        'payload': json.dumps(payload, separators=(',', ':')),
        'access_token': access_token,
        'version': API_VERSION,
        'resultFormat': 'json',
        'responseFormat': 'json',
    }


def ensure_submission_allowed(settings: AppSettings) -> None:
    """Raise SubmissionNotAllowedError unless settings permit a live submission."""
    reason = settings.submission_blocked_reason()
    if reason is not None:
        logger.warning("Lineup submission refused", env=settings.ENV.value, reason=reason)
        raise SubmissionNotAllowedError(reason)


class LineupSubmitter:
    """Async client that commits a lineup to the league host."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the submitter.

        Args:
            settings: Application settings, defaults to the cached settings
            transport: Optional httpx transport, used to stub the host in tests
        """
        self.settings = settings or get_settings()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.TIMEOUT_S),
            headers={
                'User-Agent': self.settings.USER_AGENT,
                'Accept': 'application/json',
            },
            follow_redirects=True,
            transport=self.transport,
        )

    async def submit(self, lineup: Lineup, point_date: Optional[date] = None) -> Dict[str, Any]:
        """Send the lineup and return the host's JSON response.

        Raises:
            SubmissionNotAllowedError: Outside PROD or without an access token
            LineupSubmissionError: For 4xx/5xx responses or a non-JSON body
            httpx.RequestError: For network/connection errors
        """
        ensure_submission_allowed(self.settings)
        point_date = point_date or scoring_period(self.settings.TIMEZONE)
        params = build_lineup_params(
            lineup,
            team_id=self.settings.TEAM_ID,
            access_token=self.settings.ACCESS_TOKEN.get_secret_value(),
            point_date=point_date,
        )
        url = self.settings.lineup_url

        logger.info(
            "Submitting lineup",
            url=url,
            team_id=self.settings.TEAM_ID,
            point=point_date.isoformat(),
            starters=len(lineup.starters),
            reserve=len(lineup.reserve),
        )

        async with self._client() as client:
            try:
                response = await client.put(
                    url,
                    content=urlencode(params),
                    headers={'Content-Type': 'application/x-www-form-urlencoded'},
                )
            except httpx.RequestError as e:
                logger.warning("Lineup request error", url=url, error=str(e))
                raise

        if response.is_error:
            logger.warning(
                "Lineup submission rejected",
                url=url,
                status_code=response.status_code,
                response_text=response.text[:500],
            )
            raise LineupSubmissionError(
                f"Lineup submission failed with HTTP {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise LineupSubmissionError(
                "Lineup submission returned a non-JSON body",
                status_code=response.status_code,
                response_text=response.text,
            ) from e

        logger.info("Lineup submitted", status_code=response.status_code)
        return body
