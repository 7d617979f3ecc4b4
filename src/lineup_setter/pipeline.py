"""Pipeline for the daily lineup update: fetch, allocate, submit."""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .allocator import allocate
from .config import AppSettings, get_settings
from .lineup_logging import get_logger
from .models import Lineup, Player
from .resilience import RetryPolicy, Sleep
from .sources import PlayerSource
from .submission import LineupSubmitter, ensure_submission_allowed

logger = get_logger(__name__)


@dataclass
class LineupRunResult:
    """Result of a lineup pipeline execution."""
    lineup: Lineup
    pool_size: int
    submitted: bool
    duration_seconds: float
    response: Optional[Dict[str, Any]] = None


class LineupPipeline:
    """Fetches the player pool, allocates a lineup and submits it.

    Fetching and submitting are retried independently; allocation runs once
    on the fully fetched pool.
    """

    def __init__(
        self,
        source: PlayerSource,
        submitter: Optional[LineupSubmitter] = None,
        settings: Optional[AppSettings] = None,
        retries: Optional[int] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.settings = settings or get_settings()
        self.source = source
        self.submitter = submitter or LineupSubmitter(self.settings)
        self.sleep = sleep

        max_retries = self.settings.RETRY_MAX if retries is None else retries
        self.fetch_policy = RetryPolicy(max_retries, self.settings.RETRY_BASE_DELAY_MS, name="fetch_players")
        self.submit_policy = RetryPolicy(max_retries, self.settings.RETRY_BASE_DELAY_MS, name="submit_lineup")

    async def fetch_players(self) -> List[Player]:
        """Fetch the player pool, retrying failed fetches."""
        players = await self.fetch_policy.run(self.source.fetch_players, sleep=self.sleep)
        logger.info("Fetched players", count=len(players))
        return players

    async def build_lineup(self) -> Lineup:
        """Fetch the pool and allocate it without submitting."""
        return allocate(await self.fetch_players())

    async def run(self, dry_run: bool = False) -> LineupRunResult:
        """Run the full update.

        Args:
            dry_run: Allocate without submitting to the league host

        Returns:
            LineupRunResult with the lineup and submission outcome

        Raises:
            SubmissionNotAllowedError: If not a dry run and settings forbid
                submitting; raised before the pool is fetched
        """
        start = time.monotonic()
        if not dry_run:
            ensure_submission_allowed(self.settings)

        players = await self.fetch_players()
        lineup = allocate(players)

        response = None
        if dry_run:
            logger.info("Dry run, skipping lineup submission")
        else:
            response = await self.submit_policy.run(
                lambda: self.submitter.submit(lineup),
                sleep=self.sleep,
            )

        return LineupRunResult(
            lineup=lineup,
            pool_size=len(players),
            submitted=not dry_run,
            duration_seconds=time.monotonic() - start,
            response=response,
        )
