"""Lineup setter CLI using Typer."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .lineup_logging import configure_logging, get_logger
from .models import ACTIVE_SLOTS, Lineup, Slot

app = typer.Typer(help="Fantasy basketball lineup setter")

logger = get_logger(__name__)

SLOT_TITLES = {
    Slot.CENTERS: "Centers",
    Slot.GUARDS: "Guards",
    Slot.FORWARDS: "Forwards",
    Slot.GFC: "Flex",
    Slot.RESERVE: "Reserve",
}


@app.callback()
def main_callback() -> None:
    """Fantasy basketball lineup setter."""
    configure_logging()


def _echo_lineup(lineup: Lineup) -> None:
    for slot in (*ACTIVE_SLOTS, Slot.RESERVE):
        players = lineup.slot_players(slot)
        capacity = f"/{slot.capacity}" if slot.capacity is not None else ""
        typer.echo(f"\n{SLOT_TITLES[slot]} ({len(players)}{capacity})")
        for p in players:
            positions = ''.join(pos.value for pos in p.positions)
            typer.echo(f"   - {p.name} {positions} ({p.availability.label}) #{p.rank}")


def _make_pipeline(roster: Optional[Path], retries: Optional[int]):
    # Import pipeline at runtime to keep CLI startup light
    from .config import get_settings
    from .pipeline import LineupPipeline
    from .sources import JsonRosterSource

    settings = get_settings()
    source = JsonRosterSource(roster or settings.ROSTER_PATH)
    return LineupPipeline(source, settings=settings, retries=retries)


@app.command()
def show(
    roster: Annotated[Optional[Path], typer.Option(help="Roster JSON file")] = None,
):
    """Allocate a lineup from the roster and print it."""
    try:
        pipeline = _make_pipeline(roster, retries=0)
        lineup = asyncio.run(pipeline.build_lineup())
    except Exception as e:
        logger.error(f"Lineup allocation failed: {e}")
        typer.echo(f"❌ Lineup allocation failed: {e}", err=True)
        raise typer.Exit(1)

    _echo_lineup(lineup)


@app.command("set")
def set_lineup(
    roster: Annotated[Optional[Path], typer.Option(help="Roster JSON file")] = None,
    retries: Annotated[Optional[int], typer.Option(min=0, help="Retries for fetch and submit")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Allocate without submitting")] = False,
):
    """Allocate a lineup and submit it to the league host."""
    try:
        pipeline = _make_pipeline(roster, retries)
        if dry_run:
            typer.echo("🔍 DRY RUN MODE - lineup will not be submitted")
        result = asyncio.run(pipeline.run(dry_run=dry_run))
    except Exception as e:
        logger.error(f"Lineup update failed: {e}")
        typer.echo(f"❌ Lineup update failed: {e}", err=True)
        raise typer.Exit(1)

    _echo_lineup(result.lineup)
    if result.submitted:
        typer.echo(f"\n✅ Lineup submitted ({result.pool_size} players)")
    else:
        typer.echo(f"\n📋 Lineup computed ({result.pool_size} players), not submitted")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    app()
