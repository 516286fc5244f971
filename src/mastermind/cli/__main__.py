"""Interactive Mastermind CLI.

Creates a game on the configured server and plays it from the terminal.
There are no flags: the game is driven by line input, and configuration
comes from MASTERMIND_* environment variables (see mastermind.game.config).

The process exits with status 0 on every termination path, including a
failed startup.

Usage:
    uv run mastermind
    MASTERMIND_BASE_URL=http://localhost:8000 uv run python -m mastermind.cli
"""

import asyncio
import logging

import typer

from mastermind.game.client import connect
from mastermind.game.config import Settings, settings
from mastermind.game.errors import MastermindError
from mastermind.game.models import GameOutcome
from mastermind.game.session import GameSession
from mastermind.lib.console import GameConsole, RichConsole

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mastermind",
    help="Play Mastermind against a remote game server",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


async def play_game(config: Settings, console: GameConsole) -> GameOutcome:
    """Run one game against the server described by config."""
    logger.info("Connecting to %s", config.base_url)
    async with connect(config) as client:
        session = GameSession(
            client,
            console,
            max_attempts=config.max_attempts,
            exit_keyword=config.exit_keyword,
        )
        outcome = await session.run()

    logger.info(
        "Game finished (reason: %s, attempts: %d, cleanup: %s)",
        outcome.reason,
        outcome.attempts,
        outcome.cleanup,
    )
    return outcome


@app.command()
def play() -> None:
    """Play one game of Mastermind."""
    logging.basicConfig(level=settings.log_level)
    try:
        asyncio.run(play_game(settings, RichConsole()))
    except MastermindError as e:
        logger.error("Game aborted: %s", e)
        typer.echo(f"Error: {e}", err=True)


if __name__ == "__main__":
    app()
