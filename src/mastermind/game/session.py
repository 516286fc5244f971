"""Game session lifecycle.

``GameSession`` drives one game from creation to cleanup::

    Uninitialized --create ok--> Active --exit / win / exhausted--> Terminated
          |
          +--create failed--> Terminated (startup_failed, nothing to delete)

Each turn reads one line, validates it locally, submits valid guesses and
renders the score. Only a scored guess consumes an attempt. Whenever a game
id is held, leaving the loop (normally or by exception) deletes the server
session; a failed delete is reported and otherwise ignored. Ctrl-C or a
cancellation of the running task ends the game through the exit path.

Examples:
    Run a game against the configured server::

        >>> async with connect(settings) as client:
        ...     outcome = await GameSession(client, RichConsole()).run()
        >>> outcome.reason
        <TerminationReason.WIN: 'win'>
"""

import asyncio
import logging

from mastermind.game.client import SessionClient
from mastermind.game.errors import (
    ApiError,
    MastermindError,
    NetworkError,
    ValidationError,
)
from mastermind.game.guess import (
    describe_score,
    format_feedback,
    is_exit_command,
    parse_guess,
)
from mastermind.game.models import (
    CODE_LENGTH,
    MAX_DIGIT,
    MIN_DIGIT,
    Active,
    CleanupStatus,
    GameOutcome,
    ScoreResult,
    SessionState,
    Terminated,
    TerminationReason,
    TurnRecord,
    Uninitialized,
)
from mastermind.lib.console import GameConsole

logger = logging.getLogger(__name__)


async def _absorb_cancellation() -> None:
    """Consume cancel requests on the current task so teardown can run.

    A request already delivered as CancelledError is simply withdrawn; one
    still pending (raised while the loop was blocked on input) is delivered
    by yielding once, then withdrawn.
    """
    task = asyncio.current_task()
    if task is None:
        return
    for _ in range(task.cancelling()):
        try:
            await asyncio.sleep(0)
        except asyncio.CancelledError:
            pass
        task.uncancel()


class GameSession:
    """State machine for a single game against the server.

    Args:
        client: Session client used for all server calls.
        console: Line input source and text sink.
        max_attempts: Scored guesses allowed before the game is lost.
        exit_keyword: Input that ends the game between turns.
    """

    def __init__(
        self,
        client: SessionClient,
        console: GameConsole,
        *,
        max_attempts: int = 10,
        exit_keyword: str = "exit",
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._client = client
        self._console = console
        self.max_attempts = max_attempts
        self.exit_keyword = exit_keyword
        self.state: SessionState = Uninitialized()
        self.turns: list[TurnRecord] = []

    async def run(self) -> GameOutcome:
        """Play one game to completion and release the server session."""
        if not isinstance(self.state, Uninitialized):
            raise RuntimeError(
                f"Session already started (state: {self.state.kind})"
            )

        self._show_banner()
        try:
            active = await self.start()
        except ApiError as e:
            self._console.error(f"Failed to start game: {e}")
            self.state = Terminated(reason=TerminationReason.STARTUP_FAILED)
            return GameOutcome(
                reason=TerminationReason.STARTUP_FAILED, attempts=0, error=str(e)
            )

        try:
            terminated = await self._loop(active)
        except (KeyboardInterrupt, asyncio.CancelledError):
            await _absorb_cancellation()
            terminated = self._interrupt()
        finally:
            cleanup = await self._teardown(active.game_id)

        return GameOutcome(
            reason=terminated.reason,
            attempts=terminated.attempts,
            game_id=active.game_id,
            turns=list(self.turns),
            cleanup=cleanup,
        )

    async def start(self) -> Active:
        """Create the server session. Uninitialized -> Active."""
        game_id = await self._client.create_session()
        active = Active(game_id=game_id)
        self.state = active
        logger.info("Game %s started", game_id)
        self._console.show(f"New game started! Game ID: {game_id}")
        return active

    async def play_turn(self, line: str | None) -> SessionState:
        """Process one line of input from the Active state.

        ``None`` (end of input) is treated as the exit command.

        Returns:
            The new state: Active to keep playing, Terminated when done.
        """
        state = self.state
        if not isinstance(state, Active):
            raise RuntimeError(f"No active game (state: {state.kind})")

        if line is None or is_exit_command(line, self.exit_keyword):
            return self._terminate(state, TerminationReason.EXIT)

        try:
            guess = parse_guess(line)
        except ValidationError as e:
            self._console.error(str(e))
            return state

        try:
            score = await self._client.submit_guess(state.game_id, guess)
        except ApiError as e:
            self._console.error(f"Error making guess: {e}")
            if not isinstance(e, NetworkError):
                self._console.show(
                    f"Please try again or type '{self.exit_keyword}' to quit."
                )
            return state

        attempts = state.attempts + 1
        self.state = state = state.model_copy(update={"attempts": attempts})
        self.turns.append(TurnRecord(attempt=attempts, guess=guess, score=score))
        logger.info("Game %s attempt %d: %s", state.game_id, attempts, score)
        self._show_result(guess, score)

        if score.solved:
            self._console.show("Congratulations! You've cracked the code!")
            return self._terminate(state, TerminationReason.WIN)
        if attempts >= self.max_attempts:
            self._console.show(
                f"Game Over! You've used all {self.max_attempts} attempts."
            )
            self._console.show("Better luck next time!")
            return self._terminate(state, TerminationReason.EXHAUSTED)
        return state

    async def _loop(self, active: Active) -> Terminated:
        state: SessionState = active
        while isinstance(state, Active):
            self._console.show()
            self._console.show(
                f"--- Attempt {state.attempts + 1}/{self.max_attempts} ---"
            )
            line = self._console.read_line(
                f"Enter your {CODE_LENGTH}-digit guess ({MIN_DIGIT}-{MAX_DIGIT}): "
            )
            state = await self.play_turn(line)
        if not isinstance(state, Terminated):
            raise RuntimeError(f"Unexpected state {state.kind}")
        return state

    def _interrupt(self) -> Terminated:
        state = self.state
        self._console.show()
        if isinstance(state, Terminated):
            return state
        if not isinstance(state, Active):
            raise RuntimeError(f"Unexpected state {state.kind}")
        logger.info("Game %s interrupted", state.game_id)
        return self._terminate(state, TerminationReason.EXIT)

    def _terminate(self, state: Active, reason: TerminationReason) -> Terminated:
        terminated = Terminated(
            reason=reason, attempts=state.attempts, game_id=state.game_id
        )
        self.state = terminated
        logger.info(
            "Game %s ended: %s after %d attempt(s)",
            state.game_id,
            reason,
            state.attempts,
        )
        return terminated

    async def _teardown(self, game_id: str) -> CleanupStatus:
        self._console.show()
        self._console.show("Thanks for playing!")
        try:
            await self._client.delete_session(game_id)
        except MastermindError as e:
            logger.warning("Failed to delete game %s: %s", game_id, e)
            self._console.warn("Warning: Failed to clean up game session")
            return CleanupStatus.FAILED
        self._console.show("Game session cleaned up.")
        return CleanupStatus.DELETED

    def _show_banner(self) -> None:
        show = self._console.show
        show("Welcome to Mastermind!")
        show(
            f"Guess the {CODE_LENGTH}-digit secret code. "
            f"Each digit should be between {MIN_DIGIT}-{MAX_DIGIT}."
        )
        show("After each guess, you'll receive:")
        show("B (Black): Correct digit in correct position")
        show("W (White): Correct digit in wrong position")
        show(f"Type '{self.exit_keyword}' at any time to quit the game.")
        show()

    def _show_result(self, guess: str, score: ScoreResult) -> None:
        self._console.show()
        self._console.show(f"Your guess: {guess}")
        self._console.show(f"Result: {format_feedback(score)}")
        for line in describe_score(score):
            self._console.show(line)
