"""Wire and state models for the Mastermind client.

Wire models mirror the server's JSON payloads. State models describe the
session lifecycle as a tagged union::

    Uninitialized -> Active -> Terminated

``Active`` always carries a game id and ``Uninitialized`` never does, so
code that deletes a session can only obtain an id from an ``Active`` state.
"""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CODE_LENGTH = 4
"""Number of digits in a secret code and in every guess."""

MIN_DIGIT = 1
MAX_DIGIT = 6


# =============================================================================
# WIRE MODELS
# =============================================================================


class CreateGameResponse(BaseModel):
    """Body of a successful ``POST /game``."""

    game_id: str = Field(min_length=1, description="Server-issued session id")


class GuessRequest(BaseModel):
    """Body of ``POST /guess``."""

    game_id: str
    guess: str


class ScoreResult(BaseModel):
    """Body of a successful ``POST /guess``.

    ``black + white <= CODE_LENGTH`` is the server's guarantee and is not
    re-checked here.
    """

    model_config = ConfigDict(frozen=True)

    black: int = Field(ge=0, description="Right digit, right position")
    white: int = Field(ge=0, description="Right digit, wrong position")

    @property
    def solved(self) -> bool:
        return self.black == CODE_LENGTH


class ErrorResponse(BaseModel):
    """Body the server sends with any non-success status."""

    error: str


# =============================================================================
# SESSION STATE
# =============================================================================


class TerminationReason(StrEnum):
    EXIT = "exit"
    WIN = "win"
    EXHAUSTED = "exhausted"
    STARTUP_FAILED = "startup_failed"


class CleanupStatus(StrEnum):
    NOT_NEEDED = "not_needed"
    DELETED = "deleted"
    FAILED = "failed"


class Uninitialized(BaseModel):
    """No session has been created yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["uninitialized"] = "uninitialized"


class Active(BaseModel):
    """A server session exists and the player is guessing."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["active"] = "active"
    game_id: str = Field(min_length=1)
    attempts: int = Field(default=0, ge=0)


class Terminated(BaseModel):
    """The game is over; nothing transitions out of this state."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["terminated"] = "terminated"
    reason: TerminationReason
    attempts: int = Field(default=0, ge=0)
    game_id: str | None = None


type SessionState = Uninitialized | Active | Terminated


class TurnRecord(BaseModel):
    """A guess the server scored."""

    attempt: int
    guess: str
    score: ScoreResult


class GameOutcome(BaseModel):
    """Summary of a finished game session."""

    reason: TerminationReason
    attempts: int
    game_id: str | None = None
    turns: list[TurnRecord] = Field(default_factory=list)
    cleanup: CleanupStatus = CleanupStatus.NOT_NEEDED
    error: str | None = Field(default=None, description="Startup failure message")
