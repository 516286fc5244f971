"""Guess validation and feedback rendering.

Examples:
    >>> parse_guess(" 1234 ")
    '1234'
    >>> parse_guess("1267")
    Traceback (most recent call last):
    ...
    mastermind.game.errors.ValidationError: Invalid input! ...
    >>> format_feedback(ScoreResult(black=1, white=2))
    'BWW'
    >>> format_feedback(ScoreResult(black=0, white=0))
    'No matches'
"""

from mastermind.game.errors import ValidationError
from mastermind.game.models import CODE_LENGTH, MAX_DIGIT, MIN_DIGIT, ScoreResult

BLACK_MARKER = "B"
WHITE_MARKER = "W"
NO_MATCH = "No matches"

ALLOWED_DIGITS = frozenset(str(d) for d in range(MIN_DIGIT, MAX_DIGIT + 1))

INVALID_GUESS_MESSAGE = (
    f"Invalid input! Please enter exactly {CODE_LENGTH} digits, "
    f"each between {MIN_DIGIT}-{MAX_DIGIT}."
)


def parse_guess(text: str) -> str:
    """Validate player input as a guess.

    The input is trimmed, then must be exactly CODE_LENGTH characters, each
    an ASCII digit in [MIN_DIGIT, MAX_DIGIT]. Anything else rejects the whole
    input.

    Raises:
        ValidationError: If the input is not a well-formed guess.
    """
    guess = text.strip()
    if len(guess) != CODE_LENGTH or not set(guess) <= ALLOWED_DIGITS:
        raise ValidationError(INVALID_GUESS_MESSAGE)
    return guess


def is_exit_command(text: str, keyword: str = "exit") -> bool:
    return text.strip().casefold() == keyword.casefold()


def format_feedback(score: ScoreResult) -> str:
    """Render pegs as black markers followed by white markers."""
    feedback = BLACK_MARKER * score.black + WHITE_MARKER * score.white
    return feedback or NO_MATCH


def describe_score(score: ScoreResult) -> list[str]:
    """Spell out a score as human-readable lines."""
    lines: list[str] = []
    if score.black > 0:
        lines.append(f"{score.black} correct digit(s) in correct position")
    if score.white > 0:
        lines.append(f"{score.white} correct digit(s) in wrong position")
    if score.black + score.white == 0:
        lines.append("No correct digits found")
    return lines
