"""Reusable helpers for the Mastermind client.

Modules:
- console: Line-input / text-output abstraction (GameConsole, RichConsole)
- retry: Retry decorator for transport calls
"""

from mastermind.lib.console import GameConsole, RichConsole
from mastermind.lib.retry import with_retry

__all__ = [
    # Console
    "GameConsole",
    "RichConsole",
    # Retry
    "with_retry",
]
