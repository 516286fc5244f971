"""Line-oriented console used by the game session.

The session only needs two things from a terminal: read one line of input
and write a message. ``GameConsole`` captures that contract so the session
can be driven by a real terminal or by a scripted console in tests.

``RichConsole`` renders through a Rich console with markup and highlighting
disabled, so player input echoed back (guesses, server messages) is printed
verbatim. Message kinds are distinguished by style only.

Examples:
    Use the terminal console::

        >>> console = RichConsole()
        >>> console.show("Welcome to Mastermind!")
        Welcome to Mastermind!
        >>> line = console.read_line("Enter your guess: ")
"""

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from rich.console import Console


@contextmanager
def _interruptible_read() -> Iterator[None]:
    """Restore the default SIGINT handler around a blocking read.

    asyncio.run installs a handler that only cancels the main task, which a
    thread blocked in input() never observes until the line is entered.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        yield
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


class GameConsole(Protocol):
    """Abstract line input source and text sink."""

    def read_line(self, prompt: str) -> str | None:
        """Read one line of input, or None when input is exhausted.

        Ctrl-C while waiting for input raises KeyboardInterrupt.
        """
        ...

    def show(self, message: str = "") -> None:
        """Write an informational message."""
        ...

    def warn(self, message: str) -> None:
        """Write a warning that does not interrupt the game."""
        ...

    def error(self, message: str) -> None:
        """Write an error message."""
        ...


class RichConsole:
    """GameConsole backed by a Rich console on stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, markup=False)

    def read_line(self, prompt: str) -> str | None:
        with _interruptible_read():
            try:
                return self._console.input(prompt, markup=False)
            except EOFError:
                return None
            except KeyboardInterrupt:
                self._console.print()
                raise

    def show(self, message: str = "") -> None:
        self._console.print(message)

    def warn(self, message: str) -> None:
        self._console.print(message, style="yellow")

    def error(self, message: str) -> None:
        self._console.print(message, style="bold red")
