"""Interactive command-line client for a remote Mastermind server.

The server owns the secret and the scoring. This package creates a game
session, collects and validates guesses, submits them, renders the scored
feedback and always releases the server-side session on the way out.

Structure:
- mastermind/game/: Game session code
  - client.py: HTTP session client (create, guess, delete)
  - session.py: Session lifecycle state machine
  - guess.py: Guess validation and feedback rendering
  - models.py: Wire and state models
  - errors.py: Error hierarchy
  - config.py: Configuration via pydantic-settings

- mastermind/lib/: Reusable helpers
  - console.py: Line-input / text-output console abstraction
  - retry.py: Retry decorator for transport calls

- mastermind/cli/: Typer entry point (``mastermind``)
"""
