"""Game session code for the Mastermind client.

This subpackage contains everything that talks to the game server or
decides how a game proceeds:
- client.py: HTTP session client and connect() helper
- session.py: Session lifecycle state machine
- guess.py: Guess validation and feedback rendering
- models.py: Wire and state models
- errors.py: Error hierarchy
- config.py: Configuration via pydantic-settings
"""
