"""Command-line entry point for the Mastermind client.

Usage:
    uv run mastermind
    uv run python -m mastermind.cli
"""
