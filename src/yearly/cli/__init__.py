"""Command line front-ends."""

from yearly.cli.daysto import main

__all__ = ["main"]
