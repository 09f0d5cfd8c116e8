"""Command-line interface for reactgen."""

from reactgen.cli.app import app

__all__ = ["app"]
