"""Command line interface for npmrc."""

from npmrc.cli.app import app

__all__ = ["app"]
