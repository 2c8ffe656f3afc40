"""Command-line interface for the NWS rounding engine."""

from nws_rounding.cli.commands import main

__all__ = ["main"]
