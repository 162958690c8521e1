"""Command-line interface package for Warden."""

from warden.cli.main import CLIApplication, create_app, main

__all__ = ["CLIApplication", "create_app", "main"]
