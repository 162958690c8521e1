"""CLI entry point and application wiring."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from warden.cli.commands import register_commands
from warden.config.settings import get_settings


class CLIApplication:
    """Central orchestrator for the Warden Typer application."""

    def __init__(self, console: Optional[Console] = None, diagnostics: Optional[Console] = None) -> None:
        settings = get_settings()
        self.console = console or Console(no_color=settings.no_color)
        self.diagnostics = diagnostics or Console(stderr=True, no_color=settings.no_color)
        self._app = typer.Typer(add_completion=False, rich_markup_mode="rich")
        register_commands(self._app, self.console, self.diagnostics)

    @property
    def app(self) -> typer.Typer:
        """Return the underlying Typer application instance."""

        return self._app

    def run(self, *, prog_name: Optional[str] = None, args: Optional[list[str]] = None) -> None:
        """Invoke the Typer application with optional overrides."""

        self._app(prog_name=prog_name, args=args)


def create_app(console: Optional[Console] = None, diagnostics: Optional[Console] = None) -> typer.Typer:
    """Factory helper that returns the configured Typer application."""

    return CLIApplication(console=console, diagnostics=diagnostics).app


def main() -> None:
    """Console script entry point for `python -m warden` or installed CLI."""

    CLIApplication().run(prog_name="warden")


__all__ = ["CLIApplication", "create_app", "main"]
