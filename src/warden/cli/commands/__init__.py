"""Command registration utilities for the Warden CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from warden.cli.commands import demo


def register_commands(app: typer.Typer, console: Console, diagnostics: Console) -> None:
    """Attach command groups to the provided Typer application."""

    demo.register(app, console, diagnostics)

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        """Resource lifecycle demonstrations."""

        if ctx.invoked_subcommand is None:
            console.print("[bold green]Warden CLI ready. Try `warden demo`.[/bold green]")


__all__ = ["register_commands"]
