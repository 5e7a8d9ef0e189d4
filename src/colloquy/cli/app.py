# src/colloquy/cli/app.py
"""Command-line interface for Colloquy.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install colloquy-rag[cli]"
    ) from e

from colloquy import __version__
from colloquy.commands import ask, cases, chat, prepare
from colloquy.commands.base import IngestSummary
from colloquy.session import ConsoleOutputChannel

app = typer.Typer(
    name="colloquy",
    help="Colloquy - a retrieval-grounded persona that answers from your knowledge base.",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich. Safe to call more than once."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    # LiteLLM is chatty at INFO
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"colloquy {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show informational log messages.",
    ),
) -> None:
    """Colloquy - retrieval-grounded persona conversations."""
    configure_logging(verbose)


def _print_ingest(summary: IngestSummary, plain: bool) -> None:
    for source_id, message in summary.failures:
        if plain:
            console.print(f"Skipped {source_id}: {message}")
        else:
            console.print(f"[yellow]Skipped {escape(source_id)}:[/yellow] {escape(message)}")


@app.command(name="ask")
def ask_cmd(
    question: str = typer.Argument(..., help="Question to ask"),
    documents: list[str] = typer.Option(
        None,
        "--doc",
        "-d",
        help="Extra document to ingest (repeatable)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    no_builtin: bool = typer.Option(
        False,
        "--no-builtin",
        help="Do not load the built-in operations knowledge",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Answer one question from the knowledge base."""
    result = ask.ask(
        question=question,
        documents=documents or [],
        config_path=config_file,
        builtin=False if no_builtin else None,
    )

    if not result.success:
        console.print(f"[red]Error: {escape(result.error or 'unknown error')}[/red]")
        raise typer.Exit(1)

    _print_ingest(result.ingest, plain)

    if plain:
        console.print(f"Answer: {result.answer}")
        console.print(f"Source: {result.source_id} (confidence: {result.confidence})")
        return

    border = "green" if result.confidence > 0 else "yellow"
    console.print(Panel(escape(result.answer), title="Answer", border_style=border))
    console.print(
        f"[bold]Source:[/bold] [cyan]{escape(result.source_id)}[/cyan] "
        f"[dim](confidence: {result.confidence})[/dim]"
    )


async def _console_inputs(prompt: str) -> AsyncIterator[str]:
    while True:
        try:
            line = await asyncio.to_thread(console.input, prompt)
        except (EOFError, KeyboardInterrupt):
            return
        yield line


@app.command(name="chat")
def chat_cmd(
    voice: bool = typer.Option(
        False,
        "--voice",
        help="Open with the persona greeting, as a voice session would",
    ),
    starter: bool = typer.Option(
        False,
        "--starter",
        help="With --voice, open with a random conversation starter",
    ),
    documents: list[str] = typer.Option(
        None,
        "--doc",
        "-d",
        help="Extra document to ingest (repeatable)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    no_builtin: bool = typer.Option(
        False,
        "--no-builtin",
        help="Do not load the built-in operations knowledge",
    ),
) -> None:
    """Talk with the persona. Type 'exit' or press Ctrl-D to leave."""
    prepared = prepare.prepare(
        documents=documents or [],
        config_path=config_file,
        builtin=False if no_builtin else None,
    )
    if not prepared.success or prepared.colloquy is None:
        console.print(f"[red]Error: {escape(prepared.error or 'unknown error')}[/red]")
        raise typer.Exit(1)

    for warning in prepared.warnings:
        console.print(f"[yellow]{escape(warning)}[/yellow]")
    _print_ingest(prepared.ingest, plain=False)
    console.print(
        f"[dim]{prepared.ingest.chunks} chunks indexed. Type 'exit' to leave.[/dim]"
    )

    colloquy = prepared.colloquy
    output = ConsoleOutputChannel(console, speaker=colloquy.persona.name)
    result = asyncio.run(
        chat.chat(
            colloquy,
            output,
            _console_inputs("[bold]You:[/bold] "),
            voice=voice,
            starter=starter,
        )
    )
    console.print(f"[dim]{result.turns} turns.[/dim]")


@app.command(name="cases")
def cases_cmd(
    name: str = typer.Argument(None, help="Filter by client name"),
    stalled: bool = typer.Option(
        False,
        "--stalled",
        "-s",
        help="Only cases past the SLA threshold",
    ),
    threshold: int = typer.Option(
        24,
        "--threshold",
        help="SLA threshold in hours for --stalled",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """List client onboarding cases."""
    result = cases.cases(name=name, stalled=stalled, threshold_hours=threshold)

    if not result.cases:
        console.print("No matching cases." if plain else "[yellow]No matching cases.[/yellow]")
        raise typer.Exit(0)

    if plain:
        for case in result.cases:
            console.print(
                f"{case.name} | {case.status} | {case.pending_step} | "
                f"{case.responsible_person} | {case.sla_hours}h"
            )
        return

    title = "Client cases"
    if result.threshold_hours is not None:
        title = f"Cases pending over {result.threshold_hours}h"
    table = Table(title=title)
    table.add_column("Client", style="cyan")
    table.add_column("Advisor")
    table.add_column("Status")
    table.add_column("Pending step")
    table.add_column("With")
    table.add_column("SLA (h)", justify="right")
    table.add_column("Notes", style="dim")
    for case in result.cases:
        table.add_row(
            case.name,
            case.advisor,
            case.status,
            case.pending_step,
            case.responsible_person,
            str(case.sla_hours),
            case.notes,
        )
    console.print(table)


if __name__ == "__main__":
    app()
