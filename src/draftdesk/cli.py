"""CLI entrypoints for DraftDesk."""

from __future__ import annotations

from pathlib import Path

import typer

from draftdesk.config import load_settings
from draftdesk.engine.session import SessionProvider, default_session_factory
from draftdesk.errors import EngineError
from draftdesk.logging import configure_logging, get_logger, log_exception
from draftdesk.render.outline import derive_outline

app = typer.Typer(add_completion=False, help="DraftDesk academic drafting CLI")
logger = get_logger(__name__)


@app.command()
def draft(
    topic: str = typer.Argument(..., help="Research topic for the first (genesis) turn."),
    revise: list[str] = typer.Option(
        [],
        "--revise",
        "-r",
        help="Revision instruction applied after the first draft. Repeat for several turns.",
    ),
    output: Path = typer.Option(Path("document.md"), "--output", "-o", help="Output markdown file"),
) -> None:
    """Draft a document from a topic, apply revisions in order and write the markdown."""

    settings = load_settings()
    configure_logging(settings.log_level)

    provider = SessionProvider(default_session_factory(settings))
    try:
        session = provider.ensure()
        document = session.send(topic)
        for instruction in revise:
            document = session.send(instruction)
    except EngineError:
        log_exception(logger, "Drafting failed", turns=len(revise) + 1)
        typer.echo(settings.error_message, err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document.content, encoding="utf-8")
    typer.echo(str(output))


@app.command()
def outline(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Markdown file"),
) -> None:
    """Print the heading outline of a markdown file."""

    for entry in derive_outline(path.read_text(encoding="utf-8")):
        typer.echo(f"{'  ' * (entry.level - 1)}{entry.text}  [{entry.id}]")


if __name__ == "__main__":
    app()
