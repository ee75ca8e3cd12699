"""CLI entry: chunk one document or export a directory of documents as chunk records."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from chunking_engine.config.chunking.models import ChunkingConfig
from chunking_engine.config.chunking.static import resolve_chunking_config
from chunking_engine.config.logging import configure_logging, get_logger
from chunking_engine.config.settings import get_settings
from chunking_engine.services.chunking.chunker import chunk_document, dump_records, export_directory
from chunking_engine.services.chunking.errors import ChunkerConfigError

logger = get_logger(__name__)

console = Console(stderr=True)

app = typer.Typer(
    name="chunking-engine",
    help="Split documents into overlapping chunks for embedding pipelines",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level)
    settings = get_settings()
    logger.debug("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})


def _resolve_config(profile: Optional[str], size: Optional[int], overlap: Optional[int]) -> ChunkingConfig:
    """Profile from the option or settings; only size/overlap can be overridden inline."""
    overrides = {}
    if size is not None:
        overrides["size"] = size
    if overlap is not None:
        overrides["overlap"] = overlap
    profile_name = profile or get_settings().chunking_profile
    try:
        return resolve_chunking_config(profile_name, overrides or None)
    except ChunkerConfigError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(2)


def _resolve_format(fmt: Optional[str]) -> str:
    value = fmt or get_settings().output_format
    if value not in ("json", "jsonl"):
        console.print(f"[red]Unknown format:[/red] {value!r} (expected json or jsonl)")
        raise typer.Exit(2)
    return value


@app.command("chunk")
def chunk_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Document to chunk"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Chunking profile from static.json"),
    size: Optional[int] = typer.Option(None, "--size", help="Override chunk size"),
    overlap: Optional[int] = typer.Option(None, "--overlap", help="Override chunk overlap"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="json or jsonl"),
) -> None:
    """Chunk a single document and print its records."""
    config = _resolve_config(profile, size, overlap)
    output_format = _resolve_format(fmt)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        console.print(f"[red]Cannot decode {path}:[/red] {e}")
        raise typer.Exit(1)
    try:
        records = chunk_document(content, path.name, config, tokenizer=get_settings().tokenizer)
    except ChunkerConfigError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(2)
    typer.echo(dump_records(records, output_format), nl=output_format == "json")


@app.command("export")
def export_command(
    directory: Path = typer.Argument(..., exists=True, file_okay=False, help="Directory of documents"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", file_okay=False, help="Where to write chunk files"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Chunking profile from static.json"),
    size: Optional[int] = typer.Option(None, "--size", help="Override chunk size"),
    overlap: Optional[int] = typer.Option(None, "--overlap", help="Override chunk overlap"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="json or jsonl"),
) -> None:
    """Chunk every file under DIRECTORY, optionally writing one chunk file per document."""
    config = _resolve_config(profile, size, overlap)
    output_format = _resolve_format(fmt)
    try:
        summary = export_directory(
            directory, config, out=out, fmt=output_format, tokenizer=get_settings().tokenizer
        )
    except ChunkerConfigError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(2)

    color = {"success": "green", "partial": "yellow", "failed": "red"}[summary.status]
    console.print(
        f"[{color}]{summary.status}[/{color}]: {summary.documents_chunked} chunked, "
        f"{summary.documents_failed} failed, {summary.total_chunks_created} chunks"
    )
    for output in summary.outputs:
        logger.debug("Wrote %s", output)
    if summary.status == "failed":
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
