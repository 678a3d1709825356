from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import EditorStatsConfig, load_config
from .fileio import DocumentIOError
from .models import StatisticsSnapshot
from .replay import ReplayScriptError, load_events, run_events
from .session import EditorSession
from .status import status_group

app = typer.Typer(help="Editor statistics CLI.", no_args_is_help=True)


class StatisticsPayload(TypedDict):
    word_count: int
    sentence_count: int
    paragraph_count: int
    most_common_word: str


class DocumentSummary(TypedDict):
    doc_id: int
    name: str
    statistics: StatisticsPayload


class PublishedSnapshot(TypedDict):
    active_id: int | None
    active_name: str | None
    statistics: StatisticsPayload


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (overrides config log_level)."
    ),
) -> None:
    """Compute live text statistics for editor documents."""
    ctx.obj = {"log_level": log_level}


@app.command()
def analyze(
    ctx: typer.Context,
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Open each input file as a document and emit its statistics as JSON."""
    cfg = _load_cli_config(config)
    _configure_logging(ctx, cfg)
    session = EditorSession(cfg)
    for path in _collect_input_files(input_path, cfg):
        try:
            doc_id = session.open_file(path)
        except DocumentIOError as exc:
            raise typer.BadParameter(str(exc)) from exc
        # Name directory inputs by relative path so nested files stay distinct.
        if input_path.is_dir():
            session.registry.rename_document(doc_id, str(path.relative_to(input_path)))

    summary: List[DocumentSummary] = []
    for document in session.registry.documents():
        session.on_active_changed(document.doc_id)
        summary.append(
            {
                "doc_id": document.doc_id,
                "name": document.name,
                "statistics": _statistics_dict(session.snapshot),
            }
        )
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def replay(
    ctx: typer.Context,
    script: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Run a YAML event script and print every published snapshot as JSON."""
    cfg = _load_cli_config(config)
    _configure_logging(ctx, cfg)
    try:
        events = load_events(script)
    except ReplayScriptError as exc:
        raise typer.BadParameter(str(exc)) from exc

    session = EditorSession(cfg)

    def emit(snapshot: StatisticsSnapshot) -> None:
        active = session.registry.active_document
        payload: PublishedSnapshot = {
            "active_id": active.doc_id if active else None,
            "active_name": active.name if active else None,
            "statistics": _statistics_dict(snapshot),
        }
        typer.echo(json.dumps(payload))

    session.subscribe(emit)
    try:
        run_events(session, events)
    except DocumentIOError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EditorStatsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    command = typer.main.get_command(app)
    command.add_command(status_group)  # type: ignore[attr-defined]
    command()


def _load_cli_config(path: Path | None) -> EditorStatsConfig:
    try:
        return load_config(path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--config'") from exc


def _configure_logging(ctx: typer.Context, config: EditorStatsConfig) -> None:
    """Configure the root logger from --log-level, falling back to the config."""
    level = (ctx.obj or {}).get("log_level") or config.log_level
    # getLevelName maps known names to ints and unknown ones to "Level X".
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise typer.BadParameter(
            f"Unknown log level '{level}'.", param_hint="'--log-level'"
        )
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _collect_input_files(input_path: Path, config: EditorStatsConfig) -> List[Path]:
    """Expand the input path into the files to open, in a stable order."""
    if input_path.is_file():
        return [input_path]
    extensions = {ext.lower() for ext in config.input_extensions}
    return sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in extensions
    )


def _statistics_dict(snapshot: StatisticsSnapshot) -> StatisticsPayload:
    return {
        "word_count": snapshot.word_count,
        "sentence_count": snapshot.sentence_count,
        "paragraph_count": snapshot.paragraph_count,
        "most_common_word": snapshot.most_common_word,
    }


if __name__ == "__main__":
    main()
