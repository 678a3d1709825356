from __future__ import annotations

import json
from pathlib import Path

import click

from .config import load_config
from .fileio import DocumentIOError
from .session import EditorSession
from .textstats import format_most_common_word, format_status_labels


@click.group(name="status")
def status_group() -> None:
    """Status bar views of document statistics."""


@status_group.command("text")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
@click.option("--json-output", type=click.Path(), default=None)
def status_text(input_file: str, config_path: str | None, json_output: str | None) -> None:
    """Print the status bar labels and most common word for a text file."""
    path = Path(input_file)
    try:
        config = load_config(config_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--config'") from exc
    session = EditorSession(config)
    try:
        doc_id = session.open_file(path)
    except DocumentIOError as exc:
        raise click.BadParameter(str(exc), param_hint="INPUT_FILE") from exc
    snapshot = session.snapshot

    click.echo(f"File: {input_file}")
    for label in format_status_labels(snapshot):
        click.echo(label)
    click.echo(format_most_common_word(snapshot))

    if json_output is not None:
        document = session.registry.get_document(doc_id)
        payload = {
            "file": str(path),
            "name": document.name if document else path.name,
            "statistics": snapshot.to_dict(),
        }
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        click.echo(f"Wrote detailed JSON to {json_output}")
