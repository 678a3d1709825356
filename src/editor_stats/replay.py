"""
Drive an EditorSession from a YAML script of user input events.

A script is a mapping with an ``events`` list; every event names an
``action`` and the fields that action needs::

    events:
      - action: create
        text: "Hello world."
        name: notes.txt
      - action: edit
        text: "Hello again."
      - action: select
        document: 1
      - action: close
        document: 1
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, cast

import yaml

from .session import EditorSession

ACTIONS = {
    "create",
    "edit",
    "update",
    "select",
    "close",
    "close-active",
    "open",
    "save",
}

# Fields each action must carry; "select" accepts a null document.
_REQUIRED_FIELDS: Dict[str, tuple[str, ...]] = {
    "edit": ("text",),
    "update": ("document", "text"),
    "select": ("document",),
    "close": ("document",),
    "open": ("path",),
    "save": ("path",),
}


class ReplayScriptError(ValueError):
    """Raised when an event script is malformed."""


@dataclass(slots=True)
class SessionEvent:
    """One user input event from a replay script."""

    action: str
    document: int | None = None
    text: str = ""
    name: str | None = None
    path: Path | None = None


def load_events(path: str | Path) -> List[SessionEvent]:
    """Parse and validate the events of a YAML script."""
    script_path = Path(path)
    try:
        parsed = yaml.safe_load(script_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ReplayScriptError(f"Invalid YAML in {script_path}: {exc}") from exc
    if not isinstance(parsed, Mapping) or not isinstance(parsed.get("events"), list):
        raise ReplayScriptError("Event script must define an 'events' list.")
    return [
        _parse_event(raw, index, script_path.parent)
        for index, raw in enumerate(parsed["events"])
    ]


def run_events(session: EditorSession, events: List[SessionEvent]) -> None:
    """Apply events to session in order."""
    for event in events:
        _apply(session, event)


def _parse_event(raw: Any, index: int, base_dir: Path) -> SessionEvent:
    if not isinstance(raw, Mapping):
        raise ReplayScriptError(f"Event {index} must be a mapping.")
    action = str(raw.get("action", "")).strip().lower()
    if action not in ACTIONS:
        raise ReplayScriptError(f"Event {index} has unknown action '{action}'.")
    for key in _REQUIRED_FIELDS.get(action, ()):
        if key not in raw:
            raise ReplayScriptError(f"Event {index} ({action}) is missing '{key}'.")

    document = raw.get("document")
    if document is not None and (
        isinstance(document, bool) or not isinstance(document, int)
    ):
        raise ReplayScriptError(f"Event {index} document must be an integer id.")
    if document is None and action in {"update", "close"}:
        raise ReplayScriptError(f"Event {index} ({action}) needs a document id.")

    text = raw.get("text", "")
    if text is None:
        text = ""
    path = None
    if "path" in raw:
        path = Path(str(raw["path"]))
        if not path.is_absolute():
            path = base_dir / path
    name = raw.get("name")
    return SessionEvent(
        action=action,
        document=document,
        text=str(text),
        name=str(name) if name is not None else None,
        path=path,
    )


def _apply(session: EditorSession, event: SessionEvent) -> None:
    if event.action == "create":
        session.on_document_created(event.text, name=event.name)
    elif event.action == "edit":
        session.on_edit(event.text)
    elif event.action == "update":
        session.registry.update_text(cast(int, event.document), event.text)
    elif event.action == "select":
        session.on_active_changed(event.document)
    elif event.action == "close":
        session.on_document_closed(cast(int, event.document))
    elif event.action == "close-active":
        session.close_active()
    elif event.action == "open":
        session.open_file(cast(Path, event.path))
    elif event.action == "save":
        session.save_active(cast(Path, event.path))
