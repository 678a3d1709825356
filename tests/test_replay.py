from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from editor_stats.models import StatisticsSnapshot
from editor_stats.replay import ReplayScriptError, load_events, run_events
from editor_stats.session import EditorSession
from tests.utils import write_event_script


def test_load_events_parses_actions(tmp_path: Path):
    script = write_event_script(
        tmp_path / "script.yaml",
        "  - action: create\n"
        "    text: Hello.\n"
        "    name: first.txt\n"
        "  - action: select\n"
        "    document: null\n"
        "  - action: open\n"
        "    path: notes.txt\n",
    )
    events = load_events(script)

    assert [event.action for event in events] == ["create", "select", "open"]
    assert events[0].name == "first.txt"
    assert events[1].document is None
    assert events[2].path == tmp_path / "notes.txt"


@pytest.mark.parametrize(
    "events",
    [
        "  - action: explode\n",
        "  - action: update\n    text: missing id\n",
        "  - action: close\n    document: first\n",
        "  - action: edit\n",
        "  - just a string\n",
    ],
)
def test_load_events_rejects_malformed_events(tmp_path: Path, events: str):
    script = write_event_script(tmp_path / "bad.yaml", events)

    with pytest.raises(ReplayScriptError):
        load_events(script)


def test_load_events_requires_events_list(tmp_path: Path):
    script = tmp_path / "bad.yaml"
    script.write_text("steps: []\n", encoding="utf-8")

    with pytest.raises(ReplayScriptError):
        load_events(script)


def test_run_events_drives_session(tmp_path: Path):
    """Background updates stay silent while selection changes republish."""
    (tmp_path / "notes.txt").write_text("alpha alpha beta", encoding="utf-8")
    script = write_event_script(
        tmp_path / "script.yaml",
        "  - action: create\n"
        "    text: One. Two.\n"
        "  - action: open\n"
        "    path: notes.txt\n"
        "  - action: update\n"
        "    document: 1\n"
        "    text: One. Two. Three.\n"
        "  - action: select\n"
        "    document: 1\n"
        "  - action: edit\n"
        "    text: Changed\n"
        "  - action: save\n"
        "    path: saved.txt\n"
        "  - action: close-active\n",
    )
    session = EditorSession()
    published: List[StatisticsSnapshot] = []
    session.subscribe(published.append)

    run_events(session, load_events(script))

    assert [snapshot.word_count for snapshot in published] == [2, 3, 3, 1, 0]
    assert published[1].most_common_word == "alpha"
    assert published[2].sentence_count == 3
    assert (tmp_path / "saved.txt").read_text(encoding="utf-8") == "Changed"
    assert session.registry.get_document(1) is None
    assert session.registry.get_document(2).name == "notes.txt"
