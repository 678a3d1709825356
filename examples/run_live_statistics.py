"""Minimal example showing how an editor window wires itself to a session."""

from __future__ import annotations

from editor_stats import EditorSession, StatisticsSnapshot
from editor_stats.textstats import format_most_common_word, format_status_labels


def render(snapshot: StatisticsSnapshot) -> None:
    print("  ".join(format_status_labels(snapshot)))
    print(format_most_common_word(snapshot))
    print("-" * 40)


def main() -> None:
    session = EditorSession()
    session.subscribe(render)

    draft = session.new_document()
    session.on_edit("The cat sat on the mat. It was raining outside.")
    session.on_edit("The cat sat on the mat. It was raining outside.\n\nThe end.")

    notes = session.on_document_created("todo: buy milk", name="notes.txt")
    session.on_active_changed(draft)
    session.on_document_closed(notes)
    session.on_document_closed(draft)


if __name__ == "__main__":
    main()
