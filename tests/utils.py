from __future__ import annotations

from pathlib import Path


def write_sample_corpus(root: Path) -> Path:
    """Create a small directory of text files (plus one file that is skipped)."""
    corpus_dir = root / "corpus"
    (corpus_dir / "drafts").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "Hello world. Bye.\n\nNext para here.", encoding="utf-8"
    )
    (corpus_dir / "drafts" / "notes.md").write_text(
        "todo todo done", encoding="utf-8"
    )
    (corpus_dir / "image.png").write_bytes(b"\x89PNG\r\n")
    return corpus_dir


def write_event_script(path: Path, events: str) -> Path:
    """Write a YAML event script whose events block is given as YAML text."""
    path.write_text("events:\n" + events, encoding="utf-8")
    return path
