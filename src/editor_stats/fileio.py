from __future__ import annotations

from pathlib import Path


class DocumentIOError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Return the full decoded contents of path."""
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise DocumentIOError(f"File not found: {path}") from exc
    except UnicodeError as exc:
        raise DocumentIOError(f"Unable to decode {path} as {encoding}") from exc
    except OSError as exc:
        raise DocumentIOError(f"Unable to read {path}: {exc}") from exc


def write_text_file(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write text to path, replacing any existing contents."""
    try:
        path.write_text(text, encoding=encoding)
    except UnicodeError as exc:
        raise DocumentIOError(f"Unable to encode text for {path} as {encoding}") from exc
    except OSError as exc:
        raise DocumentIOError(f"Unable to write {path}: {exc}") from exc
