from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DocumentId = int


@dataclass(slots=True)
class Document:
    """An open, editable text buffer owned by the registry."""

    doc_id: DocumentId
    name: str
    text: str = ""


@dataclass(frozen=True, slots=True)
class StatisticsSnapshot:
    """Word, sentence and paragraph counts plus the most common word of a text."""

    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    most_common_word: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "paragraph_count": self.paragraph_count,
            "most_common_word": self.most_common_word,
        }


EMPTY_SNAPSHOT = StatisticsSnapshot()
