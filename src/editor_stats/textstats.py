"""
Live text statistics for the editor status bar.

Every function here is a pure, single left-to-right scan over the text. The
sentence and paragraph counters are small state machines: non-empty text
starts at one, and a new unit is only counted when a letter shows up after a
recognized boundary, so trailing punctuation or blank lines never add a unit
on their own.
"""

from __future__ import annotations

from typing import Dict, List

from .models import EMPTY_SNAPSHOT, StatisticsSnapshot

SENTENCE_TERMINATORS = frozenset(".?!")


def count_words(text: str) -> int:
    """Return the number of whitespace-separated tokens in text."""
    return len(text.split())


def count_sentences(text: str) -> int:
    """Count sentences, opening a new one on the first letter after a terminator."""
    sentences = 1 if text else 0
    inside_word = False
    pending = False
    for ch in text:
        if ch in SENTENCE_TERMINATORS:
            if inside_word:
                pending = True
            inside_word = False
        elif ch.isalpha():
            inside_word = True
            if pending:
                sentences += 1
                pending = False
    return sentences


def count_paragraphs(text: str) -> int:
    """
    Count paragraphs separated by two consecutive newlines.

    A break only counts when letters were seen since the start or the
    previous break, and the new paragraph is opened by the next letter.
    """
    paragraphs = 1 if text else 0
    previous_newline = False
    inside_paragraph = False
    pending = False
    for ch in text:
        if ch == "\n":
            if previous_newline and inside_paragraph:
                pending = True
                previous_newline = False
                inside_paragraph = False
                continue
            previous_newline = True
        else:
            previous_newline = False
            if ch.isalpha():
                inside_paragraph = True
                if pending:
                    paragraphs += 1
                    pending = False
    return paragraphs


def most_common_word(text: str) -> str:
    """Return the first token to reach the highest occurrence count."""
    counts: Dict[str, int] = {}
    best_count = 0
    best_word = ""
    for word in text.split():
        counts[word] = counts.get(word, 0) + 1
        if counts[word] > best_count:
            best_count = counts[word]
            best_word = word
    return best_word


def compute_statistics(text: str) -> StatisticsSnapshot:
    """Build a StatisticsSnapshot for text."""
    if not text:
        return EMPTY_SNAPSHOT
    return StatisticsSnapshot(
        word_count=count_words(text),
        sentence_count=count_sentences(text),
        paragraph_count=count_paragraphs(text),
        most_common_word=most_common_word(text),
    )


def format_status_labels(snapshot: StatisticsSnapshot) -> List[str]:
    """Render the status bar labels for a snapshot."""
    return [
        f"Words: {snapshot.word_count}",
        f"Sentences: {snapshot.sentence_count}",
        f"Paragraphs: {snapshot.paragraph_count}",
    ]


def format_most_common_word(snapshot: StatisticsSnapshot) -> str:
    return f"Most common word:\n{snapshot.most_common_word}"
