"""
editor_stats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EditorStatsConfig, config_from_dict, config_from_yaml, load_config
from .models import EMPTY_SNAPSHOT, Document, DocumentId, StatisticsSnapshot
from .registry import DocumentRegistry
from .session import EditorSession
from .textstats import (
    compute_statistics,
    count_paragraphs,
    count_sentences,
    count_words,
    most_common_word,
)

__all__ = [
    "EditorStatsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Document",
    "DocumentId",
    "StatisticsSnapshot",
    "EMPTY_SNAPSHOT",
    "DocumentRegistry",
    "EditorSession",
    "compute_statistics",
    "count_words",
    "count_sentences",
    "count_paragraphs",
    "most_common_word",
]

__version__ = "0.1.0"
