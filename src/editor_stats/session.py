from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import EditorStatsConfig
from .fileio import read_text_file, write_text_file
from .models import DocumentId, StatisticsSnapshot
from .registry import DocumentRegistry, StatisticsListener

logger = logging.getLogger(__name__)


class EditorSession:
    """Entry points the editor window calls on user input events."""

    def __init__(
        self,
        config: EditorStatsConfig | None = None,
        registry: DocumentRegistry | None = None,
    ) -> None:
        self._config = config or EditorStatsConfig()
        self._registry = registry or DocumentRegistry(
            default_name=self._config.new_document_name
        )

    @property
    def config(self) -> EditorStatsConfig:
        return self._config

    @property
    def registry(self) -> DocumentRegistry:
        return self._registry

    @property
    def snapshot(self) -> StatisticsSnapshot:
        return self._registry.snapshot

    def subscribe(self, listener: StatisticsListener) -> Callable[[], None]:
        return self._registry.subscribe(listener)

    def on_edit(self, text: str) -> None:
        """Store new text for the focused editor."""
        active_id = self._registry.active_id
        if active_id is None:
            logger.debug("Ignoring edit with no active document")
            return
        self._registry.update_text(active_id, text)

    def on_document_created(
        self, initial_text: str = "", name: str | None = None
    ) -> DocumentId:
        return self._registry.create_document(initial_text, name=name)

    def on_document_closed(self, doc_id: DocumentId) -> None:
        self._registry.close_document(doc_id)

    def on_active_changed(self, doc_id: DocumentId | None) -> None:
        self._registry.set_active(doc_id)

    def new_document(self) -> DocumentId:
        """Open an empty document under the configured default name."""
        return self._registry.create_document("", name=self._config.new_document_name)

    def close_active(self) -> None:
        active_id = self._registry.active_id
        if active_id is not None:
            self._registry.close_document(active_id)

    def open_file(self, path: Path) -> DocumentId:
        """Read path and open its contents as the active document."""
        text = read_text_file(path, encoding=self._config.encoding)
        logger.info("Opened %s (%d chars)", path, len(text))
        return self._registry.create_document(text, name=path.name)

    def save_active(self, path: Path) -> None:
        """Write the active text to path and name the active document after it."""
        text = self._registry.get_active_text()
        write_text_file(path, text, encoding=self._config.encoding)
        logger.info("Saved %d chars to %s", len(text), path)
        active_id = self._registry.active_id
        if active_id is not None:
            self._registry.rename_document(active_id, path.name)
