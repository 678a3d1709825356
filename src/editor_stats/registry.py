from __future__ import annotations

import itertools
import logging
from typing import Callable, Dict, Iterator, List

from .models import EMPTY_SNAPSHOT, Document, DocumentId, StatisticsSnapshot
from .textstats import compute_statistics

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_NAME = "New File"

StatisticsListener = Callable[[StatisticsSnapshot], None]


class DocumentRegistry:
    """
    Owns the open documents and tracks which one is active.

    Documents are keyed by ids issued from a counter at creation time, so
    closing or reordering documents never changes another document's id.
    Whenever the active text changes (an edit to the active document, a new
    active document, or the active document being closed) the registry
    recomputes the statistics and pushes the snapshot to every listener.
    Operations on ids the registry does not know are ignored.
    """

    def __init__(self, default_name: str = DEFAULT_DOCUMENT_NAME) -> None:
        self._default_name = default_name
        self._documents: Dict[DocumentId, Document] = {}
        self._ids = itertools.count(1)
        self._active_id: DocumentId | None = None
        self._listeners: List[StatisticsListener] = []
        self._snapshot: StatisticsSnapshot = EMPTY_SNAPSHOT

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return self._lookup(doc_id) is not None

    @property
    def active_id(self) -> DocumentId | None:
        return self._active_id

    @property
    def active_document(self) -> Document | None:
        if self._active_id is None:
            return None
        return self._documents.get(self._active_id)

    @property
    def snapshot(self) -> StatisticsSnapshot:
        """The most recently published statistics."""
        return self._snapshot

    def documents(self) -> Iterator[Document]:
        """Iterate over open documents in creation order."""
        return iter(list(self._documents.values()))

    def get_document(self, doc_id: DocumentId) -> Document | None:
        return self._lookup(doc_id)

    def subscribe(self, listener: StatisticsListener) -> Callable[[], None]:
        """Register a listener for snapshots; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: StatisticsListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def create_document(
        self, initial_text: str = "", name: str | None = None
    ) -> DocumentId:
        """Add a document, make it active and publish its statistics."""
        doc_id = next(self._ids)
        document = Document(
            doc_id=doc_id,
            name=name if name is not None else self._default_name,
            text=initial_text,
        )
        self._documents[doc_id] = document
        logger.info("Created document %s (%s)", doc_id, document.name)
        self._active_id = doc_id
        self._publish(document.text)
        return doc_id

    def close_document(self, doc_id: DocumentId) -> None:
        """Remove a document; closing the active one publishes empty statistics."""
        document = self._lookup(doc_id)
        if document is None:
            logger.debug("Ignoring close of unknown document %s", doc_id)
            return
        logger.info("Closed document %s (%s)", doc_id, document.name)
        del self._documents[doc_id]
        if self._active_id == doc_id:
            self._active_id = None
            self._publish("")

    def set_active(self, doc_id: DocumentId | None) -> None:
        """Make doc_id the active document (None clears it) and publish."""
        if doc_id is not None and self._lookup(doc_id) is None:
            logger.debug("Ignoring activation of unknown document %s", doc_id)
            return
        self._active_id = doc_id
        self._publish(self.get_active_text())

    def update_text(self, doc_id: DocumentId, text: str) -> None:
        """Replace a document's text; only edits to the active document publish."""
        document = self._lookup(doc_id)
        if document is None:
            logger.debug("Ignoring edit of unknown document %s", doc_id)
            return
        document.text = text
        if doc_id == self._active_id:
            self._publish(text)

    def rename_document(self, doc_id: DocumentId, name: str) -> None:
        document = self._lookup(doc_id)
        if document is None:
            logger.debug("Ignoring rename of unknown document %s", doc_id)
            return
        document.name = name

    def get_active_text(self) -> str:
        document = self.active_document
        return document.text if document is not None else ""

    def _lookup(self, doc_id: object) -> Document | None:
        # bool is an int subclass; True must not resolve to document 1.
        if isinstance(doc_id, bool):
            return None
        return self._documents.get(doc_id)  # type: ignore[arg-type]

    def _publish(self, text: str) -> None:
        self._snapshot = compute_statistics(text)
        logger.debug(
            "Publishing statistics for document %s: %s",
            self._active_id,
            self._snapshot,
        )
        for listener in list(self._listeners):
            listener(self._snapshot)
