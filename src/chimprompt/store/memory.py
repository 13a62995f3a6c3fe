"""
Snippet Store
Persistence interface for finalized prompts, with an in-memory provider
"""

from abc import ABC, abstractmethod

from ..core.id import new_snippet_id
from ..core.logging_config import get_logger
from ..monitoring import metrics_collector
from .types import Snippet, SnippetDraft, SnippetKind, SnippetUpdate

logger = get_logger(__name__)


class SnippetStore(ABC):
    """
    Abstract store for saved snippets keyed by opaque identifiers.
    Input is validated by ``SnippetDraft``/``SnippetUpdate`` before it gets here.
    """

    @abstractmethod
    def create(self, draft: SnippetDraft) -> Snippet:
        """Store a new snippet"""

    @abstractmethod
    def get(self, snippet_id: str) -> Snippet | None:
        """Fetch a snippet by id"""

    @abstractmethod
    def update(self, snippet_id: str, changes: SnippetUpdate) -> Snippet | None:
        """
        Apply a partial update.

        Returns:
            Updated snippet, or None if not found
        """

    @abstractmethod
    def delete(self, snippet_id: str) -> bool:
        """
        Delete a snippet.

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    def list_by_visibility(
        self, is_public: bool, kind: SnippetKind | None = None
    ) -> list[Snippet]:
        """Snippets with the given visibility, oldest first"""


class InMemorySnippetStore(SnippetStore):
    """Process-local store; ids are k-sortable so insertion order is kept."""

    def __init__(self) -> None:
        self._snippets: dict[str, Snippet] = {}

    def create(self, draft: SnippetDraft) -> Snippet:
        snippet = Snippet(
            id=new_snippet_id(),
            name=draft.name or self._default_name(draft.kind),
            content=draft.content,
            comment=draft.comment,
            is_public=draft.is_public,
            kind=draft.kind,
        )
        self._snippets[snippet.id] = snippet
        self._publish_count(snippet.kind)
        logger.info("snippet_created", snippet_id=snippet.id, kind=snippet.kind.value)
        return snippet

    def get(self, snippet_id: str) -> Snippet | None:
        return self._snippets.get(snippet_id)

    def update(self, snippet_id: str, changes: SnippetUpdate) -> Snippet | None:
        current = self._snippets.get(snippet_id)
        if current is None:
            logger.warning("snippet_not_found", snippet_id=snippet_id)
            return None

        updated = current.model_copy(update=changes.model_dump(exclude_none=True))
        self._snippets[snippet_id] = updated
        logger.info("snippet_updated", snippet_id=snippet_id)
        return updated

    def delete(self, snippet_id: str) -> bool:
        snippet = self._snippets.pop(snippet_id, None)
        if snippet is None:
            return False
        self._publish_count(snippet.kind)
        logger.info("snippet_deleted", snippet_id=snippet_id)
        return True

    def list_by_visibility(
        self, is_public: bool, kind: SnippetKind | None = None
    ) -> list[Snippet]:
        return [
            s for s in self._snippets.values()
            if s.is_public == is_public and (kind is None or s.kind == kind)
        ]

    def _count(self, kind: SnippetKind) -> int:
        return sum(1 for s in self._snippets.values() if s.kind == kind)

    def _default_name(self, kind: SnippetKind) -> str:
        return f"{kind.value.title()} {self._count(kind) + 1}"

    def _publish_count(self, kind: SnippetKind) -> None:
        metrics_collector.set_snippet_count(kind.value, self._count(kind))

    def __len__(self) -> int:
        return len(self._snippets)
