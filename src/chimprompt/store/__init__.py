"""
Saved Snippets
Collaborator interface for persisting finalized prompts.
"""

from .types import Snippet, SnippetDraft, SnippetKind, SnippetUpdate
from .memory import InMemorySnippetStore, SnippetStore

__all__ = [
    "Snippet",
    "SnippetDraft",
    "SnippetKind",
    "SnippetUpdate",
    "InMemorySnippetStore",
    "SnippetStore",
]
