"""ID Generation.

ULID-based identifiers for saved snippets and wizard sessions.

- K-sortable: creation order without timestamps
- Prefixed: ``snip_*`` and ``wiz_*`` make logs readable
"""

from datetime import datetime
from typing import NewType
from ulid import ULID

SnippetID = NewType("SnippetID", str)
"""Saved snippet identifier"""

SessionID = NewType("SessionID", str)
"""Wizard session identifier"""


class Prefix:
    """ID prefix constants."""

    SNIPPET = "snip"
    SESSION = "wiz"


def _generate_with_prefix(prefix: str) -> str:
    return f"{prefix}_{ULID()}"


def new_snippet_id() -> SnippetID:
    """Generate new snippet ID."""
    return SnippetID(_generate_with_prefix(Prefix.SNIPPET))


def new_session_id() -> SessionID:
    """Generate new wizard session ID."""
    return SessionID(_generate_with_prefix(Prefix.SESSION))


def is_valid(id_str: str) -> bool:
    """Check if string is a valid (optionally prefixed) ULID.

    Args:
        id_str: ID string to validate

    Returns:
        True if valid ULID format
    """
    ulid_part = id_str.split("_", 1)[1] if "_" in id_str else id_str
    if len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
        return True
    except ValueError:
        return False


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from prefixed ID, or None if unprefixed."""
    parts = id_str.split("_")
    return parts[0] if len(parts) == 2 else None


def extract_timestamp(id_str: str) -> datetime | None:
    """Extract creation time from an ID, or None if invalid."""
    if not is_valid(id_str):
        return None
    ulid_part = id_str.split("_", 1)[1] if "_" in id_str else id_str
    return ULID.from_str(ulid_part).datetime
