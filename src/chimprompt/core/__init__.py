"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import ErrorKind, PromptError
from .logging_config import configure_logging, get_logger, LogContext
from .id import SnippetID, SessionID, new_snippet_id, new_session_id, is_valid


def create_container(settings: Settings | None = None, configure: bool = True):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, configure)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ErrorKind",
    "PromptError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # IDs
    "SnippetID",
    "SessionID",
    "new_snippet_id",
    "new_session_id",
    "is_valid",
    # DI
    "create_container",
]
