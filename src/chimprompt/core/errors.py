"""Error values returned by the grammar and the interaction engine.

Nothing in the engine raises for bad input: every operation returns a
``returns`` ``Result`` whose failure side carries a ``PromptError``.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Error taxonomy."""

    UNKNOWN_KEYWORD = "unknown_keyword"
    MALFORMED_ARGUMENT = "malformed_argument"
    DUPLICATE_KEY = "duplicate_key"
    REQUIRED_ANSWER_MISSING = "required_answer_missing"
    INVALID_WIZARD_TRANSITION = "invalid_wizard_transition"
    MODE_CONFLICT = "mode_conflict"


@dataclass(frozen=True)
class PromptError:
    """
    A recoverable failure with enough detail to render feedback.

    Attributes:
        kind: Error category
        reason: Human readable explanation
        keyword: Offending keyword id, when one is involved
        position: Zero-based clause index for parse failures
    """

    kind: ErrorKind
    reason: str
    keyword: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        prefix = f"*{self.keyword}*: " if self.keyword else ""
        suffix = f" (clause {self.position + 1})" if self.position is not None else ""
        return f"{prefix}{self.reason}{suffix}"

    def at(self, position: int) -> "PromptError":
        """Copy of this error pinned to a clause position."""
        return PromptError(self.kind, self.reason, self.keyword, position)


def unknown_keyword(keyword: str) -> PromptError:
    return PromptError(ErrorKind.UNKNOWN_KEYWORD, f"unknown keyword '{keyword}'", keyword)


def malformed(keyword: str | None, reason: str) -> PromptError:
    return PromptError(ErrorKind.MALFORMED_ARGUMENT, reason, keyword)


def duplicate_key(keyword: str, key: str) -> PromptError:
    return PromptError(ErrorKind.DUPLICATE_KEY, f"key '{key}' appears more than once", keyword)


def required_answer(question_id: str) -> PromptError:
    return PromptError(
        ErrorKind.REQUIRED_ANSWER_MISSING,
        f"an answer to '{question_id}' is required, please enter a value",
    )


def invalid_transition(reason: str) -> PromptError:
    return PromptError(ErrorKind.INVALID_WIZARD_TRANSITION, reason)


def mode_conflict(reason: str) -> PromptError:
    return PromptError(ErrorKind.MODE_CONFLICT, reason)
