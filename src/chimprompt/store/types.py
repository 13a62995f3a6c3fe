"""
Snippet Type Definitions
Saved prompts, forges and molds with validated content
"""

from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from returns.pipeline import is_successful

from ..engine.codec import parse


class SnippetKind(str, Enum):
    """What a saved snippet represents"""
    PROMPT = "prompt"
    FORGE = "forge"
    MOLD = "mold"


def _check_content(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("Prompt content is required")
    parsed = parse(stripped)
    if not is_successful(parsed):
        raise ValueError(f"Invalid ChimPrompt: {parsed.failure()}")
    return stripped


class SnippetDraft(BaseModel):
    """Input for creating a snippet; the store names it when ``name`` is omitted."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: str = Field(..., min_length=1)
    name: str | None = None
    comment: str | None = None
    is_public: bool = False
    kind: SnippetKind = SnippetKind.PROMPT

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Content must be a parseable prompt."""
        return _check_content(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Name, when given, cannot be blank."""
        if v is None:
            return v
        stripped = v.strip()
        if not stripped:
            raise ValueError("Name is required")
        return stripped


class SnippetUpdate(BaseModel):
    """Partial update; omitted fields are left alone."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: str | None = None
    comment: str | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str | None) -> str | None:
        return v if v is None else _check_content(v)


class Snippet(BaseModel):
    """Stored snippet"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque snippet identifier")
    name: str
    content: str
    comment: str | None = None
    is_public: bool = False
    kind: SnippetKind = SnippetKind.PROMPT
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
