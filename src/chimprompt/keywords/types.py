"""
Keyword Type Definitions
Immutable descriptions of every ChimPrompt keyword.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ArgumentShape(str, Enum):
    """Argument grammar a keyword accepts."""

    SINGLE_TOKEN = "single-token"
    TOKEN_PAIR = "token-pair"
    INDEX_RANGE = "index-range"
    ID_REFERENCE = "id-reference"
    KEYED_LIST = "keyed-list"
    VARIANT_PAIR = "variant-pair"
    BRACKETED_NAME = "bracketed-name"
    PARENTHESIZED_NAME = "parenthesized-name"
    POSITIONAL_REFERENCE = "positional-reference"


class NumericRule(str, Enum):
    """Which split parts must be integer indices."""

    NONE = "none"
    ALL = "all"
    LAST = "last"


class ArgumentRules(BaseModel):
    """Per-keyword refinements of a shape."""

    model_config = ConfigDict(frozen=True)

    numeric: NumericRule = NumericRule.NONE
    bracketed_alias: bool = Field(
        default=False, description="id-reference also accepts a [name] mold reference"
    )
    mixed_segments: bool = Field(
        default=False, description="variant-pair allows plain segments next to light()/dark()"
    )
    leading_members: bool = Field(
        default=False, description="delimited name may follow ';'-separated member segments"
    )


class Shortcut(BaseModel):
    """Key-combination alias used for direct-entry insertion."""

    model_config = ConfigDict(frozen=True)

    modifier: str = "Tab"
    key: str = Field(..., min_length=1, max_length=1)

    def __str__(self) -> str:
        return f"{self.modifier} + {self.key}"


class KeywordDefinition(BaseModel):
    """Keyword definition with grammar and shortcut"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=r"^[a-z]+$", description="Keyword token")
    shape: ArgumentShape
    description: str
    shortcut: Shortcut
    rules: ArgumentRules = Field(default_factory=ArgumentRules)
    examples: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def syntax(self) -> str:
        """Canonical insertion text for direct entry."""
        return f"*{self.id}* "
